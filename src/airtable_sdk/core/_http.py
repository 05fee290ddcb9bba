# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Thin HTTP transport wrapper with timeout handling and optional session support.

This module provides :class:`~airtable_sdk.core._http._HttpClient`, which issues
exactly one HTTP request per call through either a caller supplied transport
(anything exposing ``request(method, url, **kwargs)``, such as a
:class:`requests.Session` or a test double) or the module level
:func:`requests.request`. It never retries: rate-limit handling lives in the
executor, and network failures surface to the caller.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

import requests


class Transport(Protocol):
    """Anything that can send one HTTP request, e.g. :class:`requests.Session`."""

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response: ...


class _HttpClient:
    """
    HTTP client with a per-attempt timeout and optional session support.

    :param timeout: Request timeout in seconds applied to every attempt. Default is 30.
    :type timeout: :class:`float` | None
    :param session: Optional transport for connection pooling or testing. If provided,
        all requests go through ``session.request``.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[Transport] = None,
    ) -> None:
        self.default_timeout: float = timeout if timeout is not None else 30.0
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute a single HTTP request.

        :param method: HTTP method (GET, POST, PATCH, DELETE).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, params, data.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the request fails before a response arrives.
        """
        kwargs.setdefault("timeout", self.default_timeout)
        if self._session is not None:
            return self._session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    def close(self) -> None:
        """
        Release the session reference.

        The session itself is owned by whoever created it; :class:`AirtableClient`
        closes the sessions it creates. Safe to call multiple times.
        """
        self._session = None
