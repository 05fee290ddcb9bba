# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional, Union

import requests

from azure.core.credentials import AzureKeyCredential

from .core._auth import _AuthManager
from .core._error_codes import VALIDATION_BASE_ID_MISSING
from .core._http import Transport
from .core.config import AirtableConfig
from .core.errors import ValidationError
from .data._airtable import _AirtableClient
from .operations.bases import BaseOperations
from .operations.records import RecordOperations


class AirtableClient:
    """
    High-level client for one Airtable base.

    The client validates input, injects authentication, absorbs rate limiting
    (HTTP 429) with a bounded fixed-delay retry, and maps every other failure
    to a structured :class:`~airtable_sdk.core.errors.AirtableError`.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager pools connections through a
        :class:`requests.Session` that is closed on exit::

            with AirtableClient("appXXXXXXXXXXXXXX", token) as client:
                record = client.records.create("Tasks", {"Name": "Contoso"})

    **Without Context Manager**:
        Requests go through :func:`requests.request` unless a session is
        injected. Call ``close()`` when done::

            client = AirtableClient("appXXXXXXXXXXXXXX", token)
            try:
                page = client.records.list("Tasks")
            finally:
                client.close()

    Operations are organized under namespaces:

    - ``client.records``: list, pages, iterate, get, create, update, delete
    - ``client.bases``: base listing and table schema

    :param base_id: Base identifier, e.g. ``"appXXXXXXXXXXXXXX"``.
    :type base_id: :class:`str`
    :param credential: API token or ``AzureKeyCredential`` holding it. Updating the
        credential's key takes effect on the next request.
    :type credential: :class:`str` | ~azure.core.credentials.AzureKeyCredential
    :param config: Optional configuration for endpoint, timeouts, rate-limit retries and logging.
        If not provided, defaults are loaded from :meth:`~airtable_sdk.core.config.AirtableConfig.from_env`.
    :type config: ~airtable_sdk.core.config.AirtableConfig or None
    :param client_secret: Optional secondary secret sent as ``X-Airtable-Client-Secret``.
    :type client_secret: :class:`str` or None
    :param session: Optional transport shared across calls. The client never closes
        a session it did not create.
    :type session: :class:`requests.Session` or None

    :raises ~airtable_sdk.core.errors.ValidationError: If ``base_id`` is missing or empty.
    """

    def __init__(
        self,
        base_id: str,
        credential: Union[str, AzureKeyCredential],
        config: Optional[AirtableConfig] = None,
        *,
        client_secret: Optional[str] = None,
        session: Optional[Transport] = None,
    ) -> None:
        if not isinstance(base_id, str) or not base_id.strip():
            raise ValidationError("base_id is required.", subcode=VALIDATION_BASE_ID_MISSING)
        self.auth = _AuthManager(credential, client_secret=client_secret)
        self._base_id = base_id.strip()
        self._config = config or AirtableConfig.from_env()
        self._executor: Optional[_AirtableClient] = None
        self._session: Optional[Transport] = session
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.records = RecordOperations(self)
        self.bases = BaseOperations(self)

    @property
    def base_id(self) -> str:
        return self._base_id

    @property
    def config(self) -> AirtableConfig:
        return self._config

    def __enter__(self) -> "AirtableClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was injected.

        :return: The client instance.
        :rtype: AirtableClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild the executor so it picks up the session.
            self._release_executor()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Closes the HTTP session if the client created it. Safe to call
        multiple times.
        """
        self._release_executor()
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _release_executor(self) -> None:
        if self._executor is not None:
            self._executor.close()
            self._executor = None

    def _get_executor(self) -> _AirtableClient:
        """
        Get or create the internal request executor.

        Construction is deferred until the first operation. When a session exists
        (injected or from the context manager) it is passed through for
        connection pooling.

        :return: The lazily-initialized executor.
        :rtype: ~airtable_sdk.data._airtable._AirtableClient
        """
        if self._executor is None:
            self._executor = _AirtableClient(
                self.auth,
                self._base_id,
                self._config,
                session=self._session,
            )
        return self._executor
