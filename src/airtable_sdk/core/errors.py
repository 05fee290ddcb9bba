# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exception hierarchy for the Airtable SDK.

All failures raised by the client derive from :class:`AirtableError`, which
carries a stable ``code``/``subcode`` pair and a ``to_dict()`` view suitable for
logging. :class:`EndOfList` is the one exception that is not a failure: it is
the pager's clean termination signal.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import (
    ClientErrorKind,
    ServerErrorKind,
    HTTP_429,
    RETRY_SAFE_STATUSES,
    _http_subcode,
)


class AirtableError(Exception):
    """Base structured error for the Airtable SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = dict(details or {})
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(AirtableError):
    """Missing or malformed input, detected before any network I/O."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class TransportError(AirtableError):
    """The request never produced an HTTP response (DNS, connect, timeout, ...)."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="transport_error", subcode=subcode, details=details, source="client")


class DecodeError(AirtableError):
    """A successful response body did not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            code="decode_error",
            subcode=subcode,
            status_code=status_code,
            details=details,
            source="client",
        )


class HttpError(AirtableError):
    """
    Non-success HTTP response.

    :param diagnostic: Server supplied diagnostic text, decoded from the error
        body on a best-effort basis. Empty when the body carried nothing.
    :type diagnostic: str
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        diagnostic: str = "",
        is_transient: bool = False,
        subcode: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if diagnostic:
            d["diagnostic"] = diagnostic
        if method is not None:
            d["method"] = method
        if url is not None:
            d["url"] = url
        super().__init__(
            message,
            code="http_error",
            subcode=subcode or _http_subcode(status_code),
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )
        self.diagnostic = diagnostic


class ClientError(HttpError):
    """A documented 4xx response; ``kind`` names which one."""

    def __init__(self, message: str, status_code: int, kind: ClientErrorKind, **kwargs: Any) -> None:
        super().__init__(message, status_code, **kwargs)
        self.kind = kind


class RateLimitExceeded(HttpError):
    """
    429 responses persisted for every allowed attempt of a single call.

    ``attempts`` counts requests sent, not retries: with the default ceiling of
    5 the call made 5 requests and slept 4 times between them.
    """

    def __init__(self, message: str, *, attempts: int, **kwargs: Any) -> None:
        details = dict(kwargs.pop("details", None) or {})
        details["attempts"] = attempts
        super().__init__(message, 429, is_transient=True, subcode=HTTP_429, details=details, **kwargs)
        self.attempts = attempts


class ServerError(HttpError):
    """
    A documented 5xx response.

    ``retry_safe`` is set for 502 and 503, which the API documents as safe to
    retry. The client itself never retries them.
    """

    def __init__(self, message: str, status_code: int, kind: ServerErrorKind, **kwargs: Any) -> None:
        retry_safe = status_code in RETRY_SAFE_STATUSES
        super().__init__(message, status_code, is_transient=retry_safe, **kwargs)
        self.kind = kind
        self.retry_safe = retry_safe


class UnknownStatusError(HttpError):
    """Any status code outside the documented set."""


class EndOfList(Exception):
    """Raised by :meth:`ListPager.next` once the last page has been returned."""

    def __init__(self, message: str = "no more pages in list") -> None:
        super().__init__(message)


__all__ = [
    "AirtableError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "HttpError",
    "ClientError",
    "RateLimitExceeded",
    "ServerError",
    "UnknownStatusError",
    "EndOfList",
]
