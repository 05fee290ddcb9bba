# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Error subcodes and status-code mapping for the Airtable SDK.

The mapping from HTTP status to error kind and human readable description is
part of the client contract; callers match on ``subcode`` and ``kind``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_402 = "http_402"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_413 = "http_413"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"

ALL_HTTP_SUBCODES = {
    HTTP_400,
    HTTP_401,
    HTTP_402,
    HTTP_403,
    HTTP_404,
    HTTP_413,
    HTTP_422,
    HTTP_429,
    HTTP_500,
    HTTP_502,
    HTTP_503,
}

# Validation subcodes
VALIDATION_TABLE_NAME_MISSING = "validation_table_name_missing"
VALIDATION_RECORD_ID_MISSING = "validation_record_id_missing"
VALIDATION_BASE_ID_MISSING = "validation_base_id_missing"
VALIDATION_INVALID_FIELDS = "validation_invalid_fields"
VALIDATION_INVALID_PARAMETER = "validation_invalid_parameter"
VALIDATION_INVALID_CONFIG = "validation_invalid_config"

# Transport / decode subcodes
TRANSPORT_REQUEST_FAILED = "transport_request_failed"
DECODE_INVALID_JSON = "decode_invalid_json"
DECODE_UNEXPECTED_SHAPE = "decode_unexpected_shape"


class ClientErrorKind(str, Enum):
    """Named kinds for 4xx responses the API documents."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    PAYMENT_REQUIRED = "payment_required"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    REQUEST_ENTITY_TOO_LARGE = "request_entity_too_large"
    INVALID_REQUEST = "invalid_request"


class ServerErrorKind(str, Enum):
    """Named kinds for 5xx responses the API documents."""

    INTERNAL_SERVER_ERROR = "internal_server_error"
    BAD_GATEWAY = "bad_gateway"
    SERVICE_UNAVAILABLE = "service_unavailable"


CLIENT_ERROR_KINDS: Dict[int, ClientErrorKind] = {
    400: ClientErrorKind.BAD_REQUEST,
    401: ClientErrorKind.UNAUTHORIZED,
    402: ClientErrorKind.PAYMENT_REQUIRED,
    403: ClientErrorKind.FORBIDDEN,
    404: ClientErrorKind.NOT_FOUND,
    413: ClientErrorKind.REQUEST_ENTITY_TOO_LARGE,
    422: ClientErrorKind.INVALID_REQUEST,
}

SERVER_ERROR_KINDS: Dict[int, ServerErrorKind] = {
    500: ServerErrorKind.INTERNAL_SERVER_ERROR,
    502: ServerErrorKind.BAD_GATEWAY,
    503: ServerErrorKind.SERVICE_UNAVAILABLE,
}

# 502 and 503 are documented by the API as safe to retry with backoff.
RETRY_SAFE_STATUSES = frozenset({502, 503})

STATUS_DESCRIPTIONS: Dict[int, str] = {
    400: "The request encoding is invalid; the request can't be parsed as a valid JSON",
    401: "Accessing a protected resource without authorization or with invalid credentials",
    402: (
        "The account associated with the API key making requests hits a quota "
        "that can be increased by upgrading the Airtable account plan"
    ),
    403: "Accessing a protected resource with API credentials that don't have access to that resource",
    404: (
        "Route or resource is not found. This error is returned when the request hits an "
        "undefined route, or if the resource doesn't exist (e.g. has been deleted)"
    ),
    413: (
        "The request exceeded the maximum allowed payload size. "
        "You shouldn't encounter this under normal use"
    ),
    422: (
        "The request data is invalid. This includes most of the base-specific validations. "
        "You will receive a detailed error message and code pointing to the exact issue"
    ),
    429: (
        "The API is limited to 5 requests per second per base. If you exceed this rate, you will "
        "receive a 429 status code and will need to wait 30 seconds before subsequent requests will succeed"
    ),
    500: "The server encountered an unexpected condition",
    502: (
        "Airtable's servers are restarting or an unexpected outage is in progress. You should "
        "generally not receive this error, and requests are safe to retry"
    ),
    503: (
        "The server could not process your request in time. The server could be temporarily "
        "unavailable, or it could have timed out processing your request. You should retry "
        "the request with backoffs"
    ),
}


def _http_subcode(status: int) -> str:
    """Return the ``http_<status>`` subcode for any status code."""
    return f"http_{status}"


__all__ = [
    "ClientErrorKind",
    "ServerErrorKind",
    "CLIENT_ERROR_KINDS",
    "SERVER_ERROR_KINDS",
    "RETRY_SAFE_STATUSES",
    "STATUS_DESCRIPTIONS",
]
