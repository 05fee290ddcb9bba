# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Airtable SDK.

This module contains the foundational components including authentication,
configuration, HTTP transport, and error handling.
"""

from ._error_codes import ClientErrorKind, ServerErrorKind
from .config import AirtableConfig
from .errors import (
    AirtableError,
    ValidationError,
    TransportError,
    DecodeError,
    HttpError,
    ClientError,
    RateLimitExceeded,
    ServerError,
    UnknownStatusError,
    EndOfList,
)

__all__ = [
    "ClientErrorKind",
    "ServerErrorKind",
    "AirtableConfig",
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
