# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed client for the Airtable REST API.

Quick start::

    from airtable_sdk import AirtableClient, EndOfList

    with AirtableClient("appXXXXXXXXXXXXXX", token) as client:
        pager = client.records.pages("Tasks", page_size=50)
        for page in pager:
            for record in page:
                print(record.id, record.get("Name"))
"""

from .client import AirtableClient
from .core.config import AirtableConfig
from .core.errors import (
    AirtableError,
    ClientError,
    DecodeError,
    EndOfList,
    HttpError,
    RateLimitExceeded,
    ServerError,
    TransportError,
    UnknownStatusError,
    ValidationError,
)
from .data._pager import ListPager, PagerState
from .models.parameters import ListParameters, Sort, SortDirection
from .models.record import Attachment, Record, RecordList

__version__ = "0.1.0"

__all__ = [
    "AirtableClient",
    "AirtableConfig",
    "AirtableError",
    "ClientError",
    "DecodeError",
    "EndOfList",
    "HttpError",
    "RateLimitExceeded",
    "ServerError",
    "TransportError",
    "UnknownStatusError",
    "ValidationError",
    "ListPager",
    "PagerState",
    "ListParameters",
    "Sort",
    "SortDirection",
    "Attachment",
    "Record",
    "RecordList",
]
