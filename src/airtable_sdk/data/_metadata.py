# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Base and schema metadata operations for the Airtable REST API.

This module provides mixin functionality for the ``meta/bases`` endpoints.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import quote

from ..common.constants import META_BASE_TABLES_PATH, META_BASES_PATH, PARAM_OFFSET
from ..core._error_codes import VALIDATION_BASE_ID_MISSING
from ..core.errors import ValidationError
from ..models.metadata import BaseInfo, TableSchema


def _bases_page(data: Mapping[str, Any]) -> Tuple[List[BaseInfo], str]:
    if not isinstance(data, Mapping):
        raise ValueError("bases response must be a JSON object")
    raw = data.get("bases", [])
    if not isinstance(raw, list):
        raise ValueError("'bases' must be a list")
    return [BaseInfo.from_api_response(b) for b in raw], data.get("offset") or ""


def _tables(data: Mapping[str, Any]) -> List[TableSchema]:
    if not isinstance(data, Mapping):
        raise ValueError("schema response must be a JSON object")
    raw = data.get("tables", [])
    if not isinstance(raw, list):
        raise ValueError("'tables' must be a list")
    return [TableSchema.from_api_response(t) for t in raw]


class _MetadataOperationsMixin:
    """
    Mixin providing metadata lookups.

    This mixin is designed to be used with _AirtableClient and depends on:
    - self.base_id: The configured base identifier
    - self._request(): Method to execute a request with rate-limit handling
    - self._logger: Logger for the SDK
    """

    def _list_bases(self) -> List[BaseInfo]:
        """
        List every base the credential can access.

        Follows the endpoint's ``offset`` cursor until it is exhausted or stops
        advancing; each page is a separate call with its own rate-limit budget.

        :return: Bases in server order.
        :rtype: list[~airtable_sdk.models.metadata.BaseInfo]

        :raises HttpError: If the Web API request fails.
        """
        bases: List[BaseInfo] = []
        offset = ""
        while True:
            params = [(PARAM_OFFSET, offset)] if offset else []
            page, next_offset = self._request("GET", META_BASES_PATH, params=params, decode=_bases_page)
            bases.extend(page)
            if not next_offset:
                return bases
            if next_offset == offset:
                self._logger.warning("Base listing returned the same offset %r twice; stopping", offset)
                return bases
            offset = next_offset

    def _base_schema(self, base_id: Optional[str] = None) -> List[TableSchema]:
        """
        Fetch the table schema of a base.

        :param base_id: Base to describe; defaults to the client's base.
        :type base_id: ``str`` | ``None``

        :return: Tables with their fields and views.
        :rtype: list[~airtable_sdk.models.metadata.TableSchema]

        :raises ValidationError: If ``base_id`` is given but empty.
        :raises HttpError: If the Web API request fails.
        """
        if base_id is None:
            base_id = self.base_id
        if not isinstance(base_id, str) or not base_id.strip():
            raise ValidationError("base_id is required", subcode=VALIDATION_BASE_ID_MISSING)
        path = META_BASE_TABLES_PATH.format(base_id=quote(base_id, safe=""))
        return self._request("GET", path, decode=_tables)
