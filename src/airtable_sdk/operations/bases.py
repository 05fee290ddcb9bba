# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Base and schema metadata operations namespace."""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..models.metadata import BaseInfo, TableSchema

if TYPE_CHECKING:
    from ..client import AirtableClient


class BaseOperations:
    """
    Metadata operations, accessed via ``client.bases``.

    Some integrations must send a client secret with metadata calls; pass
    ``client_secret`` to :class:`~airtable_sdk.client.AirtableClient`.

    Example::

        for base in client.bases.list():
            print(base.id, base.name, base.permission_level)

        tables = client.bases.schema()
        print([t.name for t in tables])
    """

    def __init__(self, client: "AirtableClient") -> None:
        self._client = client

    def list(self) -> List[BaseInfo]:
        """
        List every base the credential can access.

        :return: Bases in server order, across all pages.
        :rtype: list[~airtable_sdk.models.metadata.BaseInfo]
        """
        return self._client._get_executor()._list_bases()

    def schema(self, base_id: Optional[str] = None) -> List[TableSchema]:
        """
        Fetch the tables, fields and views of a base.

        :param base_id: Base to describe. Defaults to the client's base.
        :type base_id: str or None
        :return: Table schemas.
        :rtype: list[~airtable_sdk.models.metadata.TableSchema]
        """
        return self._client._get_executor()._base_schema(base_id)
