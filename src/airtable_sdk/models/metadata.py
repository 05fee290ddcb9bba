# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Base and table schema models for the Airtable metadata API.

Provides typed representations of the ``meta/bases`` and
``meta/bases/<id>/tables`` responses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


def _require_str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{what} is missing '{key}'")
    return value


@dataclass(frozen=True)
class BaseInfo:
    """
    A base visible to the current credential.

    :param id: Base identifier (``app...``).
    :type id: str
    :param name: Base name.
    :type name: str
    :param permission_level: Access level of the credential (``read``, ``comment``, ``edit``, ``create``).
    :type permission_level: str
    """

    id: str
    name: str
    permission_level: str = ""

    @classmethod
    def from_api_response(cls, data: Mapping[str, Any]) -> "BaseInfo":
        return cls(
            id=_require_str(data, "id", "base"),
            name=_require_str(data, "name", "base"),
            permission_level=str(data.get("permissionLevel") or ""),
        )


@dataclass(frozen=True)
class FieldSchema:
    """
    Field metadata.

    :param id: Field identifier (``fld...``).
    :param name: Field name.
    :param type: Field type, e.g. ``singleLineText`` or ``multipleRecordLinks``.
    :param description: Optional field description.
    :param options: Type specific options (linked table, inverse link field, ...).
    """

    id: str
    name: str
    type: str
    description: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def linked_table_id(self) -> Optional[str]:
        """Linked table id for ``multipleRecordLinks`` fields."""
        value = self.options.get("linkedTableId")
        return value if isinstance(value, str) else None

    @classmethod
    def from_api_response(cls, data: Mapping[str, Any]) -> "FieldSchema":
        options = data.get("options") or {}
        return cls(
            id=_require_str(data, "id", "field"),
            name=_require_str(data, "name", "field"),
            type=_require_str(data, "type", "field"),
            description=data.get("description") or None,
            options=dict(options) if isinstance(options, Mapping) else {},
        )


@dataclass(frozen=True)
class ViewSchema:
    id: str
    name: str
    type: str

    @classmethod
    def from_api_response(cls, data: Mapping[str, Any]) -> "ViewSchema":
        return cls(
            id=_require_str(data, "id", "view"),
            name=_require_str(data, "name", "view"),
            type=_require_str(data, "type", "view"),
        )


@dataclass(frozen=True)
class TableSchema:
    """
    Table metadata.

    :param id: Table identifier (``tbl...``).
    :type id: str
    :param name: Table name.
    :type name: str
    :param primary_field_id: Id of the table's primary field.
    :type primary_field_id: str
    :param fields: Field metadata in display order.
    :type fields: list[FieldSchema]
    :param views: View metadata.
    :type views: list[ViewSchema]
    :param description: Optional table description.
    :type description: str | None

    Example::

        for table in client.bases.schema():
            print(table.name, [f.name for f in table.fields])
    """

    id: str
    name: str
    primary_field_id: str = ""
    fields: List[FieldSchema] = field(default_factory=list)
    views: List[ViewSchema] = field(default_factory=list)
    description: Optional[str] = None

    @property
    def primary_field(self) -> Optional[FieldSchema]:
        for f in self.fields:
            if f.id == self.primary_field_id:
                return f
        return None

    def field_by_name(self, name: str) -> Optional[FieldSchema]:
        """Return the field named ``name`` (exact match), or ``None``."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @classmethod
    def from_api_response(cls, data: Mapping[str, Any]) -> "TableSchema":
        return cls(
            id=_require_str(data, "id", "table"),
            name=_require_str(data, "name", "table"),
            primary_field_id=str(data.get("primaryFieldId") or ""),
            fields=[FieldSchema.from_api_response(f) for f in data.get("fields") or []],
            views=[ViewSchema.from_api_response(v) for v in data.get("views") or []],
            description=data.get("description") or None,
        )
