# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Record data model for Airtable tables.

Provides a typed representation of Airtable records with dict-like access to
the record's fields, plus the list-response envelope used for pagination.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

# JSON-shaped cell value: the client has no static knowledge of a table's schema.
FieldValue = Union[str, int, float, bool, None, List["FieldValue"], Dict[str, "FieldValue"]]

# Type aliases for semantic clarity
RecordId = str  # e.g., "recXXXXXXXXXXXXXX"
TableName = str  # table name or table id


def _parse_created_time(value: Any) -> Optional[_dt.datetime]:
    if not isinstance(value, str) or not value:
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    return _dt.datetime.fromisoformat(text)


@dataclass
class Record:
    """
    Typed record representation.

    :param id: Record identifier.
    :type id: str
    :param created_time: Creation timestamp reported by the API.
    :type created_time: ~datetime.datetime | None
    :param fields: Cell values keyed by field name (or field id when requested).
    :type fields: dict[str, FieldValue]

    Example:
        Structured access::

            record = client.records.get("Tasks", "rec123")
            print(record.id)
            print(record.created_time)

        Dict-like access::

            print(record["Name"])
            record["Status"] = "Done"
            for name in record:
                print(name, record[name])
    """

    id: RecordId
    created_time: Optional[_dt.datetime] = None
    fields: Dict[str, FieldValue] = field(default_factory=dict)

    def __getitem__(self, key: str) -> FieldValue:
        return self.fields[key]

    def __setitem__(self, key: str, value: FieldValue) -> None:
        self.fields[key] = value

    def __delitem__(self, key: str) -> None:
        del self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str, default: FieldValue = None) -> FieldValue:
        """
        Get a field value with optional default.

        Airtable omits empty cells from responses, so a missing key usually
        means "empty" rather than "unknown field".
        """
        return self.fields.get(key, default)

    def keys(self):
        return self.fields.keys()

    def values(self):
        return self.fields.values()

    def items(self):
        return self.fields.items()

    def attachments(self, key: str) -> List["Attachment"]:
        """
        Return the attachments stored in an attachment field.

        :param key: Attachment field name.
        :type key: str
        :return: Parsed attachments; empty when the cell is empty.
        :rtype: list[Attachment]
        :raises TypeError: If the cell does not hold a list of attachment objects.
        """
        raw = self.fields.get(key)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
            raise TypeError(f"field {key!r} does not hold attachments")
        return [Attachment.from_api_response(item) for item in raw]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the API's wire shape.

        :return: Dictionary with ``id``, ``createdTime`` and ``fields``.
        :rtype: dict[str, Any]
        """
        created = None
        if self.created_time is not None:
            utc = self.created_time.astimezone(_dt.timezone.utc)
            created = utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
        return {"id": self.id, "createdTime": created, "fields": dict(self.fields)}

    @classmethod
    def from_api_response(cls, response_data: Mapping[str, Any]) -> "Record":
        """
        Create a Record from an API response object.

        :param response_data: Raw record object (``id``, ``createdTime``, ``fields``).
        :type response_data: dict[str, Any]
        :return: Record instance.
        :rtype: Record
        :raises ValueError: If the object has no string ``id`` or ``fields`` is not an object.
        """
        if not isinstance(response_data, Mapping):
            raise ValueError("record must be a JSON object")
        rid = response_data.get("id")
        if not isinstance(rid, str) or not rid:
            raise ValueError("record is missing its 'id'")
        fields = response_data.get("fields", {})
        if fields is None:
            fields = {}
        if not isinstance(fields, Mapping):
            raise ValueError(f"record {rid} has non-object 'fields'")
        return cls(
            id=rid,
            created_time=_parse_created_time(response_data.get("createdTime")),
            fields=dict(fields),
        )


@dataclass
class RecordList:
    """
    One page of a list response.

    :param records: Records in server order.
    :type records: list[Record]
    :param offset: Continuation cursor. Non-empty exactly when more pages remain.
    :type offset: str
    """

    records: List[Record] = field(default_factory=list)
    offset: str = ""

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def has_more(self) -> bool:
        return bool(self.offset)

    @classmethod
    def from_api_response(cls, response_data: Mapping[str, Any]) -> "RecordList":
        """
        Decode a ``{"records": [...], "offset": "..."}`` envelope.

        :raises ValueError: If the envelope or any record has the wrong shape.
        """
        if not isinstance(response_data, Mapping):
            raise ValueError("list response must be a JSON object")
        raw_records = response_data.get("records", [])
        if not isinstance(raw_records, list):
            raise ValueError("'records' must be a list")
        offset = response_data.get("offset") or ""
        if not isinstance(offset, str):
            raise ValueError("'offset' must be a string")
        return cls(records=[Record.from_api_response(r) for r in raw_records], offset=offset)


@dataclass(frozen=True)
class Thumbnail:
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class Attachment:
    """
    Attachment object stored in an attachment field.

    :param id: Attachment identifier.
    :param url: Download URL (expires after a few hours).
    :param filename: Original file name.
    :param size: Size in bytes.
    :param type: MIME type.
    :param width: Image width in pixels, images only.
    :param height: Image height in pixels, images only.
    :param thumbnails: ``small``/``large``/``full`` thumbnails, images only.
    """

    id: str
    url: str
    filename: str = ""
    size: Optional[int] = None
    type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumbnails: Dict[str, Thumbnail] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Mapping[str, Any]) -> "Attachment":
        thumbs: Dict[str, Thumbnail] = {}
        for name, t in (data.get("thumbnails") or {}).items():
            if isinstance(t, Mapping) and isinstance(t.get("url"), str):
                thumbs[name] = Thumbnail(url=t["url"], width=t.get("width"), height=t.get("height"))
        return cls(
            id=str(data.get("id", "")),
            url=str(data.get("url", "")),
            filename=str(data.get("filename", "")),
            size=data.get("size"),
            type=data.get("type"),
            width=data.get("width"),
            height=data.get("height"),
            thumbnails=thumbs,
        )
