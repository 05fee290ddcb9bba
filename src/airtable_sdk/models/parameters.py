# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request parameter models for record operations.

:class:`ListParameters` carries everything a list call needs, including the
pagination cursor; :class:`RequestOptions` carries the subset accepted by
single-record calls. Both render to ordered ``(key, value)`` query pairs so
repeated keys such as ``fields[]`` keep their order on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union
from urllib.parse import quote, urlencode

from ..common.constants import (
    PARAM_FIELDS,
    PARAM_FILTER_BY_FORMULA,
    PARAM_MAX_RECORDS,
    PARAM_OFFSET,
    PARAM_PAGE_SIZE,
    PARAM_RETURN_FIELDS_BY_FIELD_ID,
    PARAM_SORT_DIRECTION,
    PARAM_SORT_FIELD,
    PARAM_TIME_ZONE,
    PARAM_USER_LOCALE,
    PARAM_VIEW,
)

QueryPairs = List[Tuple[str, str]]


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class Sort:
    """
    One sort key.

    :param field: Field name (or id) to sort on.
    :type field: str
    :param direction: Sort direction, ascending by default.
    :type direction: SortDirection
    """

    field: str
    direction: SortDirection = SortDirection.ASCENDING


SortSpec = Union[Sort, str, Tuple[str, Union[SortDirection, str]]]


def _coerce_sort(item: SortSpec) -> Sort:
    if isinstance(item, Sort):
        return item
    if isinstance(item, str):
        return Sort(item)
    name, direction = item
    return Sort(name, SortDirection(direction))


@dataclass(frozen=True)
class RequestOptions:
    """
    Formatting options accepted by get, create and update.

    :param user_locale: Locale used to format dates when the cell format is ``string``.
    :type user_locale: str | None
    :param time_zone: Time zone used to format dates when the cell format is ``string``.
    :type time_zone: str | None
    :param return_fields_by_field_id: Key ``fields`` by field id instead of name.
    :type return_fields_by_field_id: bool | None
    """

    user_locale: Optional[str] = None
    time_zone: Optional[str] = None
    return_fields_by_field_id: Optional[bool] = None

    def to_query(self) -> QueryPairs:
        pairs: QueryPairs = []
        if self.user_locale:
            pairs.append((PARAM_USER_LOCALE, self.user_locale))
        if self.time_zone:
            pairs.append((PARAM_TIME_ZONE, self.time_zone))
        if self.return_fields_by_field_id is not None:
            pairs.append((PARAM_RETURN_FIELDS_BY_FIELD_ID, "true" if self.return_fields_by_field_id else "false"))
        return pairs


@dataclass
class ListParameters:
    """
    Parameters for a list call against one table.

    Only parameters with a value are sent. ``offset`` is the opaque
    continuation cursor; the empty string means "from the start".

    :param table: Table name or id. Required.
    :type table: str
    :param max_records: Total number of records to return across all pages.
    :type max_records: int | None
    :param page_size: Records per page (the API caps this at 100).
    :type page_size: int | None
    :param view: View name or id restricting and ordering the records.
    :type view: str | None
    :param fields: Field names to include, in request order.
    :type fields: list[str]
    :param sort: Sort keys, applied in order.
    :type sort: list[Sort]
    :param filter_by_formula: Formula a record must satisfy to be included.
    :type filter_by_formula: str | None
    :param offset: Continuation cursor returned by the previous page.
    :type offset: str

    Example::

        params = ListParameters(
            "Tasks",
            fields=["Name", "Status"],
            sort=[Sort("Name", SortDirection.DESCENDING)],
        )
        params.query_string()
        # 'fields[]=Name&fields[]=Status&sort[0][field]=Name&sort[0][direction]=desc'
    """

    table: str
    max_records: Optional[int] = None
    page_size: Optional[int] = None
    view: Optional[str] = None
    fields: List[str] = field(default_factory=list)
    sort: List[Sort] = field(default_factory=list)
    filter_by_formula: Optional[str] = None
    user_locale: Optional[str] = None
    time_zone: Optional[str] = None
    return_fields_by_field_id: Optional[bool] = None
    offset: str = ""

    def __post_init__(self) -> None:
        self.fields = list(self.fields or [])
        self.sort = [_coerce_sort(s) for s in (self.sort or [])]
        self.offset = self.offset or ""

    @classmethod
    def build(
        cls,
        table: str,
        *,
        max_records: Optional[int] = None,
        page_size: Optional[int] = None,
        view: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
        sort: Optional[Sequence[SortSpec]] = None,
        filter_by_formula: Optional[str] = None,
        user_locale: Optional[str] = None,
        time_zone: Optional[str] = None,
        return_fields_by_field_id: Optional[bool] = None,
        offset: Optional[str] = None,
    ) -> "ListParameters":
        """Keyword-only constructor accepting loose sort specs such as ``("Name", "desc")``."""
        return cls(
            table=table,
            max_records=max_records,
            page_size=page_size,
            view=view,
            fields=list(fields or []),
            sort=[_coerce_sort(s) for s in (sort or [])],
            filter_by_formula=filter_by_formula,
            user_locale=user_locale,
            time_zone=time_zone,
            return_fields_by_field_id=return_fields_by_field_id,
            offset=offset or "",
        )

    def to_query(self) -> QueryPairs:
        """
        Render the parameters as ordered query pairs.

        :return: ``(key, value)`` pairs; ``fields[]`` repeats in order and sort
            keys are indexed from 0.
        :rtype: list[tuple[str, str]]
        """
        pairs: QueryPairs = []
        if self.offset:
            pairs.append((PARAM_OFFSET, self.offset))
        if self.max_records is not None:
            pairs.append((PARAM_MAX_RECORDS, str(self.max_records)))
        if self.page_size is not None:
            pairs.append((PARAM_PAGE_SIZE, str(self.page_size)))
        if self.view:
            pairs.append((PARAM_VIEW, self.view))
        for name in self.fields:
            pairs.append((PARAM_FIELDS, name))
        for index, s in enumerate(self.sort):
            pairs.append((PARAM_SORT_FIELD.format(index=index), s.field))
            pairs.append((PARAM_SORT_DIRECTION.format(index=index), SortDirection(s.direction).value))
        if self.filter_by_formula:
            pairs.append((PARAM_FILTER_BY_FORMULA, self.filter_by_formula))
        pairs.extend(
            RequestOptions(self.user_locale, self.time_zone, self.return_fields_by_field_id).to_query()
        )
        return pairs

    def query_string(self) -> str:
        """Render :meth:`to_query` as a query string, leaving brackets unescaped."""
        return urlencode(self.to_query(), safe="[]", quote_via=quote)
