# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Cursor-tracking pager over a single list operation.

A :class:`ListPager` owns a private copy of the list parameters and the last
page it received. Each :meth:`ListPager.next` call resumes from the cursor of
that page; the first page whose cursor is empty is the last one, after which
the pager raises :class:`~airtable_sdk.core.errors.EndOfList` forever.

A failed call leaves the pager exactly as it was, so ``next()`` can simply be
called again. Pagers are not thread-safe; give each consumer its own.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable, Iterator, List

from ..core.errors import EndOfList
from ..models.parameters import ListParameters
from ..models.record import Record, RecordList

ListOperation = Callable[[ListParameters], RecordList]


class PagerState(str, Enum):
    AWAITING_FIRST_PAGE = "awaiting_first_page"
    AWAITING_NEXT_PAGE = "awaiting_next_page"
    DONE = "done"


class ListPager:
    """
    Page-at-a-time iterator over a list operation.

    :param list_operation: Callable performing one list request, typically
        ``_AirtableClient._list``.
    :type list_operation: ~typing.Callable[[ListParameters], RecordList]
    :param params: Fixed list parameters. Any ``offset`` on them is ignored;
        pagination always starts from the first page.
    :type params: ~airtable_sdk.models.parameters.ListParameters

    Example:
        Explicit loop::

            pager = client.records.pages("Tasks", page_size=50)
            while True:
                try:
                    records = pager.next()
                except EndOfList:
                    break
                for record in records:
                    print(record.id)

        Python iteration::

            for page in client.records.pages("Tasks"):
                print(len(page))
    """

    def __init__(self, list_operation: ListOperation, params: ListParameters) -> None:
        self._list = list_operation
        self._params = dataclasses.replace(params, fields=list(params.fields), sort=list(params.sort), offset="")
        self._last = RecordList()
        self._done = False
        self._pages = 0

    @property
    def offset(self) -> str:
        """Cursor of the last page received; empty before the first page and after the last."""
        return self._last.offset

    @property
    def done(self) -> bool:
        return self._done

    @property
    def state(self) -> PagerState:
        if self._done:
            return PagerState.DONE
        if self._pages == 0:
            return PagerState.AWAITING_FIRST_PAGE
        return PagerState.AWAITING_NEXT_PAGE

    @property
    def params(self) -> ListParameters:
        """The parameters of the most recent request, including its cursor."""
        return self._params

    def next(self) -> List[Record]:
        """
        Fetch the next page.

        :return: Records of the page, in server order.
        :rtype: list[~airtable_sdk.models.record.Record]
        :raises ~airtable_sdk.core.errors.EndOfList: If the last page was already returned.
            No request is made.
        :raises ~airtable_sdk.core.errors.AirtableError: Propagated unchanged from the list
            operation; the pager state is not modified.
        """
        if self._done:
            raise EndOfList()

        # The outbound cursor comes from the previous page only.
        params = dataclasses.replace(self._params, offset=self._last.offset)
        page = self._list(params)

        self._params = params
        self._last = page
        self._pages += 1
        self._done = not page.offset
        return page.records

    def __iter__(self) -> Iterator[List[Record]]:
        while True:
            try:
                yield self.next()
            except EndOfList:
                return

    def __repr__(self) -> str:
        return f"ListPager(table={self._params.table!r}, state={self.state.value!r}, offset={self.offset!r})"
