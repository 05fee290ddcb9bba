# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Record CRUD and listing operations namespace."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional, Sequence, TYPE_CHECKING

from ..data._pager import ListPager
from ..models.parameters import ListParameters, RequestOptions, SortSpec
from ..models.record import Record, RecordList

if TYPE_CHECKING:
    from ..client import AirtableClient


class RecordOperations:
    """
    Record operations on the tables of the client's base.

    Accessed via ``client.records``. Every method validates the table name
    before any request is made.

    Example:
        Single record operations::

            record = client.records.create("Tasks", {"Name": "Write docs"})
            client.records.update("Tasks", record.id, {"Status": "Done"})
            record = client.records.get("Tasks", record.id)
            client.records.delete("Tasks", record.id)

        Listing::

            page = client.records.list("Tasks", page_size=10)
            for record in client.records.iterate("Tasks", filter_by_formula="{Status} = 'Open'"):
                print(record["Name"])
    """

    def __init__(self, client: "AirtableClient") -> None:
        """
        Initialize RecordOperations.

        :param client: Parent AirtableClient instance.
        :type client: AirtableClient
        """
        self._client = client

    def list(
        self,
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
    ) -> RecordList:
        """
        Fetch a single page of records.

        :param table: Table name or id.
        :type table: str
        :param max_records: Total number of records to return across all pages.
        :type max_records: int or None
        :param page_size: Records per page (at most 100).
        :type page_size: int or None
        :param view: View name or id.
        :type view: str or None
        :param fields: Field names to include, in order.
        :type fields: list[str] or None
        :param sort: Sort keys as :class:`~airtable_sdk.models.parameters.Sort`, field names,
            or ``(field, direction)`` tuples.
        :type sort: list or None
        :param filter_by_formula: Formula records must satisfy.
        :type filter_by_formula: str or None
        :param offset: Cursor from a previous page; omit for the first page.
        :type offset: str or None
        :return: The page and its continuation cursor.
        :rtype: ~airtable_sdk.models.record.RecordList

        :raises ~airtable_sdk.core.errors.ValidationError: If ``table`` is empty.
        """
        params = ListParameters.build(
            table,
            max_records=max_records,
            page_size=page_size,
            view=view,
            fields=fields,
            sort=sort,
            filter_by_formula=filter_by_formula,
            user_locale=user_locale,
            time_zone=time_zone,
            return_fields_by_field_id=return_fields_by_field_id,
            offset=offset,
        )
        return self._client._get_executor()._list(params)

    def pages(
        self,
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
    ) -> ListPager:
        """
        Create a pager over the table. Accepts the same options as :meth:`list`
        except ``offset``.

        No request is made until the first :meth:`ListPager.next` call, so an
        empty table name surfaces there, before any network I/O.

        :return: A fresh pager positioned before the first page.
        :rtype: ~airtable_sdk.data._pager.ListPager
        """
        params = ListParameters.build(
            table,
            max_records=max_records,
            page_size=page_size,
            view=view,
            fields=fields,
            sort=sort,
            filter_by_formula=filter_by_formula,
            user_locale=user_locale,
            time_zone=time_zone,
            return_fields_by_field_id=return_fields_by_field_id,
        )
        return ListPager(self._client._get_executor()._list, params)

    def iterate(self, table: str, **options: Any) -> Iterator[Record]:
        """
        Yield every record of the table, fetching pages lazily.

        Accepts the same keyword options as :meth:`pages`.

        Example::

            names = [r.get("Name") for r in client.records.iterate("Tasks", view="Open")]
        """
        for page in self.pages(table, **options):
            yield from page

    def get(
        self,
        table: str,
        record_id: str,
        *,
        user_locale: Optional[str] = None,
        time_zone: Optional[str] = None,
        return_fields_by_field_id: Optional[bool] = None,
    ) -> Record:
        """
        Fetch a single record by id.

        :param table: Table name or id.
        :type table: str
        :param record_id: Record id.
        :type record_id: str
        :return: The record.
        :rtype: ~airtable_sdk.models.record.Record

        :raises ~airtable_sdk.core.errors.ClientError: ``kind`` is ``NOT_FOUND`` if the record does not exist.
        """
        options = RequestOptions(user_locale, time_zone, return_fields_by_field_id)
        return self._client._get_executor()._get(table, record_id, options)

    def create(
        self,
        table: str,
        fields: Mapping[str, Any],
        *,
        typecast: bool = False,
        return_fields_by_field_id: Optional[bool] = None,
    ) -> Record:
        """
        Create a record.

        :param table: Table name or id.
        :type table: str
        :param fields: Cell values keyed by field name.
        :type fields: dict[str, Any]
        :param typecast: Let the API convert string values to the field types
            (e.g. create missing select options).
        :type typecast: bool
        :return: The created record as returned by the API.
        :rtype: ~airtable_sdk.models.record.Record

        Example::

            record = client.records.create("Tasks", {"Name": "Ship it", "Priority": 1})
            print(record.id)
        """
        options = RequestOptions(return_fields_by_field_id=return_fields_by_field_id)
        return self._client._get_executor()._create(table, fields, options, typecast)

    def update(
        self,
        table: str,
        record_id: str,
        fields: Mapping[str, Any],
        *,
        typecast: bool = False,
        return_fields_by_field_id: Optional[bool] = None,
    ) -> Record:
        """
        Update a record. Only the given fields change.

        :return: The full updated record.
        :rtype: ~airtable_sdk.models.record.Record
        """
        options = RequestOptions(return_fields_by_field_id=return_fields_by_field_id)
        return self._client._get_executor()._update(table, record_id, fields, options, typecast)

    def delete(self, table: str, record_id: str) -> None:
        """
        Delete a record.

        The response body is never read; any 2xx status counts as success.

        :raises ~airtable_sdk.core.errors.ClientError: If the API rejects the delete.
        """
        self._client._get_executor()._delete(table, record_id)
