# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import json

import pytest

from airtable_sdk import EndOfList, ListPager, SortDirection
from airtable_sdk.core.errors import ClientError, RateLimitExceeded, ValidationError
from tests.unit.test_helpers import BASE_ID, make_client, make_response, page_json, record_json

API = "https://api.airtable.com/v0"


def test_list_single_page_with_options():
    client, transport = make_client([make_response(200, page_json(["rec1"], offset="itr1"))])
    page = client.records.list(
        "Tasks",
        page_size=1,
        fields=["Name"],
        sort=[("Name", "desc")],
        offset="itr0",
    )
    assert [r.id for r in page] == ["rec1"]
    assert page.offset == "itr1"
    assert transport.calls[0][2]["params"] == [
        ("offset", "itr0"),
        ("pageSize", "1"),
        ("fields[]", "Name"),
        ("sort[0][field]", "Name"),
        ("sort[0][direction]", SortDirection.DESCENDING.value),
    ]


def test_pages_returns_pager_without_request():
    client, transport = make_client()
    pager = client.records.pages("Tasks")
    assert isinstance(pager, ListPager)
    assert transport.call_count == 0


def test_pages_empty_table_fails_on_first_next_without_request():
    client, transport = make_client()
    pager = client.records.pages("")
    with pytest.raises(ValidationError):
        pager.next()
    assert transport.call_count == 0


def test_pages_walks_every_page():
    client, transport = make_client(
        [
            make_response(200, page_json(["rec1", "rec2"], offset="o1")),
            make_response(200, page_json(["rec3"], offset="o2")),
            make_response(200, page_json(["rec4"])),
        ]
    )
    pager = client.records.pages("Tasks", view="Grid view")
    seen = []
    while True:
        try:
            seen.extend(r.id for r in pager.next())
        except EndOfList:
            break
    assert seen == ["rec1", "rec2", "rec3", "rec4"]
    assert transport.call_count == 3
    assert transport.calls[2][2]["params"] == [("offset", "o2"), ("view", "Grid view")]


def test_iterate_yields_records_lazily():
    client, transport = make_client(
        [
            make_response(200, page_json(["rec1"], offset="o1")),
            make_response(200, page_json(["rec2"])),
        ]
    )
    it = client.records.iterate("Tasks")
    assert next(it).id == "rec1"
    assert transport.call_count == 1
    assert [r.id for r in it] == ["rec2"]
    assert transport.call_count == 2


def test_iterate_with_rate_limited_page(no_sleep):
    client, transport = make_client(
        [
            make_response(200, page_json(["rec1"], offset="o1")),
            make_response(429),
            make_response(200, page_json(["rec2"])),
        ]
    )
    assert [r.id for r in client.records.iterate("Tasks")] == ["rec1", "rec2"]
    assert transport.calls[1][2]["params"] == transport.calls[2][2]["params"]
    no_sleep.assert_called_once_with(1.0)


def test_get_create_update_delete_round():
    client, transport = make_client(
        [
            make_response(200, record_json("recNew", {"Name": "A"})),
            make_response(200, record_json("recNew", {"Name": "B"})),
            make_response(200, record_json("recNew", {"Name": "B"})),
            make_response(200, {"deleted": True, "id": "recNew"}),
        ]
    )
    created = client.records.create("Tasks", {"Name": "A"}, typecast=True)
    updated = client.records.update("Tasks", created.id, {"Name": "B"})
    fetched = client.records.get("Tasks", created.id, return_fields_by_field_id=False)
    assert client.records.delete("Tasks", created.id) is None

    assert updated["Name"] == fetched["Name"] == "B"
    assert [c[0] for c in transport.calls] == ["POST", "PATCH", "GET", "DELETE"]
    assert json.loads(transport.calls[0][2]["data"]) == {"fields": {"Name": "A"}, "typecast": True}
    assert transport.calls[2][2]["params"] == [("returnFieldsByFieldId", "false")]
    assert transport.calls[3][1] == f"{API}/{BASE_ID}/Tasks/recNew"


def test_get_not_found():
    client, _ = make_client([make_response(404, {"error": "NOT_FOUND"})])
    with pytest.raises(ClientError) as ei:
        client.records.get("Tasks", "recGone")
    assert ei.value.kind.value == "not_found"


def test_create_rate_limit_exhausted(no_sleep):
    client, transport = make_client([make_response(429) for _ in range(5)])
    with pytest.raises(RateLimitExceeded):
        client.records.create("Tasks", {"Name": "A"})
    assert transport.call_count == 5
