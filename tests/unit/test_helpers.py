# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared test utilities for unit tests.

Provides a scripted transport, canned responses, and helpers for building an
executor or client wired to that transport.
"""

import json
import types

from airtable_sdk.client import AirtableClient
from airtable_sdk.core._auth import _AuthManager
from airtable_sdk.core.config import AirtableConfig
from airtable_sdk.data._airtable import _AirtableClient

TOKEN = "test_token"
BASE_ID = "appTestBase"


def make_response(status, body=None, headers=None):
    """Build a response-like object.

    ``body`` may be a dict/list (serialised to JSON), a string (sent verbatim)
    or None (empty body).
    """
    if body is None:
        text = ""
    elif isinstance(body, (dict, list)):
        text = json.dumps(body)
    else:
        text = str(body)

    resp = types.SimpleNamespace()
    resp.status_code = status
    resp.headers = headers or {}
    resp.text = text
    resp.json_calls = 0

    def json_func():
        resp.json_calls += 1
        return json.loads(text)

    resp.json = json_func
    return resp


class ScriptedTransport:
    """Transport double returning pre-configured responses in sequence.

    Args:
        responses: Responses (or exceptions to raise) returned one per request.

    Attributes:
        calls: List of (method, url, kwargs) tuples recording all requests made.
    """

    def __init__(self, responses=()):
        self._responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self._responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more scripted responses configured")
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def call_count(self):
        return len(self.calls)


def make_executor(responses=(), config=None, client_secret=None):
    """Return ``(executor, transport)`` wired together."""
    transport = ScriptedTransport(responses)
    executor = _AirtableClient(
        _AuthManager(TOKEN, client_secret=client_secret),
        BASE_ID,
        config or AirtableConfig(),
        session=transport,
    )
    return executor, transport


def make_client(responses=(), config=None, client_secret=None):
    """Return ``(client, transport)`` wired together."""
    transport = ScriptedTransport(responses)
    client = AirtableClient(
        BASE_ID,
        TOKEN,
        config or AirtableConfig(),
        client_secret=client_secret,
        session=transport,
    )
    return client, transport


def record_json(rid, fields=None, created="2024-01-02T03:04:05.000Z"):
    return {"id": rid, "createdTime": created, "fields": fields or {}}


def page_json(ids, offset=None):
    body = {"records": [record_json(i, {"Name": i}) for i in ids]}
    if offset is not None:
        body["offset"] = offset
    return body
