# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock, patch

from airtable_sdk import AirtableClient, AirtableConfig
from tests.unit.test_helpers import make_response, record_json


class TestContextManager(unittest.TestCase):
    """Session lifecycle under ``with``."""

    @patch("airtable_sdk.client.requests.Session")
    def test_creates_and_closes_own_session(self, mock_session_cls):
        session = mock_session_cls.return_value
        session.request.return_value = make_response(200, record_json("rec1"))

        with AirtableClient("app1", "tok", AirtableConfig()) as client:
            record = client.records.get("Tasks", "rec1")
            self.assertEqual(record.id, "rec1")
            session.request.assert_called_once()

        session.close.assert_called_once()
        self.assertIsNone(client._session)
        self.assertIsNone(client._executor)

    @patch("airtable_sdk.client.requests.Session")
    def test_executor_built_before_enter_picks_up_session(self, mock_session_cls):
        session = mock_session_cls.return_value
        session.request.return_value = make_response(200, record_json("rec1"))
        client = AirtableClient("app1", "tok", AirtableConfig())
        stale = client._get_executor()

        with client:
            self.assertIsNot(client._get_executor(), stale)
            client.records.get("Tasks", "rec1")
        session.request.assert_called_once()

    def test_injected_session_is_left_open(self):
        session = MagicMock()
        session.request.return_value = make_response(200, record_json("rec1"))
        with AirtableClient("app1", "tok", AirtableConfig(), session=session) as client:
            client.records.get("Tasks", "rec1")
        session.close.assert_not_called()
        self.assertIs(client._session, session)

    @patch("airtable_sdk.client.requests.Session")
    def test_session_closed_when_body_raises(self, mock_session_cls):
        session = mock_session_cls.return_value
        with self.assertRaises(RuntimeError):
            with AirtableClient("app1", "tok", AirtableConfig()):
                raise RuntimeError("boom")
        session.close.assert_called_once()
