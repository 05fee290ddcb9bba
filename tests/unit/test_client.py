# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock, patch

from azure.core.credentials import AzureKeyCredential

from airtable_sdk import AirtableClient, AirtableConfig
from airtable_sdk.core.errors import ValidationError
from airtable_sdk.operations.bases import BaseOperations
from airtable_sdk.operations.records import RecordOperations
from tests.unit.test_helpers import make_client, make_response, record_json


class TestAirtableClient(unittest.TestCase):
    """Construction and executor wiring."""

    def test_namespaces(self):
        client, _ = make_client()
        self.assertIsInstance(client.records, RecordOperations)
        self.assertIsInstance(client.bases, BaseOperations)

    def test_base_id_required(self):
        for base_id in ("", "  ", None):
            with self.subTest(base_id=base_id):
                with self.assertRaises(ValidationError):
                    AirtableClient(base_id, "tok", AirtableConfig())

    def test_empty_token_rejected(self):
        with self.assertRaises(ValueError):
            AirtableClient("app1", "", AirtableConfig())

    def test_base_id_is_stripped(self):
        client = AirtableClient(" app1 ", "tok", AirtableConfig())
        self.assertEqual(client.base_id, "app1")

    def test_config_loaded_from_env_when_omitted(self):
        with patch.dict("os.environ", {"AIRTABLE_RATE_LIMIT_MAX_ATTEMPTS": "2"}):
            client = AirtableClient("app1", "tok")
        self.assertEqual(client.config.rate_limit_max_attempts, 2)

    def test_executor_is_lazy_and_cached(self):
        client, _ = make_client()
        self.assertIsNone(client._executor)
        first = client._get_executor()
        self.assertIs(client._get_executor(), first)

    def test_key_credential_rotation(self):
        cred = AzureKeyCredential("old")
        client = AirtableClient("app1", cred, AirtableConfig(), session=MagicMock())
        cred.update("new")
        self.assertEqual(client._get_executor()._headers()["Authorization"], "Bearer new")

    def test_operations_share_injected_session(self):
        client, transport = make_client(
            [make_response(200, record_json("rec1")), make_response(200, record_json("rec1"))]
        )
        client.records.get("Tasks", "rec1")
        client.records.get("Tasks", "rec1")
        self.assertEqual(transport.call_count, 2)

    def test_close_does_not_close_injected_session(self):
        session = MagicMock()
        client = AirtableClient("app1", "tok", AirtableConfig(), session=session)
        client._get_executor()
        client.close()
        client.close()
        session.close.assert_not_called()
        self.assertIsNone(client._executor)
