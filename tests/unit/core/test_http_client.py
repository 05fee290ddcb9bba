# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock, patch

import requests

from airtable_sdk.core._http import _HttpClient


class TestHttpClientTimeout(unittest.TestCase):
    """Tests for the per-attempt timeout."""

    def _run(self, timeout=None):
        with patch("airtable_sdk.core._http.requests.request") as mock_req:
            mock_req.return_value = MagicMock(status_code=200)
            client = _HttpClient(timeout=timeout)
            client._request("GET", "https://api.example.test/v0/app/Tasks")
            return mock_req.call_args

    def test_default_timeout(self):
        self.assertEqual(self._run().kwargs["timeout"], 30.0)

    def test_configured_timeout(self):
        self.assertEqual(self._run(timeout=7).kwargs["timeout"], 7)

    def test_explicit_timeout_kwarg_wins(self):
        with patch("airtable_sdk.core._http.requests.request") as mock_req:
            _HttpClient(timeout=7)._request("GET", "https://api.example.test/v0/app/Tasks", timeout=1)
        self.assertEqual(mock_req.call_args.kwargs["timeout"], 1)


class TestHttpClientSession(unittest.TestCase):
    """Tests for session routing."""

    def test_uses_session_when_provided(self):
        session = MagicMock()
        session.request.return_value = MagicMock(status_code=200)
        client = _HttpClient(session=session)
        with patch("airtable_sdk.core._http.requests.request") as mock_req:
            client._request("POST", "https://api.example.test/v0/app/Tasks", data=b"{}")
            mock_req.assert_not_called()
        session.request.assert_called_once()
        args = session.request.call_args
        self.assertEqual(args.args, ("POST", "https://api.example.test/v0/app/Tasks"))
        self.assertEqual(args.kwargs["data"], b"{}")

    def test_network_errors_propagate_without_retry(self):
        session = MagicMock()
        session.request.side_effect = requests.exceptions.ConnectionError("down")
        client = _HttpClient(session=session)
        with self.assertRaises(requests.exceptions.ConnectionError):
            client._request("GET", "https://api.example.test/v0/app/Tasks")
        self.assertEqual(session.request.call_count, 1)

    def test_close_drops_session_reference(self):
        session = MagicMock()
        client = _HttpClient(session=session)
        client.close()
        client.close()
        self.assertIsNone(client._session)
        session.close.assert_not_called()
