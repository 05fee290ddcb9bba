# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest

from airtable_sdk.core._error_codes import ClientErrorKind
from airtable_sdk.core.errors import AirtableError, ClientError, HttpError, RateLimitExceeded, ValidationError


class TestErrorDetails(unittest.TestCase):
    """Structured error payloads."""

    def test_http_error_does_not_mutate_caller_details(self):
        details = {"request_id": "abc"}
        err = HttpError("boom", 500, diagnostic="oops", method="GET", url="https://x.test/a", details=details)
        self.assertEqual(details, {"request_id": "abc"})
        self.assertEqual(err.details["request_id"], "abc")
        self.assertEqual(err.details["diagnostic"], "oops")
        self.assertEqual(err.details["method"], "GET")

    def test_shared_details_dict_stays_independent(self):
        shared = {}
        first = ClientError("a", 404, ClientErrorKind.NOT_FOUND, diagnostic="first", details=shared)
        second = ClientError("b", 404, ClientErrorKind.NOT_FOUND, diagnostic="second", details=shared)
        self.assertEqual(shared, {})
        self.assertEqual(first.details["diagnostic"], "first")
        self.assertEqual(second.details["diagnostic"], "second")

    def test_rate_limit_details_copied(self):
        details = {"request_id": "abc"}
        err = RateLimitExceeded("slow down", attempts=5, details=details)
        self.assertEqual(details, {"request_id": "abc"})
        self.assertEqual(err.details["attempts"], 5)
        self.assertEqual(err.attempts, 5)
        self.assertEqual(err.subcode, "http_429")

    def test_base_error_copies_details(self):
        details = {"variable": "X"}
        err = ValidationError("bad", details=details)
        err.details["extra"] = 1
        self.assertEqual(details, {"variable": "X"})

    def test_to_dict(self):
        err = AirtableError("bad", code="validation_error", subcode="s")
        payload = err.to_dict()
        self.assertEqual(payload["code"], "validation_error")
        self.assertEqual(payload["source"], "client")
        self.assertTrue(payload["timestamp"].endswith("Z"))
