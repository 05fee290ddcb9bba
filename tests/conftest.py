# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Airtable SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

from unittest.mock import patch

import pytest

from airtable_sdk.core.config import AirtableConfig


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return AirtableConfig(
        api_url="https://api.example.test/v0",
        http_timeout=5,
        rate_limit_max_attempts=5,
        rate_limit_delay=1.0,
    )


@pytest.fixture
def no_sleep():
    """Patch out the rate-limit pause and expose the mock for assertions."""
    with patch("time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def sample_fields():
    """Sample record fields for testing."""
    return {
        "Name": "Write docs",
        "Priority": 2,
        "Done": False,
        "Tags": ["docs", "sdk"],
    }


@pytest.fixture
def sample_record_id():
    """Sample record id for testing."""
    return "recAAAAAAAAAAAAAA"
