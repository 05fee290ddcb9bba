# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the Airtable REST API wire contract.

These constants define the endpoint root, header names, query parameter keys
and the documented rate-limit policy.
"""

DEFAULT_API_URL = "https://api.airtable.com/v0"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_LOGGER_NAME = "airtable_sdk"

# Rate limiting
# See: https://airtable.com/developers/web/api/rate-limits

RATE_LIMIT_MAX_ATTEMPTS = 5
"""Maximum number of attempts for a single call while the API keeps answering 429."""

RATE_LIMIT_DELAY_SECONDS = 1.0
"""Fixed pause between rate-limited attempts. No jitter, no exponential growth."""

RATE_LIMIT_REQUESTS_PER_SECOND = 5
"""Documented request budget per base."""

RATE_LIMIT_COOLDOWN_SECONDS = 30
"""Documented wait after the budget is exceeded."""

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CLIENT_SECRET = "X-Airtable-Client-Secret"
CONTENT_TYPE_JSON = "application/json"

# List query parameters
PARAM_OFFSET = "offset"
PARAM_MAX_RECORDS = "maxRecords"
PARAM_PAGE_SIZE = "pageSize"
PARAM_VIEW = "view"
PARAM_FIELDS = "fields[]"
PARAM_FILTER_BY_FORMULA = "filterByFormula"
PARAM_USER_LOCALE = "userLocale"
PARAM_TIME_ZONE = "timeZone"
PARAM_RETURN_FIELDS_BY_FIELD_ID = "returnFieldsByFieldId"
PARAM_SORT_FIELD = "sort[{index}][field]"
PARAM_SORT_DIRECTION = "sort[{index}][direction]"

# Metadata API paths
META_BASES_PATH = "meta/bases"
META_BASE_TABLES_PATH = "meta/bases/{base_id}/tables"
