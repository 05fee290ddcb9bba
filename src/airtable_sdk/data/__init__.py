# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request execution and pagination for the Airtable REST API.

- :class:`~airtable_sdk.data._airtable._AirtableClient`: request executor (internal).
- :class:`~airtable_sdk.data._pager.ListPager`: cursor-tracking pager.
"""

__all__ = []
