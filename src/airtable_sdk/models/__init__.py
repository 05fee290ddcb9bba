# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Airtable SDK.

- :class:`~airtable_sdk.models.record.Record`: Record representation with dict-like field access.
- :class:`~airtable_sdk.models.record.RecordList`: One page of a list response.
- :class:`~airtable_sdk.models.parameters.ListParameters`: List query parameters.
- :class:`~airtable_sdk.models.metadata.TableSchema`: Table metadata.

Import models from their modules directly.
"""

__all__ = []
