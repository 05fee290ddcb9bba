# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Airtable SDK.

- RecordOperations: CRUD and listing on table records
- BaseOperations: base listing and schema metadata
"""

__all__ = []
