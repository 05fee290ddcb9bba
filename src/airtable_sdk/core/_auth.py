# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Credential handling for the Airtable SDK.

Personal access tokens are static keys, so the SDK holds them in an
:class:`~azure.core.credentials.AzureKeyCredential`. Callers that need to
rotate a token can keep a reference to the credential and call ``update()``;
the next request picks up the new key.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from azure.core.credentials import AzureKeyCredential

from ..common.constants import HEADER_AUTHORIZATION, HEADER_CLIENT_SECRET


class _AuthManager:
    """
    Build authentication headers for every request.

    :param credential: API token, either as a plain string or an ``AzureKeyCredential``.
    :type credential: str or ~azure.core.credentials.AzureKeyCredential
    :param client_secret: Optional secondary secret sent as ``X-Airtable-Client-Secret``
        (required by the metadata API for some integrations).
    :type client_secret: str or None
    :raises TypeError: If ``credential`` is neither a string nor an ``AzureKeyCredential``.
    :raises ValueError: If the token is empty.
    """

    def __init__(
        self,
        credential: Union[str, AzureKeyCredential],
        client_secret: Optional[str] = None,
    ) -> None:
        if isinstance(credential, str):
            if not credential.strip():
                raise ValueError("credential must be a non-empty API token.")
            credential = AzureKeyCredential(credential)
        if not isinstance(credential, AzureKeyCredential):
            raise TypeError("credential must be a str or azure.core.credentials.AzureKeyCredential.")
        self.credential: AzureKeyCredential = credential
        self.client_secret = client_secret or None

    def _auth_headers(self) -> Dict[str, str]:
        """Return the authorization headers for a single request."""
        headers = {HEADER_AUTHORIZATION: f"Bearer {self.credential.key}"}
        if self.client_secret:
            headers[HEADER_CLIENT_SECRET] = self.client_secret
        return headers
