# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request executor for the Airtable REST API.

:class:`_AirtableClient` turns one semantic operation (list, get, create,
update, delete) into exactly one logical HTTP exchange: it validates input,
builds an immutable :class:`_RequestSpec`, sends it through the injected
transport, retries on 429 with a fixed delay up to a bounded number of
attempts, and classifies the final response into a decoded result or a
structured :class:`~airtable_sdk.core.errors.AirtableError`.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Tuple, TypeVar
from urllib.parse import quote

import requests

from ..common.constants import CONTENT_TYPE_JSON, HEADER_CONTENT_TYPE
from ..core._auth import _AuthManager
from ..core._error_codes import (
    CLIENT_ERROR_KINDS,
    DECODE_INVALID_JSON,
    DECODE_UNEXPECTED_SHAPE,
    SERVER_ERROR_KINDS,
    STATUS_DESCRIPTIONS,
    TRANSPORT_REQUEST_FAILED,
    VALIDATION_BASE_ID_MISSING,
    VALIDATION_INVALID_FIELDS,
    VALIDATION_RECORD_ID_MISSING,
    VALIDATION_TABLE_NAME_MISSING,
)
from ..core._http import _HttpClient, Transport
from ..core.config import AirtableConfig
from ..core.errors import (
    ClientError,
    DecodeError,
    RateLimitExceeded,
    ServerError,
    TransportError,
    UnknownStatusError,
    ValidationError,
)
from ..models.parameters import ListParameters, RequestOptions
from ..models.record import Record, RecordList
from ._metadata import _MetadataOperationsMixin

_T = TypeVar("_T")

# Error bodies larger than this are truncated before being surfaced.
_MAX_ERROR_BODY = 64 * 1024


@dataclass(frozen=True)
class _RequestSpec:
    """One HTTP request, reused unchanged across rate-limit retries."""

    method: str
    path: str
    params: Tuple[Tuple[str, str], ...] = ()
    body: Optional[bytes] = None


def _detailed_error(payload: Any) -> Optional[str]:
    # {"error": {"message": "...", "type": "..."}}
    if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
        return None
    err = payload["error"]
    parts = [err.get(k) for k in ("message", "type")]
    parts = [p for p in parts if isinstance(p, str) and p]
    return ", ".join(parts) or None


def _general_error(payload: Any) -> Optional[str]:
    # {"error": "..."}
    if isinstance(payload, dict) and isinstance(payload.get("error"), str) and payload["error"]:
        return payload["error"]
    return None


_ERROR_BODY_DECODERS: Sequence[Callable[[Any], Optional[str]]] = (_detailed_error, _general_error)


def _decode_error_body(text: str) -> str:
    """Best-effort diagnostic from an error body; falls back to the raw text."""
    text = (text or "")[:_MAX_ERROR_BODY]
    try:
        payload = json.loads(text)
    except ValueError:
        return text.strip()
    for decoder in _ERROR_BODY_DECODERS:
        diagnostic = decoder(payload)
        if diagnostic:
            return diagnostic
    return text.strip()


def _require(value: Optional[str], what: str, subcode: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} is required", subcode=subcode)
    return value


def _segment(value: str) -> str:
    return quote(value, safe="")


class _AirtableClient(_MetadataOperationsMixin):
    """
    Airtable REST API executor: CRUD on table records and metadata lookups.

    Holds no per-call state. The rate-limit attempt counter lives inside
    :meth:`_execute`, so concurrent calls never share a retry budget.

    :param auth: Authentication manager producing request headers.
    :type auth: ~airtable_sdk.core._auth._AuthManager
    :param base_id: Base identifier, the namespace for every table path.
    :type base_id: str
    :param config: Client configuration. Defaults are used when omitted.
    :type config: ~airtable_sdk.core.config.AirtableConfig or None
    :param session: Optional transport (``requests.Session`` or a test double).
    :type session: ~airtable_sdk.core._http.Transport or None
    """

    def __init__(
        self,
        auth: _AuthManager,
        base_id: str,
        config: Optional[AirtableConfig] = None,
        session: Optional[Transport] = None,
    ) -> None:
        self.auth = auth
        self.base_id = _require(base_id, "base_id", VALIDATION_BASE_ID_MISSING).strip()
        self.config = config or AirtableConfig()
        self.api = self.config.api_url.rstrip("/")
        self._http = _HttpClient(timeout=self.config.resolved_timeout, session=session)
        self._logger = logging.getLogger(self.config.logger_name)

    def _headers(self) -> dict:
        """Build standard headers with bearer auth and JSON content type."""
        headers = self.auth._auth_headers()
        headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        return headers

    def _url(self, path: str) -> str:
        return f"{self.api}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Iterable[Tuple[str, str]]] = None,
        payload: Any = None,
        decode: Optional[Callable[[Any], _T]] = None,
    ) -> Optional[_T]:
        """
        Build a request spec and execute it.

        :param method: ``GET``, ``POST``, ``PATCH`` or ``DELETE``.
        :param path: Path relative to the API root, e.g. ``"appX/Tasks"``.
        :param params: Ordered query pairs.
        :param payload: JSON-serialisable body, encoded once for every attempt.
        :param decode: Callable turning the decoded JSON body into the result.
            When ``None`` the body is discarded.
        :return: The decoded result, or ``None``.
        """
        body = None
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
        spec = _RequestSpec(method=method.upper(), path=path, params=tuple(params or ()), body=body)
        return self._execute(spec, decode)

    def _send(self, spec: _RequestSpec) -> requests.Response:
        url = self._url(spec.path)
        headers = self._headers()
        if self.config.log_requests:
            self._logger.debug(
                "%s %s params=%s body=%s",
                spec.method,
                url,
                list(spec.params),
                spec.body.decode("utf-8") if spec.body else "",
            )
        try:
            r = self._http._request(
                spec.method,
                url,
                headers=headers,
                params=list(spec.params) or None,
                data=spec.body,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"{spec.method} {url} failed: {exc}",
                subcode=TRANSPORT_REQUEST_FAILED,
                details={"method": spec.method, "url": url, "exception": type(exc).__name__},
            ) from exc
        self._logger.debug("%s %s -> %s", spec.method, url, r.status_code)
        return r

    def _execute(self, spec: _RequestSpec, decode: Optional[Callable[[Any], _T]] = None) -> Optional[_T]:
        """
        Send ``spec``, retrying on 429 with a fixed delay, and classify the result.

        At most ``rate_limit_max_attempts`` requests are issued. Only 429 is
        retried; every other outcome is returned or raised immediately.
        """
        max_attempts = max(1, self.config.resolved_max_attempts)
        delay = self.config.resolved_delay
        for attempt in range(1, max_attempts + 1):
            r = self._send(spec)
            if r.status_code != 429:
                return self._handle_response(spec, r, decode)
            if attempt == max_attempts:
                break
            self._logger.warning(
                "Rate limited on %s %s (attempt %d/%d); retrying in %.1fs",
                spec.method,
                spec.path,
                attempt,
                max_attempts,
                delay,
            )
            time.sleep(delay)
        raise RateLimitExceeded(
            STATUS_DESCRIPTIONS[429],
            attempts=max_attempts,
            diagnostic=_decode_error_body(r.text),
            method=spec.method,
            url=self._url(spec.path),
        )

    def _handle_response(
        self,
        spec: _RequestSpec,
        r: requests.Response,
        decode: Optional[Callable[[Any], _T]],
    ) -> Optional[_T]:
        status = r.status_code
        if 200 <= status < 300:
            if spec.method == "DELETE" or decode is None:
                return None
            return self._decode_success(spec, r, decode)
        self._raise_for_status(spec, r)
        return None  # pragma: no cover

    def _decode_success(self, spec: _RequestSpec, r: requests.Response, decode: Callable[[Any], _T]) -> _T:
        try:
            data = r.json()
        except ValueError as exc:
            raise DecodeError(
                f"{spec.method} {spec.path} returned a body that is not valid JSON",
                subcode=DECODE_INVALID_JSON,
                status_code=r.status_code,
                details={"body_excerpt": (r.text or "")[:200]},
            ) from exc
        try:
            return decode(data)
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise DecodeError(
                f"{spec.method} {spec.path} returned an unexpected body: {exc}",
                subcode=DECODE_UNEXPECTED_SHAPE,
                status_code=r.status_code,
            ) from exc

    def _raise_for_status(self, spec: _RequestSpec, r: requests.Response) -> None:
        status = r.status_code
        diagnostic = _decode_error_body(r.text)
        common = {"diagnostic": diagnostic, "method": spec.method, "url": self._url(spec.path)}
        description = STATUS_DESCRIPTIONS.get(status)
        if description is None:
            message = f"Unexpected HTTP status {status}"
        else:
            message = description
        if diagnostic:
            message = f'{message}: "{diagnostic}"'

        if status in CLIENT_ERROR_KINDS:
            raise ClientError(message, status, CLIENT_ERROR_KINDS[status], **common)
        if status in SERVER_ERROR_KINDS:
            raise ServerError(message, status, SERVER_ERROR_KINDS[status], **common)
        raise UnknownStatusError(message, status, **common)

    # ----------------------------- paths ---------------------------------
    def _table_path(self, table: str, record_id: Optional[str] = None) -> str:
        path = f"{_segment(self.base_id)}/{_segment(table)}"
        if record_id is not None:
            path = f"{path}/{_segment(record_id)}"
        return path

    # ----------------------------- CRUD ----------------------------------
    def _list(self, params: ListParameters) -> RecordList:
        """
        Fetch one page of records.

        :param params: List parameters including the cursor (``offset``).
        :return: The page and its continuation cursor.
        :rtype: ~airtable_sdk.models.record.RecordList
        """
        table = _require(params.table, "table name", VALIDATION_TABLE_NAME_MISSING)
        return self._request(
            "GET",
            self._table_path(table),
            params=params.to_query(),
            decode=RecordList.from_api_response,
        )

    def _get(self, table: str, record_id: str, options: Optional[RequestOptions] = None) -> Record:
        table = _require(table, "table name", VALIDATION_TABLE_NAME_MISSING)
        record_id = _require(record_id, "record id", VALIDATION_RECORD_ID_MISSING)
        return self._request(
            "GET",
            self._table_path(table, record_id),
            params=(options or RequestOptions()).to_query(),
            decode=Record.from_api_response,
        )

    def _create(
        self,
        table: str,
        fields: Mapping[str, Any],
        options: Optional[RequestOptions] = None,
        typecast: bool = False,
    ) -> Record:
        table = _require(table, "table name", VALIDATION_TABLE_NAME_MISSING)
        return self._request(
            "POST",
            self._table_path(table),
            params=(options or RequestOptions()).to_query(),
            payload=self._fields_payload(fields, typecast),
            decode=Record.from_api_response,
        )

    def _update(
        self,
        table: str,
        record_id: str,
        fields: Mapping[str, Any],
        options: Optional[RequestOptions] = None,
        typecast: bool = False,
    ) -> Record:
        """
        Patch an existing record. Fields not named in ``fields`` are left unchanged.
        """
        table = _require(table, "table name", VALIDATION_TABLE_NAME_MISSING)
        record_id = _require(record_id, "record id", VALIDATION_RECORD_ID_MISSING)
        return self._request(
            "PATCH",
            self._table_path(table, record_id),
            params=(options or RequestOptions()).to_query(),
            payload=self._fields_payload(fields, typecast),
            decode=Record.from_api_response,
        )

    def _delete(self, table: str, record_id: str) -> None:
        table = _require(table, "table name", VALIDATION_TABLE_NAME_MISSING)
        record_id = _require(record_id, "record id", VALIDATION_RECORD_ID_MISSING)
        self._request("DELETE", self._table_path(table, record_id))

    @staticmethod
    def _fields_payload(fields: Mapping[str, Any], typecast: bool) -> dict:
        if not isinstance(fields, Mapping):
            raise ValidationError("fields must be a mapping of field name to value", subcode=VALIDATION_INVALID_FIELDS)
        payload: dict = {"fields": dict(fields)}
        if typecast:
            payload["typecast"] = True
        return payload

    def close(self) -> None:
        """Release the transport reference. Safe to call multiple times."""
        self._http.close()


