# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from ..common.constants import (
    DEFAULT_API_URL,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOGGER_NAME,
    RATE_LIMIT_DELAY_SECONDS,
    RATE_LIMIT_MAX_ATTEMPTS,
)
from ._error_codes import VALIDATION_INVALID_CONFIG
from .errors import ValidationError

_T = TypeVar("_T")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AirtableConfig:
    """
    Configuration settings for Airtable client operations.

    :param api_url: Root of the REST API, without trailing slash (default: ``https://api.airtable.com/v0``).
    :type api_url: str
    :param http_timeout: Per-attempt request timeout in seconds (default: 30). Applies to every
        rate-limit retry as well.
    :type http_timeout: float or None
    :param rate_limit_max_attempts: Maximum number of attempts for a single call while the API keeps
        answering 429 (default: 5).
    :type rate_limit_max_attempts: int or None
    :param rate_limit_delay: Fixed delay in seconds between rate-limited attempts (default: 1.0).
    :type rate_limit_delay: float or None
    :param log_requests: Whether to dump outgoing request bodies at DEBUG level (default: False).
    :type log_requests: bool
    :param logger_name: Name of the :mod:`logging` logger the SDK writes to.
    :type logger_name: str
    """

    api_url: str = DEFAULT_API_URL

    # HTTP and rate-limit configuration
    http_timeout: Optional[float] = None
    rate_limit_max_attempts: Optional[int] = None
    rate_limit_delay: Optional[float] = None

    # Logging configuration
    log_requests: bool = False
    logger_name: str = DEFAULT_LOGGER_NAME

    @property
    def resolved_timeout(self) -> float:
        return self.http_timeout if self.http_timeout is not None else DEFAULT_HTTP_TIMEOUT

    @property
    def resolved_max_attempts(self) -> int:
        return self.rate_limit_max_attempts if self.rate_limit_max_attempts is not None else RATE_LIMIT_MAX_ATTEMPTS

    @property
    def resolved_delay(self) -> float:
        return self.rate_limit_delay if self.rate_limit_delay is not None else RATE_LIMIT_DELAY_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AirtableConfig":
        """
        Create a configuration instance from ``AIRTABLE_*`` environment variables.

        Unset variables keep their defaults. Recognised variables are
        ``AIRTABLE_API_URL``, ``AIRTABLE_HTTP_TIMEOUT``, ``AIRTABLE_RATE_LIMIT_MAX_ATTEMPTS``,
        ``AIRTABLE_RATE_LIMIT_DELAY`` and ``AIRTABLE_LOG_REQUESTS``.

        :param environ: Mapping to read from instead of :data:`os.environ`.
        :type environ: ~typing.Mapping[str, str] or None
        :return: Configuration instance.
        :rtype: ~airtable_sdk.core.config.AirtableConfig
        :raises ~airtable_sdk.core.errors.ValidationError: If a numeric variable cannot be parsed
            or is out of range.
        """
        env = os.environ if environ is None else environ
        api_url = (env.get("AIRTABLE_API_URL") or DEFAULT_API_URL).rstrip("/")
        timeout = _parse(env, "AIRTABLE_HTTP_TIMEOUT", float, positive=True)
        attempts = _parse(env, "AIRTABLE_RATE_LIMIT_MAX_ATTEMPTS", int, positive=True)
        delay = _parse(env, "AIRTABLE_RATE_LIMIT_DELAY", float)
        return cls(
            api_url=api_url,
            http_timeout=timeout,
            rate_limit_max_attempts=attempts,
            rate_limit_delay=delay,
            log_requests=(env.get("AIRTABLE_LOG_REQUESTS") or "").strip().lower() in _TRUTHY,
        )


def _parse(
    env: Mapping[str, str],
    name: str,
    convert: Callable[[str], _T],
    *,
    positive: bool = False,
) -> Optional[_T]:
    """Read a finite number from ``env``; ``positive`` also rejects zero."""
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = convert(raw.strip())
    except ValueError:
        raise ValidationError(
            f"{name} must be a number, got {raw!r}",
            subcode=VALIDATION_INVALID_CONFIG,
            details={"variable": name, "value": raw},
        ) from None
    if not math.isfinite(value):
        raise ValidationError(
            f"{name} must be a finite number, got {raw!r}",
            subcode=VALIDATION_INVALID_CONFIG,
            details={"variable": name, "value": raw},
        )
    if value < 0 or (positive and value == 0):
        qualifier = "positive" if positive else "non-negative"
        raise ValidationError(
            f"{name} must be {qualifier}, got {raw!r}",
            subcode=VALIDATION_INVALID_CONFIG,
            details={"variable": name, "value": raw},
        )
    return value
