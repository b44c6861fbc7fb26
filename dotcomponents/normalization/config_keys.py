"""
Config-Key Normalizer

Flat page-data keys such as "guardian.page.sentry-host" are reduced to
their last dot segment and camel-cased ("sentryHost"), then used to look
up the error-reporting settings. Keys that do not end in a recognised
segment are ignored.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping

from ..contracts.base import ConfigKeyCollisionError, Lookup, lookup_string
from .casing import camel_case_from_hyphenated, last_dot_segment


SENTRY_HOST_KEY = "sentryHost"
SENTRY_PUBLIC_API_KEY_KEY = "sentryPublicApiKey"

RECOGNISED_KEYS: FrozenSet[str] = frozenset({SENTRY_HOST_KEY, SENTRY_PUBLIC_API_KEY_KEY})


def normalize_config_key(raw_key: str) -> str:
    return camel_case_from_hyphenated(last_dot_segment(raw_key))


def normalize_page_data_keys(
    page_data: Mapping[str, object],
    recognised: FrozenSet[str] = RECOGNISED_KEYS,
) -> Dict[str, object]:
    """
    Re-key `page_data` by normalized name, keeping recognised keys only.

    Raises ConfigKeyCollisionError when two raw keys land on the same
    recognised key.
    """
    normalized: Dict[str, object] = {}
    origin: Dict[str, str] = {}

    for raw_key in sorted(page_data):
        key = normalize_config_key(raw_key)
        if key not in recognised:
            continue
        if key in origin:
            raise ConfigKeyCollisionError(
                context=(("key", key), ("first", origin[key]), ("second", raw_key))
            )
        origin[key] = raw_key
        normalized[key] = page_data[raw_key]

    return normalized


@dataclass(frozen=True)
class ErrorReportingSettings:
    """Optional error-reporting endpoint for the client."""
    sentry_host: Lookup[str]
    sentry_public_api_key: Lookup[str]

    @staticmethod
    def from_page_data(page_data: Mapping[str, object]) -> ErrorReportingSettings:
        normalized = normalize_page_data_keys(page_data)
        return ErrorReportingSettings(
            sentry_host=lookup_string(normalized, SENTRY_HOST_KEY),
            sentry_public_api_key=lookup_string(normalized, SENTRY_PUBLIC_API_KEY_KEY),
        )
