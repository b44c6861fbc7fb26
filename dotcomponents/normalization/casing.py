"""
Key Casing Utilities

Pure string transformations used to turn external names into
client-side keys.
"""

from __future__ import annotations


def _capitalize_first(part: str) -> str:
    # str.capitalize() would also lower-case the remainder
    return part[:1].upper() + part[1:]


def camel_case_from_hyphenated(name: str) -> str:
    """
    "feature-x" -> "featureX", "sentry-public-api-key" -> "sentryPublicApiKey".

    The first part is kept as-is; every following part has only its first
    character upper-cased. Empty parts contribute nothing.
    """
    if not name:
        return ""
    first, *rest = name.split("-")
    return first + "".join(_capitalize_first(part) for part in rest)


def last_dot_segment(key: str) -> str:
    """
    "guardian.page.sentry-host" -> "sentry-host".

    Trailing empty segments are discarded first, so "a.b." -> "b".
    """
    segments = key.split(".")
    while segments and not segments[-1]:
        segments.pop()
    return segments[-1] if segments else ""
