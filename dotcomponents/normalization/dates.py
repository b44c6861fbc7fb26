"""
Date Normalizer

Publication instant -> (epoch millis, edition-local display string).
Both values are always derived from the same aware datetime.
"""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Tuple
from zoneinfo import ZoneInfo

from ..contracts.base import ContractViolation, ErrorCode
from ..contracts.collaborators import DateFormatter
from ..contracts.sources import RequestContext


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Locale-independent names
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _require_aware(instant: datetime):
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ContractViolation(
            ErrorCode.NAIVE_TIMESTAMP,
            "publication instant must be timezone-aware",
            (("instant", instant.isoformat()),),
        )


def to_epoch_millis(instant: datetime) -> int:
    _require_aware(instant)
    return (instant - EPOCH) // timedelta(milliseconds=1)


def format_date_for_display(instant: datetime, request: RequestContext) -> str:
    """
    Render in the request edition's time zone, e.g. "Tue 16 Oct 2018 14.30 BST".
    """
    _require_aware(instant)
    local = instant.astimezone(ZoneInfo(request.edition.timezone))
    return (
        f"{_DAYS[local.weekday()]} {local.day} {_MONTHS[local.month - 1]} {local.year} "
        f"{local.hour:02d}.{local.minute:02d} {local.tzname()}"
    )


def publication_date(
    instant: datetime,
    request: RequestContext,
    formatter: DateFormatter = format_date_for_display,
) -> Tuple[int, str]:
    return to_epoch_millis(instant), formatter(instant, request)
