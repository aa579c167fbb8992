"""Datetime helpers: UTC for storage, ``APP_TIMEZONE`` for display.

Columns are plain ``DateTime`` without timezone support, so every value is
written as naive UTC and gets ``timezone.utc`` attached again when read.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from impact_api.config import get_settings

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def storage_now() -> datetime:
    """Column default: the current time as naive UTC."""

    return utc_now().replace(tzinfo=None)


def to_storage_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to naive UTC. Naive input is taken to be UTC already."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage_datetime(value: datetime | None) -> datetime | None:
    """Attach UTC to a value read back from a ``DateTime`` column."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_app_timezone(value: datetime) -> datetime:
    """Express ``value`` in the configured ``APP_TIMEZONE`` for rendering.

    Accepts IANA names and offsets such as ``UTC-05:00``; unknown values
    render in UTC.
    """

    tz_name = (get_settings().app_timezone or "").strip() or "UTC"
    return from_storage_datetime(value).astimezone(_resolve_timezone(tz_name))


@lru_cache(maxsize=16)
def _resolve_timezone(tz_name: str) -> tzinfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            offset = timedelta(
                hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
            )
            return timezone(sign * offset)
    return timezone.utc
