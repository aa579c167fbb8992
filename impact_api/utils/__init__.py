"""Shared helpers that do not belong to a single layer."""

from .datetime import (
    from_storage_datetime,
    storage_now,
    to_app_timezone,
    to_storage_datetime,
    utc_now,
)

__all__ = [
    "from_storage_datetime",
    "storage_now",
    "to_app_timezone",
    "to_storage_datetime",
    "utc_now",
]
