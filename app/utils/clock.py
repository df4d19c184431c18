"""Campus clock: the timezone due dates are read in and stored as."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE: Final[str] = "Asia/Kolkata"
_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str) -> tzinfo:
    """Turn an IANA name or a ``UTC+05:30`` style offset into a ``tzinfo``.

    Anything else falls back to ``Asia/Kolkata``, the campus' own zone.
    """

    name = name.strip()
    match = _FIXED_OFFSET.match(name)
    if match:
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(-offset if match.group("sign") == "-" else offset)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using %s", name, FALLBACK_TIMEZONE)
        return ZoneInfo(FALLBACK_TIMEZONE)


@lru_cache(maxsize=1)
def campus_timezone() -> tzinfo:
    return parse_timezone(get_settings().app_timezone or FALLBACK_TIMEZONE)


def campus_now() -> datetime:
    return datetime.now(tz=campus_timezone())


def as_campus_time(value: datetime | None) -> datetime | None:
    """Express ``value`` on the campus clock; naive values are taken as campus time."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=campus_timezone())
    return value.astimezone(campus_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    """Naive campus-time representation written to ``DateTime`` columns.

    SQLite drops offsets, so every timestamp is converted to the campus clock
    before its ``tzinfo`` is removed.
    """

    localized = as_campus_time(value)
    return None if localized is None else localized.replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Inverse of :func:`to_storage`."""

    return as_campus_time(value)


__all__ = [
    "FALLBACK_TIMEZONE",
    "as_campus_time",
    "campus_now",
    "campus_timezone",
    "from_storage",
    "parse_timezone",
    "to_storage",
]
