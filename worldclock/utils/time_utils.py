"""Timezone-aware time utilities."""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from worldclock.config.settings import get_settings
from worldclock.errors import TimezoneFormatError

_ADJUSTED_TIME_RE = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


def get_local_timezone() -> ZoneInfo:
    """Get the configured local timezone."""
    settings = get_settings()
    return ZoneInfo(settings.default_timezone)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def to_zone(identifier: str, instant: datetime | None = None) -> datetime:
    """Convert ``instant`` (default: now) into the wall-clock time of ``identifier``.

    Naive datetimes are assumed to be UTC.
    """
    if instant is None:
        instant = now_utc()
    elif instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    try:
        return instant.astimezone(ZoneInfo(identifier))
    except (ValueError, KeyError, OSError, TypeError) as exc:
        raise TimezoneFormatError(identifier, exc) from exc


def display_time(identifier: str, instant: datetime | None = None) -> str:
    """Render ``instant`` in the zone as ``M/D/YYYY, h:MM:SS AM``."""
    local = to_zone(identifier, instant)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def time_of_day(identifier: str, instant: datetime | None = None) -> str:
    """Fixed-width ``HH:MM:SS`` wall-clock time in the zone."""
    return to_zone(identifier, instant).strftime("%H:%M:%S")


def parse_adjusted_time(text: str | None, today: date | None = None) -> datetime | None:
    """Parse an ``HH:MM`` local time into an aware datetime for today.

    The time is interpreted in the process-local zone ("if it is HH:MM here").
    Returns ``None`` for anything that is not exactly ``HH:MM``.
    """
    if not text:
        return None
    match = _ADJUSTED_TIME_RE.fullmatch(text)
    if match is None:
        return None
    local_tz = get_local_timezone()
    if today is None:
        today = datetime.now(local_tz).date()
    hour, minute = int(match.group(1)), int(match.group(2))
    return datetime(today.year, today.month, today.day, hour, minute, tzinfo=local_tz)
