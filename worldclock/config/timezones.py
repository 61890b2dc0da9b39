"""Curated timezone catalog offered as suggestions when adding a zone."""
from __future__ import annotations

from dataclasses import dataclass

COMMON_TIMEZONES: tuple[str, ...] = (
    "UTC",
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Phoenix",
    "America/Anchorage",
    "America/Halifax",
    "America/Sao_Paulo",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Europe/Madrid",
    "Europe/Rome",
    "Europe/Warsaw",
    "Europe/Moscow",
    "Africa/Johannesburg",
    "Asia/Dubai",
    "Asia/Kolkata",
    "Asia/Singapore",
    "Asia/Hong_Kong",
    "Asia/Shanghai",
    "Asia/Tokyo",
    "Asia/Seoul",
    "Australia/Sydney",
    "Australia/Perth",
)


@dataclass(frozen=True)
class TimezoneOption:
    value: str
    label: str
    stored: bool = False


def build_timezone_options(
    suggestions: list[str] | None = None,
    stored: list[str] | None = None,
) -> list[TimezoneOption]:
    """Return labelled suggestions, skipping identifiers the platform rejects."""
    from worldclock.clock.presentation import format_label, is_valid_timezone

    stored_set = set(stored or [])
    values: list[str] = list(dict.fromkeys(suggestions if suggestions is not None else COMMON_TIMEZONES))
    options: list[TimezoneOption] = []
    for zone_name in values:
        if not is_valid_timezone(zone_name):
            continue
        options.append(
            TimezoneOption(value=zone_name, label=format_label(zone_name), stored=zone_name in stored_set)
        )
    return options
