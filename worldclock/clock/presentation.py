"""Pure display helpers: validation, labels, sorting and row building."""
from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo

from worldclock.errors import TimezoneFormatError
from worldclock.utils.time_utils import display_time, now_utc, time_of_day

logger = logging.getLogger("worldclock.presentation")

# Shown in place of a time when a stored zone cannot be rendered
FORMAT_ERROR_MARKER = "unavailable"


class SortOrder(str, Enum):
    ALPHABETICAL = "alphabetical"
    CHRONOLOGICAL = "chronological"
    MANUAL = "manual"


@dataclass(frozen=True)
class ClockRow:
    identifier: str
    label: str
    time: Optional[str]
    error: Optional[str] = None


def is_valid_timezone(candidate: object) -> bool:
    """Return True if the platform timezone database accepts ``candidate`` as-is."""
    if not isinstance(candidate, str) or not candidate:
        return False
    try:
        ZoneInfo(candidate)
    except (ValueError, KeyError, OSError):
        return False
    return True


def format_label(identifier: str) -> str:
    """``America/New_York`` -> ``New York``."""
    city = identifier.split("/")[-1].replace("_", " ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in city.split(" "))


def _collation_key(identifier: str) -> tuple[str, str]:
    label = format_label(identifier)
    folded = unicodedata.normalize("NFKD", label).casefold()
    stripped = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return stripped, label


def sort_timezones(
    identifiers: Iterable[str],
    order: SortOrder | str,
    now: datetime | None = None,
) -> List[str]:
    """Return a new list ordered by ``order``; the input is never mutated."""
    order = SortOrder(order)
    items = list(identifiers)
    if order is SortOrder.MANUAL:
        return items
    if order is SortOrder.ALPHABETICAL:
        return sorted(items, key=_collation_key)

    instant = now or now_utc()

    def _chronological_key(identifier: str) -> tuple[int, str]:
        try:
            return 0, time_of_day(identifier, instant)
        except TimezoneFormatError:
            return 1, ""

    return sorted(items, key=_chronological_key)


def build_row(identifier: str, instant: datetime) -> ClockRow:
    label = format_label(identifier)
    try:
        return ClockRow(identifier=identifier, label=label, time=display_time(identifier, instant))
    except TimezoneFormatError as exc:
        logger.warning("Could not render %s: %s", identifier, exc.original or exc)
        return ClockRow(identifier=identifier, label=label, time=None, error=FORMAT_ERROR_MARKER)


def build_rows(
    identifiers: Iterable[str],
    order: SortOrder | str = SortOrder.CHRONOLOGICAL,
    instant: datetime | None = None,
) -> List[ClockRow]:
    """Sort and render every identifier; a broken zone only affects its own row."""
    instant = instant or now_utc()
    return [build_row(identifier, instant) for identifier in sort_timezones(identifiers, order, instant)]
