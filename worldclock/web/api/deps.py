"""FastAPI dependencies used across routers."""
from __future__ import annotations

from functools import lru_cache

from worldclock.config.settings import get_settings
from worldclock.data.store import TimezoneStore
from worldclock.tasks.ticker import LiveClock, live_clock


@lru_cache(maxsize=1)
def _default_store() -> TimezoneStore:
    return TimezoneStore(get_settings().timezones_path)


def get_store() -> TimezoneStore:
    return _default_store()


def get_clock() -> LiveClock:
    return live_clock
