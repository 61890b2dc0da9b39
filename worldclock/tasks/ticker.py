"""APScheduler-driven live clock that refreshes the current instant."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from worldclock.config.settings import get_settings

logger = logging.getLogger("worldclock.ticker")

JOB_ID = "live-clock-tick"


class LiveClock:
    def __init__(self, interval_seconds: float | None = None) -> None:
        settings = get_settings()
        self.interval_seconds = interval_seconds or settings.refresh_interval_seconds
        self.timezone = settings.default_timezone
        self.scheduler: Optional[AsyncIOScheduler] = None
        self.current = datetime.now(timezone.utc)
        self.ticks = 0
        self._started = False

    @property
    def running(self) -> bool:
        return self._started

    def now(self) -> datetime:
        """Latest refreshed instant, or the real current time when not running."""
        if not self._started:
            return datetime.now(timezone.utc)
        return self.current

    async def start(self) -> None:
        if self._started:
            return
        self.current = datetime.now(timezone.utc)
        # A fresh scheduler binds to the running event loop
        self.scheduler = AsyncIOScheduler(timezone=self.timezone)
        self.scheduler.add_job(
            self._tick,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            replace_existing=True,
        )
        self.scheduler.start()
        self._started = True
        logger.info("Live clock started (every %ss)", self.interval_seconds)

    async def shutdown(self) -> None:
        if not self._started:
            return
        if self.scheduler is not None:
            if self.scheduler.get_job(JOB_ID) is not None:
                self.scheduler.remove_job(JOB_ID)
            if self.scheduler.running:
                self.scheduler.shutdown(wait=False)
            self.scheduler = None
        self._started = False
        logger.info("Live clock stopped after %d ticks", self.ticks)

    async def _tick(self) -> None:
        self.current = datetime.now(timezone.utc)
        self.ticks += 1


live_clock = LiveClock()
