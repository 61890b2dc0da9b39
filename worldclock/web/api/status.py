"""Health and status endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from worldclock.data.store import TimezoneStore
from worldclock.errors import WorldClockError
from worldclock.tasks.ticker import LiveClock

from . import deps

router = APIRouter(tags=["status"])


@router.get("/health")
async def healthcheck(
    store: TimezoneStore = Depends(deps.get_store),
    clock: LiveClock = Depends(deps.get_clock),
) -> dict:
    store_status: dict = {"path": str(store.path)}
    try:
        store_status["count"] = len(await store.read_all())
        store_status["ok"] = True
    except WorldClockError as exc:
        store_status["ok"] = False
        store_status["error"] = str(exc)

    return {
        "status": "ok" if store_status["ok"] else "degraded",
        "time": datetime.now(timezone.utc).isoformat(),
        "store": store_status,
        "clock": {
            "running": clock.running,
            "interval_seconds": clock.interval_seconds,
            "ticks": clock.ticks,
            "current": clock.now().isoformat(),
        },
    }
