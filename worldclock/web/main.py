"""FastAPI application entry point."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from worldclock.config.settings import get_settings
from worldclock.errors import StoreIOError
from worldclock.tasks.ticker import live_clock
from worldclock.utils.logging import setup_logging
from .api import (
    deps,
    logs as log_routes,
    meta as meta_routes,
    status as status_routes,
    timezones as timezone_routes,
)

settings = get_settings()
setup_logging(level=settings.log_level)
logger = logging.getLogger("worldclock.web")

app = FastAPI(title=settings.app_name)

app.include_router(status_routes.router)
app.include_router(timezone_routes.router)
app.include_router(meta_routes.router)
app.include_router(log_routes.router)


@app.get("/")
async def index() -> dict:
    return {"message": "World clock API running", "docs": "/docs", "health": "/health"}


@app.on_event("startup")
async def on_startup() -> None:
    store = deps.get_store()
    logger.info("Preparing timezone list at %s", store.path)
    try:
        await store.ensure_exists()
    except StoreIOError:
        # Reported again by /health and on every list request
        logger.exception("Timezone list could not be created")
    await live_clock.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await live_clock.shutdown()
