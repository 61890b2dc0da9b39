"""Metadata endpoints for UI configuration options."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from worldclock.clock.presentation import SortOrder
from worldclock.config.settings import get_settings
from worldclock.config.timezones import build_timezone_options
from worldclock.data.store import TimezoneStore
from worldclock.errors import WorldClockError

from . import deps, schemas

router = APIRouter(prefix="/api/meta", tags=["meta"])


@router.get("/options", response_model=schemas.OptionsResponse)
async def get_options(store: TimezoneStore = Depends(deps.get_store)):
    settings = get_settings()
    try:
        stored = await store.read_all()
    except WorldClockError:
        # Suggestions are still useful without the stored flags
        stored = []
    options = build_timezone_options(settings.suggested_timezones, stored=stored)
    return schemas.OptionsResponse(
        sort_orders=[order.value for order in SortOrder],
        default_sort_order=settings.default_sort_order,
        local_timezone=settings.default_timezone,
        suggestions=[
            schemas.TimezoneOptionResponse(value=option.value, label=option.label, stored=option.stored)
            for option in options
        ],
    )
