"""Timezone list routes: show, add and remove."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from worldclock.clock.presentation import SortOrder, build_rows
from worldclock.config.settings import get_settings
from worldclock.data import repositories
from worldclock.data.store import TimezoneStore
from worldclock.errors import StoreDataError, StoreIOError, TimezoneValidationError
from worldclock.tasks.ticker import LiveClock
from worldclock.utils.time_utils import parse_adjusted_time

from . import deps, schemas

logger = logging.getLogger("worldclock.web.timezones")

router = APIRouter(prefix="/api/timezones", tags=["timezones"])


def _store_failure(exc: Exception) -> HTTPException:
    logger.error("Timezone store failure: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get("", response_model=schemas.ClockResponse)
async def list_timezones_route(
    sort: Optional[SortOrder] = Query(default=None, description="alphabetical, chronological or manual"),
    time: Optional[str] = Query(default=None, description="Adjusted local time as HH:MM"),
    store: TimezoneStore = Depends(deps.get_store),
    clock: LiveClock = Depends(deps.get_clock),
):
    order = sort or SortOrder(get_settings().default_sort_order)
    try:
        identifiers = await repositories.list_timezones(store)
    except (StoreIOError, StoreDataError) as exc:
        raise _store_failure(exc) from exc

    adjusted = parse_adjusted_time(time)
    reference = adjusted or clock.now()
    rows = build_rows(identifiers, order, reference)
    return schemas.ClockResponse(
        sort=order.value,
        adjusted=adjusted is not None,
        reference=reference,
        rows=[
            schemas.ClockRowResponse(identifier=row.identifier, label=row.label, time=row.time, error=row.error)
            for row in rows
        ],
    )


@router.post("", response_model=schemas.TimezoneListResponse, status_code=status.HTTP_201_CREATED)
async def add_timezone_route(
    payload: schemas.TimezoneCreate,
    store: TimezoneStore = Depends(deps.get_store),
):
    try:
        timezones = await repositories.add_timezone(store, payload.identifier)
    except TimezoneValidationError as exc:
        code = status.HTTP_409_CONFLICT if exc.reason == repositories.DUPLICATE else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=code, detail=str(exc)) from exc
    except (StoreIOError, StoreDataError) as exc:
        raise _store_failure(exc) from exc
    return schemas.TimezoneListResponse(timezones=timezones)


@router.delete("/{identifier:path}", response_model=schemas.TimezoneListResponse)
async def remove_timezone_route(
    identifier: str,
    store: TimezoneStore = Depends(deps.get_store),
):
    try:
        timezones = await repositories.remove_timezone(store, identifier)
    except (StoreIOError, StoreDataError) as exc:
        raise _store_failure(exc) from exc
    return schemas.TimezoneListResponse(timezones=timezones)
