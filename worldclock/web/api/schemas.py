"""Pydantic models shared across API routes."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TimezoneCreate(BaseModel):
    identifier: str = Field(..., max_length=128, description="IANA identifier, e.g. America/New_York")


class TimezoneListResponse(BaseModel):
    timezones: List[str]


class ClockRowResponse(BaseModel):
    identifier: str
    label: str
    time: Optional[str] = None
    error: Optional[str] = None


class ClockResponse(BaseModel):
    sort: str
    adjusted: bool
    reference: datetime
    rows: List[ClockRowResponse]


class TimezoneOptionResponse(BaseModel):
    value: str
    label: str
    stored: bool = False


class OptionsResponse(BaseModel):
    sort_orders: List[str]
    default_sort_order: str
    local_timezone: str
    suggestions: List[TimezoneOptionResponse]
