"""Application configuration and environment management."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ConfigDict, field_validator

from worldclock.config.timezones import COMMON_TIMEZONES


load_dotenv()

SORT_ORDERS: tuple[str, ...] = ("alphabetical", "chronological", "manual")


def _detect_timezone() -> str:
    tz_env = os.environ.get("TZ") or os.environ.get("LOCAL_TIMEZONE")
    if tz_env:
        return tz_env

    try:
        import tzlocal

        local_tz = tzlocal.get_localzone()
        return str(local_tz)
    except Exception:
        return "UTC"


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="World Clock", description="Human readable app name")

    data_dir: Path = Field(default=Path("data"), description="Directory for persistent data")
    timezones_file: str = Field(
        default="timezones.json",
        description="File name of the stored timezone list inside data_dir",
    )

    default_timezone: str = Field(
        default_factory=_detect_timezone,
        description="Olson timezone identifier treated as the local zone for adjusted times",
    )
    default_sort_order: str = Field(
        default="chronological",
        description="Sort order used when a request does not choose one",
    )
    refresh_interval_seconds: float = Field(
        default=1.0,
        description="Seconds between live clock refreshes",
    )
    log_level: str = Field(default="INFO", description="Root level for the worldclock logger")

    suggested_timezones: List[str] = Field(
        default_factory=lambda: list(COMMON_TIMEZONES),
        description="Identifiers offered as suggestions when adding a timezone",
    )

    @field_validator("default_timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (KeyError, ValueError, OSError) as exc:
            raise ValueError(f"Unknown timezone '{value}'") from exc
        return value

    @field_validator("default_sort_order")
    @classmethod
    def _validate_sort_order(cls, value: str) -> str:
        value_lower = value.strip().lower()
        if value_lower not in SORT_ORDERS:
            raise ValueError("Sort order must be alphabetical, chronological, or manual")
        return value_lower

    @field_validator("refresh_interval_seconds")
    @classmethod
    def _validate_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Refresh interval must be positive")
        return value

    @field_validator("suggested_timezones", mode="before")
    @classmethod
    def _split_suggestions(cls, value: str | List[str] | None) -> List[str]:
        if not value:
            return []
        if isinstance(value, list):
            return value
        return [item.strip() for item in value.split(",") if item.strip()]

    @property
    def timezones_path(self) -> Path:
        return self.data_dir / self.timezones_file


_ENV_MAPPING = {
    "APP_NAME": "app_name",
    "DATA_DIR": "data_dir",
    "TIMEZONES_FILE": "timezones_file",
    "DEFAULT_TIMEZONE": "default_timezone",
    "DEFAULT_SORT_ORDER": "default_sort_order",
    "REFRESH_INTERVAL_SECONDS": "refresh_interval_seconds",
    "LOG_LEVEL": "log_level",
    "SUGGESTED_TIMEZONES": "suggested_timezones",
}


def _load_settings() -> Settings:
    data: dict[str, object] = {}
    for env_name, field_name in _ENV_MAPPING.items():
        if env_name not in os.environ:
            continue
        data[field_name] = os.environ[env_name]
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return _load_settings()
