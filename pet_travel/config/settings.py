"""Runtime settings snapshot helpers."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _csv_env(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class PlannerSettings(BaseModel):
    autofill_blood_collection_date: bool = Field(default=True)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    rate_limit_max: int = Field(default=60, ge=1)
    rate_limit_window_seconds: int = Field(default=60, ge=1)
    enable_docs: bool = Field(default=False)
    enable_diagnostics: bool = Field(default=False)
    log_events: bool = Field(default=True)


def resolve_settings() -> PlannerSettings:
    return PlannerSettings(
        autofill_blood_collection_date=_is_enabled("PET_TRAVEL_AUTOFILL_BLOOD_DATE", default=True),
        cors_origins=_csv_env("CORS_ORIGINS", "*") or ["*"],
        rate_limit_max=max(1, _int_env("RATE_LIMIT_MAX", 60)),
        rate_limit_window_seconds=max(1, _int_env("RATE_LIMIT_WINDOW", 60)),
        enable_docs=_is_enabled("ENABLE_DOCS"),
        enable_diagnostics=_is_enabled("ENABLE_DIAGNOSTICS"),
        log_events=_is_enabled("PET_TRAVEL_LOG_EVENTS", default=True),
    )


__all__ = ["PlannerSettings", "resolve_settings"]
