"""Runtime configuration helpers."""

from pet_travel.config.settings import PlannerSettings, resolve_settings

__all__ = ["PlannerSettings", "resolve_settings"]
