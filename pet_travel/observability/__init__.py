"""Observability utilities."""

from pet_travel.observability.plan_metrics import get_plan_metrics, observe_evaluation

__all__ = ["get_plan_metrics", "observe_evaluation"]
