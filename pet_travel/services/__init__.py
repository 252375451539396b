"""Application services."""

from pet_travel.services.form_parsing import parse_travel_form, suggest_blood_collection_date
from pet_travel.services.plan_presenter import render_plan_markdown, render_plan_text
from pet_travel.services.plan_service import PlanResult, execute_plan

__all__ = [
    "PlanResult",
    "execute_plan",
    "parse_travel_form",
    "render_plan_markdown",
    "render_plan_text",
    "suggest_blood_collection_date",
]
