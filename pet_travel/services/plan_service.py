"""Application service for the pet travel checklist use-case."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, Field

from pet_travel.config.settings import PlannerSettings, resolve_settings
from pet_travel.domain.models import TravelPlan, TravelRequest
from pet_travel.infrastructure.logging import StructuredLogger, get_logger
from pet_travel.observability.plan_metrics import observe_evaluation
from pet_travel.rules.engine import RuleEngine
from pet_travel.services.form_parsing import parse_travel_form, suggest_blood_collection_date
from pet_travel.services.plan_presenter import plan_subtitle, plan_title

BRANCH_INCOMPLETE = "incomplete"
BRANCH_NONE = "none"


class PlanResult(BaseModel):
    request: TravelRequest
    plan: TravelPlan
    title: str = ""
    subtitle: str = ""
    branch: str = BRANCH_NONE
    suggested_blood_collection_date: Optional[dt.date] = None
    autofilled_fields: list[str] = Field(default_factory=list)
    trace_id: str = ""

    @property
    def complete(self) -> bool:
        return self.request.is_complete


def _autofill(request: TravelRequest, suggested: Optional[dt.date]) -> tuple[TravelRequest, list[str]]:
    if suggested is None or request.blood_collection_date is not None:
        return request, []
    return request.model_copy(update={"blood_collection_date": suggested}), ["blood_collection_date"]


def evaluate_request(
    request: TravelRequest,
    *,
    engine: RuleEngine | None = None,
    logger: StructuredLogger | None = None,
) -> tuple[TravelPlan, str]:
    """Run the rule engine with logging and metrics around it."""
    engine = engine or RuleEngine.default()
    logger = logger or get_logger()

    logger.evaluation_start(
        species=request.species.value if request.species else None,
        destination=request.destination.value if request.destination else None,
        airport=request.arrival_airport.value,
    )
    rule = engine.select(request)
    if rule is None:
        plan = TravelPlan()
        branch = BRANCH_NONE if request.is_complete else BRANCH_INCOMPLETE
        if not request.is_complete:
            logger.warning("precondition", "missing required dates", missing=request.missing_dates)
    else:
        branch = rule.name
        logger.rule_selected(rule.name)
        plan = rule.produce(request)

    counts = plan.count_by_status()
    latency_ms = logger.evaluation_end(messages_count=sum(counts.values()), branch=branch, status_counts=counts)
    observe_evaluation(branch=branch, status_counts=counts, latency_ms=latency_ms, trace_id=logger.trace_id)
    return plan, branch


def execute_plan(
    form: Mapping[str, Any],
    *,
    settings: PlannerSettings | None = None,
    engine: RuleEngine | None = None,
    logger: StructuredLogger | None = None,
) -> PlanResult:
    """Parse a form, evaluate it and return the plan with its display metadata.

    Raises InvalidTravelRequest for malformed form values. Policy violations
    never raise; they come back as WARNING messages inside the plan.
    """
    settings = settings or resolve_settings()
    logger = logger or get_logger(enabled=settings.log_events)

    request = parse_travel_form(form)
    suggested = suggest_blood_collection_date(request.vaccination_date)
    autofilled: list[str] = []
    if settings.autofill_blood_collection_date:
        request, autofilled = _autofill(request, suggested)

    plan, branch = evaluate_request(request, engine=engine, logger=logger)
    return PlanResult(
        request=request,
        plan=plan,
        title=plan_title(request.pet_name),
        subtitle=plan_subtitle(request.destination, request.species),
        branch=branch,
        suggested_blood_collection_date=suggested,
        autofilled_fields=autofilled,
        trace_id=logger.trace_id,
    )


__all__ = ["BRANCH_INCOMPLETE", "BRANCH_NONE", "PlanResult", "evaluate_request", "execute_plan"]
