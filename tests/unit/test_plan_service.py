"""Plan service: parsing, blood date autofill, logging and metrics."""

import datetime as dt
import io
import json

import pytest

from pet_travel.config.settings import PlannerSettings
from pet_travel.domain.exceptions import InvalidTravelRequest
from pet_travel.infrastructure.logging import StructuredLogger
from pet_travel.observability.plan_metrics import get_plan_metrics
from pet_travel.services.plan_service import BRANCH_INCOMPLETE, BRANCH_NONE, execute_plan

_EU_FORM = {
    "petName": "Rex",
    "species": "Cão",
    "destination": "Finlandia",
    "birthDate": "2024-01-10",
    "vaccineDate": "2024-06-01",
    "bloodCollectionDate": "2024-07-15",
    "travelDate": "2024-11-01",
}


def _quiet(**overrides) -> PlannerSettings:
    return PlannerSettings(log_events=False, **overrides)


def test_execute_plan_returns_plan_and_display_metadata():
    result = execute_plan(_EU_FORM, settings=_quiet())

    assert result.branch == "eu"
    assert result.complete
    assert result.title == "📅 CRONOGRAMA DE VIAGEM PARA REX"
    assert result.suggested_blood_collection_date == dt.date(2024, 7, 1)
    assert result.autofilled_fields == []
    assert len(result.plan.antiparasitic_treatment) == 2


def test_missing_blood_date_is_autofilled_from_vaccine():
    form = {**_EU_FORM, "bloodCollectionDate": ""}

    result = execute_plan(form, settings=_quiet())

    assert result.autofilled_fields == ["blood_collection_date"]
    assert result.request.blood_collection_date == dt.date(2024, 7, 1)
    assert not result.plan.is_empty()


def test_autofill_can_be_disabled():
    form = {**_EU_FORM, "bloodCollectionDate": ""}

    result = execute_plan(form, settings=_quiet(autofill_blood_collection_date=False))

    assert result.branch == BRANCH_INCOMPLETE
    assert result.autofilled_fields == []
    assert result.plan.is_empty()
    assert not result.complete


def test_no_matching_rule_branch():
    form = {**_EU_FORM, "species": "Gato", "destination": "Estados Unidos"}

    result = execute_plan(form, settings=_quiet())

    assert result.branch == BRANCH_NONE
    assert result.plan.is_empty()


def test_malformed_form_raises_domain_error():
    with pytest.raises(InvalidTravelRequest):
        execute_plan({**_EU_FORM, "travelDate": "soon"}, settings=_quiet())


def test_metrics_record_branch_and_statuses():
    metrics = get_plan_metrics()

    execute_plan(_EU_FORM, settings=_quiet())
    execute_plan({**_EU_FORM, "travelDate": ""}, settings=_quiet(autofill_blood_collection_date=False))

    snapshot = metrics.snapshot()
    assert snapshot["total_evaluations"] == 2
    assert snapshot["branch_counts"] == {"eu": 1, "incomplete": 1}
    assert snapshot["status_counts"]["OK"] == 3
    assert len(snapshot["last_evaluations"]) == 2


def test_structured_log_events_are_json_lines():
    buffer = io.StringIO()
    logger = StructuredLogger(trace_id="abc12345", output=buffer)

    result = execute_plan(_EU_FORM, settings=_quiet(), logger=logger)

    events = [json.loads(line) for line in buffer.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["evaluation_start", "rule_selected", "evaluation_end"]
    assert all(e["trace_id"] == "abc12345" for e in events)
    assert events[1]["rule"] == "eu"
    assert events[2]["messages_count"] == 8
    assert result.trace_id == "abc12345"


def test_incomplete_request_logs_missing_dates():
    buffer = io.StringIO()
    logger = StructuredLogger(output=buffer)

    execute_plan(
        {**_EU_FORM, "travelDate": None},
        settings=_quiet(autofill_blood_collection_date=False),
        logger=logger,
    )

    events = [json.loads(line) for line in buffer.getvalue().splitlines()]
    warning = next(e for e in events if e["event"] == "warning")
    assert warning["missing"] == ["travel_date"]
