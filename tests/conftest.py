"""pytest global fixtures: environment isolation."""

import datetime as dt

import pytest

from pet_travel.domain.enums import Airport, Destination, Species
from pet_travel.domain.models import TravelRequest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep tests independent of the caller's .env and of each other's metrics."""
    for name in (
        "PET_TRAVEL_AUTOFILL_BLOOD_DATE",
        "CORS_ORIGINS",
        "RATE_LIMIT_MAX",
        "RATE_LIMIT_WINDOW",
        "ENABLE_DOCS",
        "ENABLE_DIAGNOSTICS",
    ):
        monkeypatch.delenv(name, raising=False)
    # JSON event lines would otherwise interleave with captured stderr
    monkeypatch.setenv("PET_TRAVEL_LOG_EVENTS", "false")

    from pet_travel.observability.plan_metrics import get_plan_metrics

    get_plan_metrics().reset()
    yield
    get_plan_metrics().reset()


@pytest.fixture
def eu_request() -> TravelRequest:
    """Dog to Portugal with every date inside policy."""
    return TravelRequest(
        species=Species.DOG,
        destination=Destination.PORTUGAL,
        birth_date=dt.date(2024, 1, 10),
        vaccination_date=dt.date(2024, 6, 1),
        blood_collection_date=dt.date(2024, 7, 15),
        travel_date=dt.date(2024, 11, 1),
        pet_name="Rex",
    )


@pytest.fixture
def usa_request() -> TravelRequest:
    """Dog to the USA via Atlanta with every date inside policy."""
    return TravelRequest(
        species=Species.DOG,
        destination=Destination.UNITED_STATES,
        arrival_airport=Airport.ATLANTA,
        weight_kg=12,
        birth_date=dt.date(2024, 1, 10),
        vaccination_date=dt.date(2024, 5, 1),
        blood_collection_date=dt.date(2024, 6, 3),
        travel_date=dt.date(2024, 9, 10),
        pet_name="Bolt",
    )
