"""Domain package exports."""

from pet_travel.domain.constants import (
    ANTIPARASITIC_DESTINATIONS,
    DAYS_PER_MONTH,
    EU_DESTINATIONS,
    USA_MIN_AGE_DAYS,
)
from pet_travel.domain.enums import Airport, Destination, PlanSection, Species, Status
from pet_travel.domain.exceptions import DomainError, InvalidTravelRequest
from pet_travel.domain.models import AdvisoryMessage, ErrorResponse, TravelPlan, TravelRequest

__all__ = [
    "AdvisoryMessage",
    "Airport",
    "Destination",
    "DomainError",
    "ErrorResponse",
    "InvalidTravelRequest",
    "PlanSection",
    "Species",
    "Status",
    "TravelPlan",
    "TravelRequest",
    "ANTIPARASITIC_DESTINATIONS",
    "DAYS_PER_MONTH",
    "EU_DESTINATIONS",
    "USA_MIN_AGE_DAYS",
]
