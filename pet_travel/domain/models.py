"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pet_travel.domain.dates import MAX_SUPPORTED_DATE, MIN_SUPPORTED_DATE, is_supported_date
from pet_travel.domain.enums import Airport, Destination, PlanSection, Species, Status


class TravelRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    species: Optional[Species] = None
    destination: Optional[Destination] = None
    arrival_airport: Airport = Airport.NONE
    weight_kg: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    birth_date: Optional[dt.date] = None
    vaccination_date: Optional[dt.date] = None
    blood_collection_date: Optional[dt.date] = None
    travel_date: Optional[dt.date] = None
    pet_name: str = ""

    @model_validator(mode="after")
    def _check_date_range(self) -> "TravelRequest":
        for name in ("birth_date", "vaccination_date", "blood_collection_date", "travel_date"):
            value = getattr(self, name)
            if value is not None and not is_supported_date(value):
                raise ValueError(
                    f"{name} must be between {MIN_SUPPORTED_DATE.isoformat()} and {MAX_SUPPORTED_DATE.isoformat()}"
                )
        return self

    @property
    def missing_dates(self) -> list[str]:
        return [
            name
            for name in ("birth_date", "vaccination_date", "blood_collection_date", "travel_date")
            if getattr(self, name) is None
        ]

    @property
    def is_complete(self) -> bool:
        return not self.missing_dates


class AdvisoryMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    status: Status


class TravelPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    validations: tuple[AdvisoryMessage, ...] = ()
    travel_windows: tuple[AdvisoryMessage, ...] = ()
    documentation: tuple[AdvisoryMessage, ...] = ()
    antiparasitic_treatment: tuple[AdvisoryMessage, ...] = ()
    airport_rules: tuple[AdvisoryMessage, ...] = ()

    def sections(self) -> Iterator[tuple[PlanSection, tuple[AdvisoryMessage, ...]]]:
        for section in PlanSection:
            yield section, getattr(self, section.value)

    def messages(self) -> list[AdvisoryMessage]:
        return [message for _, rows in self.sections() for message in rows]

    def is_empty(self) -> bool:
        return not self.messages()

    def count_by_status(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for message in self.messages():
            counts[message.status.value] = counts.get(message.status.value, 0) + 1
        return counts


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
