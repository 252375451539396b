"""Base types for destination rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pet_travel.domain.enums import Status
from pet_travel.domain.models import AdvisoryMessage, TravelPlan, TravelRequest


class DestinationRule(Protocol):
    """One row of the decision table: a predicate plus the plan it produces."""

    name: str

    def applies(self, request: TravelRequest) -> bool:
        ...

    def produce(self, request: TravelRequest) -> TravelPlan:
        ...


@dataclass
class PlanBuilder:
    validations: list[AdvisoryMessage] = field(default_factory=list)
    travel_windows: list[AdvisoryMessage] = field(default_factory=list)
    documentation: list[AdvisoryMessage] = field(default_factory=list)
    antiparasitic_treatment: list[AdvisoryMessage] = field(default_factory=list)
    airport_rules: list[AdvisoryMessage] = field(default_factory=list)

    @staticmethod
    def message(text: str, status: Status) -> AdvisoryMessage:
        return AdvisoryMessage(text=text, status=status)

    def build(self) -> TravelPlan:
        return TravelPlan(
            validations=tuple(self.validations),
            travel_windows=tuple(self.travel_windows),
            documentation=tuple(self.documentation),
            antiparasitic_treatment=tuple(self.antiparasitic_treatment),
            airport_rules=tuple(self.airport_rules),
        )


__all__ = ["DestinationRule", "PlanBuilder"]
