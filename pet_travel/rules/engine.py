"""Rule engine: ordered destination rules, first match wins."""

from __future__ import annotations

from pet_travel.domain.models import TravelPlan, TravelRequest
from pet_travel.rules.base import DestinationRule
from pet_travel.rules.eu_rule import EuDestinationRule
from pet_travel.rules.usa_rule import UsaDogRule


class RuleEngine:
    def __init__(self, rules: tuple[DestinationRule, ...]) -> None:
        self._rules = rules

    @classmethod
    def default(cls) -> "RuleEngine":
        return cls((EuDestinationRule(), UsaDogRule()))

    @property
    def rules(self) -> tuple[DestinationRule, ...]:
        return self._rules

    def select(self, request: TravelRequest) -> DestinationRule | None:
        if not request.is_complete:
            return None
        for rule in self._rules:
            if rule.applies(request):
                return rule
        return None

    def evaluate(self, request: TravelRequest) -> TravelPlan:
        rule = self.select(request)
        if rule is None:
            return TravelPlan()
        return rule.produce(request)


__all__ = ["RuleEngine"]
