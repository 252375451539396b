"""Travel rule evaluation."""

from __future__ import annotations

from pet_travel.domain.models import TravelPlan, TravelRequest
from pet_travel.rules.engine import RuleEngine

_DEFAULT_ENGINE = RuleEngine.default()


def evaluate(request: TravelRequest) -> TravelPlan:
    """Map a travel request to its status-tagged checklist.

    Never raises. A request missing any of the four dates, or matching no
    destination rule, yields an empty plan.
    """
    return _DEFAULT_ENGINE.evaluate(request)


__all__ = ["RuleEngine", "evaluate"]
