"""EU pet passport rules (Portugal, Finland, Ireland, Malta, Norway)."""

from __future__ import annotations

from pet_travel.domain.constants import (
    ANTIPARASITIC_DESTINATIONS,
    ANTIPARASITIC_WINDOW_END_DAYS,
    ANTIPARASITIC_WINDOW_START_DAYS,
    EU_CVI_WINDOW_DAYS,
    EU_DAYS_BLOOD_TO_TRAVEL,
    EU_DESTINATIONS,
    EU_GOV_NOTIFICATION_DAYS,
    MIN_DAYS_VACCINE_TO_BLOOD,
)
from pet_travel.domain.dates import add_days, days_between, format_date
from pet_travel.domain.enums import Species, Status
from pet_travel.domain.models import AdvisoryMessage, TravelPlan, TravelRequest
from pet_travel.rules.base import PlanBuilder


class EuDestinationRule:
    name = "eu"

    def applies(self, request: TravelRequest) -> bool:
        return request.destination in EU_DESTINATIONS

    def produce(self, request: TravelRequest) -> TravelPlan:
        plan = PlanBuilder()
        vaccine = request.vaccination_date
        blood = request.blood_collection_date
        travel = request.travel_date

        if days_between(blood, vaccine) < MIN_DAYS_VACCINE_TO_BLOOD:
            plan.validations.append(
                plan.message(
                    f"A coleta de sangue ({format_date(blood)}) deve ser feita no mínimo "
                    f"30 dias após a vacina ({format_date(vaccine)}).",
                    Status.WARNING,
                )
            )
        else:
            plan.validations.append(
                plan.message(f"Data da Vacina Antirrábica: {format_date(vaccine)}", Status.OK)
            )
            plan.validations.append(
                plan.message(
                    f"Data da Coleta de Sangue: {format_date(blood)} (Respeitou os 30 dias)",
                    Status.OK,
                )
            )

        min_travel = add_days(blood, EU_DAYS_BLOOD_TO_TRAVEL)
        plan.travel_windows.append(
            plan.message(f"Primeira data possível para a viagem: {format_date(min_travel)}", Status.INFO)
        )
        if travel < min_travel:
            plan.travel_windows.append(
                plan.message(
                    f"Sua data de viagem planejada ({format_date(travel)}) é ANTERIOR à data mínima permitida!",
                    Status.WARNING,
                )
            )
        else:
            plan.travel_windows.append(
                plan.message(f"Data de viagem planejada: {format_date(travel)}", Status.OK)
            )

        cvi_start = add_days(travel, -EU_CVI_WINDOW_DAYS)
        gov_notification = add_days(travel, -EU_GOV_NOTIFICATION_DAYS)
        plan.documentation.append(
            plan.message(
                f"Janela para Atestado de Saúde e CVI: de {format_date(cvi_start)} a {format_date(travel)}",
                Status.INFO,
            )
        )
        plan.documentation.append(
            plan.message(
                f"Prazo final para notificar o governo de {request.destination.value}: "
                f"{format_date(gov_notification)}",
                Status.INFO,
            )
        )

        plan.antiparasitic_treatment.extend(antiparasitic_messages(request))
        return plan.build()


def antiparasitic_messages(request: TravelRequest) -> list[AdvisoryMessage]:
    """Echinococcus treatment: mandatory for dogs entering the listed countries only."""
    if request.species == Species.DOG and request.destination in ANTIPARASITIC_DESTINATIONS:
        travel = request.travel_date
        window_start = add_days(travel, -ANTIPARASITIC_WINDOW_START_DAYS)
        window_end = add_days(travel, -ANTIPARASITIC_WINDOW_END_DAYS)
        return [
            PlanBuilder.message(
                f"Status: OBRIGATÓRIO para cães com destino a {request.destination.value}.",
                Status.WARNING,
            ),
            PlanBuilder.message(
                f"Janela de aplicação: entre {format_date(window_start)} e {format_date(window_end)}.",
                Status.INFO,
            ),
        ]
    return [PlanBuilder.message("Status: Não necessário para este destino/espécie.", Status.OK)]


__all__ = ["EuDestinationRule", "antiparasitic_messages"]
