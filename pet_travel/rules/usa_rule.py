"""USA (CDC / airline) rules. Only dogs are covered."""

from __future__ import annotations

from pet_travel.domain.constants import (
    DAYS_PER_MONTH,
    MIN_DAYS_VACCINE_TO_BLOOD,
    USA_CFRVM_WINDOW_DAYS,
    USA_CVI_REQUEST_DAYS,
    USA_DAYS_BLOOD_TO_TRAVEL,
    USA_HEALTH_CERT_WINDOW_DAYS,
    USA_IMPORT_PERMIT_WINDOW_DAYS,
    USA_MIN_AGE_AT_VACCINE_DAYS,
    USA_MIN_AGE_DAYS,
)
from pet_travel.domain.dates import add_days, days_between, format_date
from pet_travel.domain.enums import Destination, Species, Status
from pet_travel.domain.models import TravelPlan, TravelRequest
from pet_travel.rules.airport_rules import airport_messages
from pet_travel.rules.base import PlanBuilder


class UsaDogRule:
    name = "usa_dog"

    def applies(self, request: TravelRequest) -> bool:
        return request.destination == Destination.UNITED_STATES and request.species == Species.DOG

    def produce(self, request: TravelRequest) -> TravelPlan:
        plan = PlanBuilder()
        self._validate_ages(request, plan)
        self._travel_windows(request, plan)
        self._documentation(request, plan)
        plan.airport_rules.extend(airport_messages(request))
        return plan.build()

    @staticmethod
    def _validate_ages(request: TravelRequest, plan: PlanBuilder) -> None:
        birth = request.birth_date
        vaccine = request.vaccination_date
        blood = request.blood_collection_date

        age_at_travel = days_between(request.travel_date, birth)
        if age_at_travel < USA_MIN_AGE_DAYS:
            plan.validations.append(
                plan.message(
                    "O cão terá menos de 6 meses na data da viagem. A entrada não é permitida.",
                    Status.WARNING,
                )
            )
        else:
            months = age_at_travel / DAYS_PER_MONTH
            plan.validations.append(
                plan.message(f"Idade na viagem: OK (terá aprox. {months:.1f} meses).", Status.OK)
            )

        age_at_vaccine = days_between(vaccine, birth)
        if age_at_vaccine < USA_MIN_AGE_AT_VACCINE_DAYS:
            plan.validations.append(
                plan.message(
                    "A vacina antirrábica foi aplicada antes dos 90 dias de vida do filhote.",
                    Status.WARNING,
                )
            )
        else:
            plan.validations.append(
                plan.message(
                    f"Idade na vacinação: OK (foi vacinado com {age_at_vaccine} dias de vida).",
                    Status.OK,
                )
            )

        if days_between(blood, vaccine) < MIN_DAYS_VACCINE_TO_BLOOD:
            plan.validations.append(
                plan.message(
                    f"A coleta de sangue ({format_date(blood)}) deve ser feita no mínimo 30 dias após a vacina.",
                    Status.WARNING,
                )
            )
        else:
            plan.validations.append(
                plan.message("Intervalo Vacina -> Coleta: OK (respeitou os 30 dias).", Status.OK)
            )

    @staticmethod
    def _travel_windows(request: TravelRequest, plan: PlanBuilder) -> None:
        travel = request.travel_date
        min_travel = add_days(request.blood_collection_date, USA_DAYS_BLOOD_TO_TRAVEL)
        plan.travel_windows.append(
            plan.message(
                f"É possível comprar a passagem para viajar a partir de: {format_date(min_travel)}",
                Status.INFO,
            )
        )
        if travel < min_travel:
            plan.travel_windows.append(
                plan.message(
                    f"Sua data de viagem planejada ({format_date(travel)}) não respeita os 28 dias "
                    "após a coleta de sangue!",
                    Status.WARNING,
                )
            )
        else:
            plan.travel_windows.append(
                plan.message(f"Data de viagem planejada: {format_date(travel)}", Status.OK)
            )

    @staticmethod
    def _documentation(request: TravelRequest, plan: PlanBuilder) -> None:
        travel = request.travel_date
        end = format_date(travel)
        cfrvm_start = format_date(add_days(travel, -USA_CFRVM_WINDOW_DAYS))
        permit_start = format_date(add_days(travel, -USA_IMPORT_PERMIT_WINDOW_DAYS))
        health_start = format_date(add_days(travel, -USA_HEALTH_CERT_WINDOW_DAYS))
        cvi_start = format_date(add_days(travel, -USA_CVI_REQUEST_DAYS))
        plan.documentation.extend(
            [
                plan.message(f"Janela para emitir o CFRVM: de {cfrvm_start} a {end}", Status.INFO),
                plan.message(f"Janela para emitir o Import Permit: de {permit_start} a {end}", Status.INFO),
                plan.message(
                    f"Janela para emitir o Atestado de Saúde: de {health_start} a {end} (Validade de 5 dias)",
                    Status.INFO,
                ),
                plan.message(
                    f"Janela para solicitar o CVI: a partir de {cvi_start} (Validade de 5 dias após emissão)",
                    Status.INFO,
                ),
            ]
        )


__all__ = ["UsaDogRule"]
