"""Arrival airport facility rules for dogs entering the USA."""

from __future__ import annotations

import datetime as dt
from typing import Callable

from pet_travel.domain.constants import (
    ATLANTA_FACILITY_DAYS,
    MIAMI_FACILITY_DAYS,
    NY_CARGO_MAX_WEIGHT_KG,
    NY_WINTER_END,
    NY_WINTER_START,
)
from pet_travel.domain.dates import add_days, format_date, format_weight
from pet_travel.domain.enums import Airport, Status
from pet_travel.domain.models import AdvisoryMessage, TravelRequest
from pet_travel.rules.base import PlanBuilder

AirportHandler = Callable[[TravelRequest], list[AdvisoryMessage]]


def in_ny_winter_window(travel_date: dt.date) -> bool:
    """Dec 15 of the travel year OR up to Apr 15 of the following year.

    Both bounds are inclusive and joined with OR, so every date matches.
    """
    winter_start = dt.date(travel_date.year, *NY_WINTER_START)
    winter_end = dt.date(travel_date.year + 1, *NY_WINTER_END)
    return travel_date >= winter_start or travel_date <= winter_end


def _facility_reservation(days_ahead: int) -> AirportHandler:
    def handler(request: TravelRequest) -> list[AdvisoryMessage]:
        airport = request.arrival_airport.value
        deadline = add_days(request.travel_date, -days_ahead)
        return [
            PlanBuilder.message(
                f"Aeroporto de {airport}: Reservar facility com {days_ahead} dias de antecedência.",
                Status.WARNING,
            ),
            PlanBuilder.message(f"Prazo para reserva: até {format_date(deadline)}", Status.INFO),
        ]

    return handler


def _new_york(request: TravelRequest) -> list[AdvisoryMessage]:
    rows = [
        PlanBuilder.message(
            f"Aeroporto de {request.arrival_airport.value}: Checar regras específicas de facility.",
            Status.INFO,
        )
    ]
    if request.weight_kg > NY_CARGO_MAX_WEIGHT_KG and in_ny_winter_window(request.travel_date):
        rows.append(
            PlanBuilder.message(
                f"Cães com mais de 9kg ({format_weight(request.weight_kg)}kg) não podem viajar "
                "no porão para NY neste período.",
                Status.WARNING,
            )
        )
    return rows


def _no_airport(_request: TravelRequest) -> list[AdvisoryMessage]:
    return [
        PlanBuilder.message(
            "Nenhum aeroporto selecionado. Verifique as regras específicas.",
            Status.WARNING,
        )
    ]


def _no_deadline_data(request: TravelRequest) -> list[AdvisoryMessage]:
    return [
        PlanBuilder.message(
            f"Aeroporto de {request.arrival_airport.value}: Não há informações de prazo de reserva "
            "no sistema. Verifique diretamente.",
            Status.INFO,
        )
    ]


_AIRPORT_HANDLERS: dict[Airport, AirportHandler] = {
    Airport.ATLANTA: _facility_reservation(ATLANTA_FACILITY_DAYS),
    Airport.MIAMI: _facility_reservation(MIAMI_FACILITY_DAYS),
    Airport.NOVA_YORK: _new_york,
    Airport.NONE: _no_airport,
}


def airport_messages(request: TravelRequest) -> list[AdvisoryMessage]:
    handler = _AIRPORT_HANDLERS.get(request.arrival_airport, _no_deadline_data)
    return handler(request)


__all__ = ["airport_messages", "in_ny_winter_window"]
