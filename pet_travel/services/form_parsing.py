"""Turn loosely typed form values into a TravelRequest."""

from __future__ import annotations

import datetime as dt
import math
import unicodedata
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, TypeVar

from pet_travel.domain.constants import SUGGESTED_BLOOD_COLLECTION_DAYS
from pet_travel.domain.dates import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    add_days,
    is_supported_date,
    parse_date,
)
from pet_travel.domain.enums import Airport, Destination, Species
from pet_travel.domain.exceptions import InvalidTravelRequest
from pet_travel.domain.models import TravelRequest

E = TypeVar("E", bound=Enum)

# canonical field -> accepted form keys (snake_case first, then the web form's camelCase)
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "species": ("species",),
    "destination": ("destination",),
    "arrival_airport": ("arrival_airport", "airport", "airportUSA"),
    "weight_kg": ("weight_kg", "weightKg"),
    "birth_date": ("birth_date", "birthDate"),
    "vaccination_date": ("vaccination_date", "vaccine_date", "vaccineDate"),
    "blood_collection_date": ("blood_collection_date", "bloodCollectionDate"),
    "travel_date": ("travel_date", "travelDate"),
    "pet_name": ("pet_name", "petName"),
}
_DATE_FIELDS = ("birth_date", "vaccination_date", "blood_collection_date", "travel_date")


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).strip().casefold()


def _pick(form: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in form:
            return form[key]
    return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_choice(enum_cls: type[E], value: Any) -> E:
    if isinstance(value, enum_cls):
        return value
    wanted = _fold(str(value))
    for member in enum_cls:
        candidates = {member.value, member.name, member.name.replace("_", " ")}
        label = getattr(member, "label", None)
        if label:
            candidates.add(label)
        if wanted in {_fold(item) for item in candidates}:
            return member
    raise ValueError(f"unknown {enum_cls.__name__.lower()}: {value!r}")


def _parse_date_value(value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return parse_date(str(value))


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        raise ValueError("weight is out of range") from None


def _parse_weight(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("weight must be a number")
    if isinstance(value, (int, float)):
        weight = _to_float(value)
    else:
        weight = _to_float(str(value).strip().replace(",", "."))
    if not math.isfinite(weight) or weight < 0:
        raise ValueError("weight must be a non-negative number")
    return weight


def suggest_blood_collection_date(vaccination_date: Optional[dt.date]) -> Optional[dt.date]:
    """Earliest titer collection date: vaccination + 30 days."""
    if vaccination_date is None:
        return None
    return add_days(vaccination_date, SUGGESTED_BLOOD_COLLECTION_DAYS)


def parse_travel_form(form: Mapping[str, Any]) -> TravelRequest:
    """Build a TravelRequest, collecting every malformed field before failing."""
    errors: list[str] = []
    values: dict[str, Any] = {}

    species = _pick(form, "species")
    if not _is_blank(species):
        try:
            values["species"] = _parse_choice(Species, species)
        except ValueError as exc:
            errors.append(f"species: {exc}")

    destination = _pick(form, "destination")
    if not _is_blank(destination):
        try:
            values["destination"] = _parse_choice(Destination, destination)
        except ValueError as exc:
            errors.append(f"destination: {exc}")

    airport = _pick(form, "arrival_airport")
    if not _is_blank(airport):
        try:
            values["arrival_airport"] = _parse_choice(Airport, airport)
        except ValueError as exc:
            errors.append(f"arrival_airport: {exc}")

    weight = _pick(form, "weight_kg")
    if not _is_blank(weight):
        try:
            values["weight_kg"] = _parse_weight(weight)
        except ValueError as exc:
            errors.append(f"weight_kg: {exc}")

    for field in _DATE_FIELDS:
        raw = _pick(form, field)
        if _is_blank(raw):
            continue
        try:
            parsed = _parse_date_value(raw)
        except ValueError:
            errors.append(f"{field}: expected yyyy-mm-dd or dd/mm/yyyy, got {raw!r}")
            continue
        if not is_supported_date(parsed):
            errors.append(
                f"{field}: must be between {MIN_SUPPORTED_DATE.isoformat()} and {MAX_SUPPORTED_DATE.isoformat()}"
            )
            continue
        values[field] = parsed

    pet_name = _pick(form, "pet_name")
    if not _is_blank(pet_name):
        values["pet_name"] = str(pet_name).strip()

    if errors:
        raise InvalidTravelRequest(errors)
    return TravelRequest(**values)


__all__ = ["parse_travel_form", "suggest_blood_collection_date"]
