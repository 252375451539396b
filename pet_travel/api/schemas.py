"""API request/response models."""

from __future__ import annotations

import datetime as dt
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from pet_travel.domain.models import TravelPlan


class PlanRequest(BaseModel):
    """Form fields as sent by the planner UI; snake_case or the UI's camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    pet_name: str = Field(
        default="",
        max_length=120,
        validation_alias=AliasChoices("pet_name", "petName"),
        description="Nome do pet (apenas exibição)",
    )
    species: Optional[str] = Field(default=None, max_length=32, description="Cão / Gato")
    destination: Optional[str] = Field(default=None, max_length=64, description="País de destino")
    arrival_airport: Optional[str] = Field(
        default=None,
        max_length=64,
        validation_alias=AliasChoices("arrival_airport", "airportUSA"),
        description="Aeroporto de chegada (EUA)",
    )
    weight_kg: Optional[Union[StrictFloat, StrictInt, str]] = Field(
        default=None,
        validation_alias=AliasChoices("weight_kg", "weightKg"),
        description="Peso do cão em kg",
    )
    birth_date: Optional[str] = Field(
        default=None, max_length=32, validation_alias=AliasChoices("birth_date", "birthDate")
    )
    vaccination_date: Optional[str] = Field(
        default=None, max_length=32, validation_alias=AliasChoices("vaccination_date", "vaccineDate")
    )
    blood_collection_date: Optional[str] = Field(
        default=None,
        max_length=32,
        validation_alias=AliasChoices("blood_collection_date", "bloodCollectionDate"),
    )
    travel_date: Optional[str] = Field(
        default=None, max_length=32, validation_alias=AliasChoices("travel_date", "travelDate")
    )


class PlanResponse(BaseModel):
    status: str = Field(description="done / incomplete")
    title: str = Field(default="")
    subtitle: str = Field(default="")
    branch: str = Field(default="none")
    plan: TravelPlan = Field(default_factory=TravelPlan)
    suggested_blood_collection_date: Optional[dt.date] = None
    autofilled_fields: list[str] = Field(default_factory=list)
    rendered: str = Field(default="", description="Checklist em Markdown")
    trace_id: str = Field(default="")


class OptionItem(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    species: list[OptionItem] = Field(default_factory=list)
    destinations: list[OptionItem] = Field(default_factory=list)
    airports: list[OptionItem] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
