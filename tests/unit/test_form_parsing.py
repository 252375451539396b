"""Form parsing: loosely typed values into TravelRequest."""

import datetime as dt

import pytest

from pet_travel.domain.enums import Airport, Destination, Species
from pet_travel.domain.exceptions import DomainError, InvalidTravelRequest
from pet_travel.services.form_parsing import parse_travel_form, suggest_blood_collection_date


def test_snake_case_form_with_iso_dates():
    request = parse_travel_form(
        {
            "species": "Cão",
            "destination": "Portugal",
            "birth_date": "2024-01-10",
            "vaccination_date": "2024-06-01",
            "blood_collection_date": "2024-07-15",
            "travel_date": "2024-11-01",
            "pet_name": "  Rex ",
        }
    )

    assert request.species == Species.DOG
    assert request.destination == Destination.PORTUGAL
    assert request.arrival_airport == Airport.NONE
    assert request.weight_kg == 0
    assert request.travel_date == dt.date(2024, 11, 1)
    assert request.pet_name == "Rex"
    assert request.is_complete


def test_camel_case_form_with_display_dates():
    """Campos do formulário web (camelCase, dd/mm/aaaa)."""
    request = parse_travel_form(
        {
            "species": "Cão",
            "destination": "Estados Unidos",
            "airportUSA": "NOVA YORK",
            "weightKg": "9,5",
            "birthDate": "10/01/2024",
            "vaccineDate": "01/05/2024",
            "bloodCollectionDate": "03/06/2024",
            "travelDate": "10/01/2025",
            "petName": "Bolt",
        }
    )

    assert request.arrival_airport == Airport.NOVA_YORK
    assert request.weight_kg == 9.5
    assert request.birth_date == dt.date(2024, 1, 10)
    assert request.travel_date == dt.date(2025, 1, 10)
    assert request.pet_name == "Bolt"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("cao", Species.DOG),
        ("DOG", Species.DOG),
        ("gato", Species.CAT),
        (Species.CAT, Species.CAT),
    ],
)
def test_species_matching_is_case_and_accent_insensitive(raw, expected):
    assert parse_travel_form({"species": raw}).species == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Finlândia", Destination.FINLAND),
        ("finlandia", Destination.FINLAND),
        ("united states", Destination.UNITED_STATES),
        ("NORUEGA", Destination.NORWAY),
    ],
)
def test_destination_accepts_value_name_or_label(raw, expected):
    assert parse_travel_form({"destination": raw}).destination == expected


def test_airport_label_and_name_are_accepted():
    assert parse_travel_form({"arrival_airport": "Filadélfia"}).arrival_airport == Airport.FILADELFIA
    assert parse_travel_form({"arrival_airport": "los_angeles"}).arrival_airport == Airport.LOS_ANGELES


def test_blank_values_mean_not_selected():
    request = parse_travel_form(
        {"species": "", "destination": "  ", "arrival_airport": "", "weight_kg": "", "travel_date": ""}
    )

    assert request.species is None
    assert request.destination is None
    assert request.arrival_airport == Airport.NONE
    assert request.missing_dates == [
        "birth_date",
        "vaccination_date",
        "blood_collection_date",
        "travel_date",
    ]


def test_date_and_datetime_objects_pass_through():
    request = parse_travel_form(
        {"birth_date": dt.date(2024, 1, 10), "travel_date": dt.datetime(2024, 11, 1, 15, 30)}
    )

    assert request.birth_date == dt.date(2024, 1, 10)
    assert request.travel_date == dt.date(2024, 11, 1)


def test_every_malformed_field_is_reported():
    with pytest.raises(InvalidTravelRequest) as excinfo:
        parse_travel_form(
            {
                "species": "Hamster",
                "destination": "Brasil",
                "weight_kg": "-3",
                "birth_date": "31/02/2024",
                "travel_date": "amanhã",
            }
        )

    details = excinfo.value.details
    assert len(details) == 5
    assert details[0].startswith("species:")
    assert details[1].startswith("destination:")
    assert details[2].startswith("weight_kg:")
    assert any(item.startswith("birth_date:") for item in details)
    assert any(item.startswith("travel_date:") for item in details)
    assert isinstance(excinfo.value, DomainError)


def test_boolean_weight_is_rejected():
    with pytest.raises(InvalidTravelRequest):
        parse_travel_form({"weight_kg": True})


def test_suggested_blood_collection_date():
    assert suggest_blood_collection_date(dt.date(2024, 6, 1)) == dt.date(2024, 7, 1)
    assert suggest_blood_collection_date(None) is None


@pytest.mark.parametrize("raw", ["0001-01-01", "31/12/9999", dt.date(9999, 3, 1)])
def test_dates_outside_supported_range_are_rejected(raw):
    with pytest.raises(InvalidTravelRequest) as excinfo:
        parse_travel_form({"travel_date": raw})

    assert excinfo.value.details == ["travel_date: must be between 0002-01-01 and 9998-12-31"]


@pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "1e999", 10**400, float("inf")])
def test_non_finite_weight_is_rejected(raw):
    with pytest.raises(InvalidTravelRequest) as excinfo:
        parse_travel_form({"weight_kg": raw})

    assert excinfo.value.details[0].startswith("weight_kg:")
