"""Domain enums."""

from enum import Enum


class Species(str, Enum):
    DOG = "Cão"
    CAT = "Gato"


class Destination(str, Enum):
    PORTUGAL = "Portugal"
    UNITED_STATES = "Estados Unidos"
    FINLAND = "Finlandia"
    IRELAND = "Irlanda"
    MALTA = "Malta"
    NORWAY = "Noruega"

    @property
    def label(self) -> str:
        return _DESTINATION_LABELS[self]


class Airport(str, Enum):
    NONE = "N/A"
    ATLANTA = "ATLANTA"
    FILADELFIA = "FILADELFIA"
    MIAMI = "MIAMI"
    NOVA_YORK = "NOVA YORK"
    WASHINGTON = "WASHINGTON"
    LOS_ANGELES = "LOS ANGELES"

    @property
    def label(self) -> str:
        return _AIRPORT_LABELS[self]


class Status(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    INFO = "INFO"
    # Reserved; no current rule emits it.
    ERROR = "ERROR"


class PlanSection(str, Enum):
    VALIDATIONS = "validations"
    TRAVEL_WINDOWS = "travel_windows"
    DOCUMENTATION = "documentation"
    ANTIPARASITIC_TREATMENT = "antiparasitic_treatment"
    AIRPORT_RULES = "airport_rules"

    @property
    def heading(self) -> str:
        return _SECTION_HEADINGS[self]


_DESTINATION_LABELS = {
    Destination.PORTUGAL: "Portugal",
    Destination.UNITED_STATES: "Estados Unidos",
    Destination.FINLAND: "Finlândia",
    Destination.IRELAND: "Irlanda",
    Destination.MALTA: "Malta",
    Destination.NORWAY: "Noruega",
}

_AIRPORT_LABELS = {
    Airport.NONE: "N/A",
    Airport.ATLANTA: "Atlanta",
    Airport.FILADELFIA: "Filadélfia",
    Airport.MIAMI: "Miami",
    Airport.NOVA_YORK: "Nova York",
    Airport.WASHINGTON: "Washington",
    Airport.LOS_ANGELES: "Los Angeles",
}

_SECTION_HEADINGS = {
    PlanSection.VALIDATIONS: "VALIDAÇÕES INICIAIS",
    PlanSection.TRAVEL_WINDOWS: "PRAZOS DA VIAGEM",
    PlanSection.DOCUMENTATION: "DOCUMENTAÇÃO E PROCEDIMENTOS FINAIS",
    PlanSection.ANTIPARASITIC_TREATMENT: "TRATAMENTO ANTIPARASITÁRIO",
    PlanSection.AIRPORT_RULES: "AEROPORTO E FACILITY",
}
