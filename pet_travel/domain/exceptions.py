"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTravelRequest(DomainError):
    """Raised when form values cannot be turned into a travel request."""

    def __init__(self, details: list[str]):
        self.details = list(details)
        super().__init__("; ".join(self.details) or "invalid travel request")
