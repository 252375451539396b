"""Infrastructure services and cross-cutting utilities."""

from pet_travel.infrastructure.logging import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
