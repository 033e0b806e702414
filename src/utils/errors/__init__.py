"""Excecoes utilitarias compartilhadas."""

from .exceptions import CalendarServiceError, InfrastructureError

__all__ = [
    "CalendarServiceError",
    "InfrastructureError",
]
