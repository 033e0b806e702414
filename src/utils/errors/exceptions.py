"""Excecoes compartilhadas para falhas de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class CalendarServiceError(InfrastructureError):
    """Falha de configuracao ou autenticacao do provider de calendario."""
