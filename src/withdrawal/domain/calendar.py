"""Modelos de evento de calendario de dia inteiro.

Esses contratos ficam no dominio para que o notificador monte o evento
sem conhecer o formato do provider externo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AllDayEvent(BaseModel):
    """Evento de dia inteiro a ser criado no calendario."""

    model_config = ConfigDict(extra="ignore")

    summary: str = Field(..., description="Titulo do evento.")
    description: str = Field(default="", description="Descricao do evento.")
    start_date: str = Field(..., description="Data de inicio (YYYY-MM-DD).")
    end_date: str = Field(..., description="Data de fim (YYYY-MM-DD).")

    def to_payload(self) -> dict[str, Any]:
        """Renderiza o corpo JSON aceito pela API de eventos."""
        return {
            "end": {"date": self.end_date},
            "start": {"date": self.start_date},
            "description": self.description,
            "summary": self.summary,
        }


class CalendarEvent(BaseModel):
    """Representa um evento confirmado no provedor de calendario."""

    model_config = ConfigDict(extra="ignore")

    event_id: str = Field(..., description="Identificador unico do evento no calendario.")
    html_link: str = Field(default="", description="URL publica para visualizar o evento.")
    start_date: str = Field(..., description="Data de inicio do evento.")
    end_date: str = Field(..., description="Data de fim do evento.")
    status: str = Field(default="confirmed", description="Status atual do evento.")


__all__ = ["AllDayEvent", "CalendarEvent"]
