"""Contrato de calendario usado pelo notificador de carencia.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar os servicos que dependem da capacidade de agenda.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from withdrawal.domain.calendar import AllDayEvent, CalendarEvent


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Contrato para criacao de eventos de dia inteiro."""

    def create_all_day_event(self, calendar_id: str, event: AllDayEvent) -> CalendarEvent:
        """Cria o evento e retorna o registro do provider.

        Qualquer excecao sinaliza falha na criacao.
        """
        ...
