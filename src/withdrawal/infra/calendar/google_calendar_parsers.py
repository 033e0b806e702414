"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from withdrawal.domain.calendar import CalendarEvent

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError


def map_calendar_event(payload: dict[str, Any]) -> CalendarEvent:
    return CalendarEvent(
        event_id=str(payload.get("id") or ""),
        html_link=str(payload.get("htmlLink") or ""),
        start_date=_extract_event_date(payload.get("start")),
        end_date=_extract_event_date(payload.get("end")),
        status=str(payload.get("status") or "confirmed"),
    )


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def _extract_event_date(value: Any) -> str:
    if isinstance(value, dict):
        if isinstance(value.get("date"), str) and value["date"].strip():
            return value["date"]
        # Eventos com horario sao aceitos; guardamos apenas a parte da data.
        if isinstance(value.get("dateTime"), str) and value["dateTime"].strip():
            return value["dateTime"][:10]
    raise ValueError("missing_event_date")
