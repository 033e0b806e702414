"""Client concreto de Google Calendar para os fins de carencia."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2 import credentials as oauth_credentials
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from utils.errors import CalendarServiceError
from withdrawal.infra.calendar.google_calendar_parsers import http_status, map_calendar_event
from withdrawal.observability import get_correlation_id
from withdrawal.protocols.calendar_service import CalendarServiceProtocol

if TYPE_CHECKING:
    from config.settings.calendar import CalendarSettings
    from withdrawal.domain.calendar import AllDayEvent, CalendarEvent

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"


def build_credentials(settings: CalendarSettings) -> Any:
    """Monta credenciais google-auth conforme o modo configurado.

    Credenciais OAuth de usuario sao renovadas pelo google-auth quando o
    token de acesso expira.
    """
    if settings.auth_mode == "service_account":
        return service_account.Credentials.from_service_account_info(
            json.loads(settings.google_service_account_json or "{}"),
            scopes=[_CALENDAR_SCOPE],
        )
    if settings.auth_mode == "oauth":
        return oauth_credentials.Credentials(
            token=None,
            refresh_token=settings.google_oauth_refresh_token,
            token_uri=settings.google_oauth_token_uri,
            client_id=settings.google_oauth_client_id,
            client_secret=settings.google_oauth_client_secret,
            scopes=[_CALENDAR_SCOPE],
        )
    raise CalendarServiceError("calendar_credentials_missing")


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google."""

    __slots__ = ("_service",)

    def __init__(self, *, credentials: Any) -> None:
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    @classmethod
    def from_settings(cls, settings: CalendarSettings) -> GoogleCalendarClient:
        return cls(credentials=build_credentials(settings))

    def create_all_day_event(self, calendar_id: str, event: AllDayEvent) -> CalendarEvent:
        try:
            response = self._insert_event_sync(calendar_id, event.to_payload())
            return map_calendar_event(response)
        except HttpError as exc:
            self._log_error(action="create_all_day_event", result="error", exc=exc)
            raise
        except Exception:
            self._log_error(action="create_all_day_event", result="error")
            raise

    def _insert_event_sync(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=calendar_id, body=body).execute()

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
