"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pelos servicos de carencia.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

GOOGLE_OAUTH_TOKEN_URI = "https://oauth2.googleapis.com/token"

CalendarAuthMode = Literal["service_account", "oauth", "none"]


class CalendarSettings(BaseModel):
    """Configuracoes do calendario que recebe os fins de carencia."""

    model_config = ConfigDict(extra="ignore")

    calendar_enabled: bool = Field(
        default=False,
        description="Feature flag para habilitar integracao real com calendario.",
    )
    google_calendar_id: str = Field(
        default="",
        description="ID do calendario alvo no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    google_oauth_client_id: str | None = Field(
        default=None,
        description="Client ID OAuth usado para renovar o token de acesso.",
    )
    google_oauth_client_secret: str | None = Field(
        default=None,
        description="Client secret OAuth.",
    )
    google_oauth_refresh_token: str | None = Field(
        default=None,
        description="Refresh token OAuth da conta dona do calendario.",
    )
    google_oauth_token_uri: str = Field(
        default=GOOGLE_OAUTH_TOKEN_URI,
        description="Endpoint de troca de token OAuth.",
    )

    @property
    def auth_mode(self) -> CalendarAuthMode:
        """Service account tem precedencia sobre OAuth de usuario."""
        if self.google_service_account_json:
            return "service_account"
        if (
            self.google_oauth_client_id
            and self.google_oauth_client_secret
            and self.google_oauth_refresh_token
        ):
            return "oauth"
        return "none"

    def validate_config(self) -> list[str]:
        """Valida configuracoes minimas quando o calendario esta habilitado."""
        if not self.calendar_enabled:
            return []
        errors: list[str] = []
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID nao configurado")
        if self.auth_mode == "none":
            errors.append(
                "GOOGLE_SERVICE_ACCOUNT_JSON ou credenciais GOOGLE_OAUTH_* nao configuradas"
            )
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        calendar_enabled=_parse_bool(os.getenv("CALENDAR_ENABLED", "false")),
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", ""),
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        google_oauth_client_id=_read_optional_env("GOOGLE_OAUTH_CLIENT_ID"),
        google_oauth_client_secret=_read_optional_env("GOOGLE_OAUTH_CLIENT_SECRET"),
        google_oauth_refresh_token=_read_optional_env("GOOGLE_OAUTH_REFRESH_TOKEN"),
        google_oauth_token_uri=os.getenv("GOOGLE_OAUTH_TOKEN_URI", GOOGLE_OAUTH_TOKEN_URI),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarAuthMode", "CalendarSettings", "get_calendar_settings"]
