"""Settings das regras de carencia de abate.

As duas politicas abaixo ficam explicitas porque as versoes anteriores do
modulo divergiam no guard de status e na escrita de valor vazio.
"""

from __future__ import annotations

import os
from enum import StrEnum
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field


class NotifyStatusPolicy(StrEnum):
    """Quando o log medico passa a notificar a carencia."""

    DONE = "done"
    NOT_PENDING = "not_pending"


class WithdrawalSettings(BaseModel):
    """Configuracoes do derivador e do notificador de carencia."""

    model_config = ConfigDict(extra="ignore")

    notify_status_policy: NotifyStatusPolicy = Field(
        default=NotifyStatusPolicy.DONE,
        description="Guard de status aplicado antes de notificar.",
    )
    assign_empty_withdrawal: bool = Field(
        default=True,
        description="Atribui None ao log quando nenhum material informa carencia.",
    )
    timezone: str = Field(
        default="UTC",
        description="Timezone usada para renderizar as datas de inicio e fim.",
    )

    def validate_config(self) -> list[str]:
        """Valida timezone configurada."""
        errors: list[str] = []
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"WITHDRAWAL_TIMEZONE invalida: {self.timezone}")
        return errors


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_policy(value: str) -> NotifyStatusPolicy:
    """Valores desconhecidos caem no guard mais restritivo."""
    try:
        return NotifyStatusPolicy(value.strip().lower())
    except ValueError:
        return NotifyStatusPolicy.DONE


def _load_withdrawal_from_env() -> WithdrawalSettings:
    """Carrega WithdrawalSettings a partir de variaveis de ambiente."""
    return WithdrawalSettings(
        notify_status_policy=_parse_policy(
            os.getenv("WITHDRAWAL_NOTIFY_STATUS_POLICY", NotifyStatusPolicy.DONE.value)
        ),
        assign_empty_withdrawal=_parse_bool(os.getenv("WITHDRAWAL_ASSIGN_EMPTY", "true")),
        timezone=os.getenv("WITHDRAWAL_TIMEZONE", "UTC"),
    )


@lru_cache(maxsize=1)
def get_withdrawal_settings() -> WithdrawalSettings:
    """Retorna instancia cacheada de WithdrawalSettings."""
    return _load_withdrawal_from_env()


__all__ = ["NotifyStatusPolicy", "WithdrawalSettings", "get_withdrawal_settings"]
