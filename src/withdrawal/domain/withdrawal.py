"""Periodo de carencia e textos exibidos ao usuario."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from pydantic import BaseModel, ConfigDict, Field

SECONDS_PER_DAY = 86400
DATE_FORMAT = "%Y-%m-%d"


class WithdrawalPeriod(BaseModel):
    """Intervalo de datas em que os produtos do animal nao podem ser usados."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    days: int = Field(..., ge=0, description="Carencia em dias.")
    start_date: str = Field(..., description="Inicio da carencia (YYYY-MM-DD).")
    end_date: str = Field(..., description="Fim da carencia (YYYY-MM-DD).")


def compute_withdrawal_period(
    timestamp: int,
    days: int,
    zone: tzinfo = UTC,
) -> WithdrawalPeriod:
    """Calcula inicio e fim a partir do timestamp do log.

    O fim soma dias inteiros de 86400 segundos ao instante do log antes
    de converter para data civil.
    """
    start = datetime.fromtimestamp(timestamp, tz=UTC)
    end = start + timedelta(seconds=days * SECONDS_PER_DAY)
    return WithdrawalPeriod(
        days=days,
        start_date=start.astimezone(zone).strftime(DATE_FORMAT),
        end_date=end.astimezone(zone).strftime(DATE_FORMAT),
    )


def format_withdrawal_warning(label: str, days: int, end_date: str) -> str:
    return f"{label} Meat Withdrawal {days} days. Ends {end_date}"


def format_calendar_summary(label: str) -> str:
    return f"{label} Meat Withdrawal"


def format_calendar_added(label: str) -> str:
    return f"{label} meat withdrawal added to calendar"


def format_calendar_failed(label: str) -> str:
    return f"Could not add {label} meat withdrawal to calendar"


__all__ = [
    "DATE_FORMAT",
    "SECONDS_PER_DAY",
    "WithdrawalPeriod",
    "compute_withdrawal_period",
    "format_calendar_added",
    "format_calendar_failed",
    "format_calendar_summary",
    "format_withdrawal_warning",
]
