"""Notificacao do fim da carencia quando o log medico e concluido.

Para cada ativo do log emite um aviso ao usuario e, com calendario
configurado, cria um evento de dia inteiro. Falha no calendario de um
ativo nao interrompe os demais.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from config.settings.withdrawal import NotifyStatusPolicy, WithdrawalSettings
from withdrawal.domain.calendar import AllDayEvent, CalendarEvent
from withdrawal.domain.log import LogStatus
from withdrawal.domain.withdrawal import (
    WithdrawalPeriod,
    compute_withdrawal_period,
    format_calendar_added,
    format_calendar_failed,
    format_calendar_summary,
    format_withdrawal_warning,
)
from withdrawal.observability import get_correlation_id

if TYPE_CHECKING:
    from withdrawal.domain.log import Log
    from withdrawal.protocols.calendar_service import CalendarServiceProtocol
    from withdrawal.protocols.messenger import MessengerProtocol
    from withdrawal.protocols.record_loader import RecordLoaderProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "withdrawal_notifier"


class WithdrawalNotice(BaseModel):
    """Resumo dos efeitos colaterais de uma notificacao."""

    model_config = ConfigDict(extra="ignore")

    log_id: str
    period: WithdrawalPeriod
    warned_asset_ids: list[str] = Field(default_factory=list)
    calendar_events: list[CalendarEvent] = Field(default_factory=list)
    failed_asset_ids: list[str] = Field(default_factory=list)


def status_allows_notice(status: str, policy: NotifyStatusPolicy) -> bool:
    if policy is NotifyStatusPolicy.NOT_PENDING:
        return status != LogStatus.PENDING
    return status == LogStatus.DONE


def should_notify(log: Log, policy: NotifyStatusPolicy = NotifyStatusPolicy.DONE) -> bool:
    return (
        log.is_medical
        and log.has_withdrawal
        and bool(log.asset_ids)
        and status_allows_notice(log.status, policy)
    )


class WithdrawalNotifier:
    """Hook de update que avisa o fim da carencia por ativo."""

    def __init__(
        self,
        loader: RecordLoaderProtocol,
        messenger: MessengerProtocol,
        settings: WithdrawalSettings | None = None,
        *,
        calendar_service: CalendarServiceProtocol | None = None,
        calendar_id: str = "",
    ) -> None:
        self._loader = loader
        self._messenger = messenger
        self._settings = settings or WithdrawalSettings()
        self._zone = ZoneInfo(self._settings.timezone)
        self._calendar_service = calendar_service
        self._calendar_id = calendar_id

    def __call__(self, log: Log) -> WithdrawalNotice | None:
        return self.on_update(log)

    def on_update(self, log: Log) -> WithdrawalNotice | None:
        if not should_notify(log, self._settings.notify_status_policy):
            return None

        days = log.withdrawal_days or 0
        period = compute_withdrawal_period(log.timestamp, days, self._zone)
        notice = WithdrawalNotice(log_id=log.log_id, period=period)
        calendar = self._calendar_service if self._calendar_id else None

        for asset_id in log.asset_ids:
            asset = self._loader.load_asset(asset_id)
            if asset is None:
                logger.warning(
                    "withdrawal_asset_missing",
                    extra=self._extra(log, action="on_update", result="skipped", asset_id=asset_id),
                )
                continue

            warning = format_withdrawal_warning(asset.label, days, period.end_date)
            self._messenger.warn(warning)
            notice.warned_asset_ids.append(asset_id)

            if calendar is not None:
                self._submit_calendar_event(
                    calendar,
                    log,
                    asset_id,
                    asset.label,
                    warning,
                    period,
                    notice,
                )

        logger.info(
            "withdrawal_notified",
            extra=self._extra(
                log,
                action="on_update",
                result="ok",
                asset_count=len(notice.warned_asset_ids),
                failed_count=len(notice.failed_asset_ids),
                end_date=period.end_date,
            ),
        )
        return notice

    def _submit_calendar_event(
        self,
        calendar: CalendarServiceProtocol,
        log: Log,
        asset_id: str,
        label: str,
        description: str,
        period: WithdrawalPeriod,
        notice: WithdrawalNotice,
    ) -> None:
        event = AllDayEvent(
            summary=format_calendar_summary(label),
            description=description,
            start_date=period.start_date,
            end_date=period.end_date,
        )
        try:
            created = calendar.create_all_day_event(self._calendar_id, event)
        except Exception as exc:
            logger.error(
                "withdrawal_calendar_failed",
                extra=self._extra(
                    log,
                    action="create_calendar_event",
                    result="error",
                    asset_id=asset_id,
                    error_type=type(exc).__name__,
                ),
            )
            self._messenger.error(format_calendar_failed(label))
            notice.failed_asset_ids.append(asset_id)
            return

        notice.calendar_events.append(created)
        self._messenger.status(format_calendar_added(label))

    def _extra(self, log: Log, **fields: object) -> dict[str, object]:
        return {
            "component": _COMPONENT,
            "log_id": log.log_id,
            "correlation_id": get_correlation_id(),
            **fields,
        }


__all__ = [
    "WithdrawalNotice",
    "WithdrawalNotifier",
    "should_notify",
    "status_allows_notice",
]
