"""Bootstrap da aplicacao: inicializacao e wiring.

Este modulo e o composition root: configura logging e conecta
implementacoes concretas aos protocolos.

Uso:
    from withdrawal.bootstrap import create_log_lifecycle, initialize_app

    initialize_app()
    lifecycle = create_log_lifecycle(store=store, loader=loader)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_withdrawal_settings,
)
from withdrawal.infra.messaging import LoggingMessenger
from withdrawal.observability import get_correlation_id
from withdrawal.services.log_lifecycle import LogLifecycle
from withdrawal.services.withdrawal_deriver import WithdrawalDeriver
from withdrawal.services.withdrawal_notifier import WithdrawalNotifier

if TYPE_CHECKING:
    from config.settings import CalendarSettings, WithdrawalSettings
    from withdrawal.protocols import (
        CalendarServiceProtocol,
        LogStoreProtocol,
        MessengerProtocol,
        RecordLoaderProtocol,
    )

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicacao com logging JSON estruturado.

    Deve ser chamada uma vez no inicio do servico.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicacao para testes em nivel DEBUG."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatorias no startup.

    Em `staging`/`production` falha rapido para impedir boot invalido.
    Em `development` mantem alerta sem bloquear execucao local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate_config())
    errors.extend(f"withdrawal: {error}" for error in get_withdrawal_settings().validate_config())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuracao invalida para {base.environment}:\n{details}")


def create_calendar_service(
    settings: CalendarSettings | None = None,
) -> CalendarServiceProtocol | None:
    """Cria GoogleCalendarClient se feature flag habilitada."""
    settings = settings or get_calendar_settings()
    if not settings.calendar_enabled:
        logger.info(
            "calendar_service_disabled",
            extra={
                "component": "bootstrap",
                "action": "create_calendar_service",
                "result": "disabled",
                "correlation_id": get_correlation_id(),
            },
        )
        return None
    if settings.validate_config():
        logger.warning(
            "calendar_service_missing_config",
            extra={
                "component": "bootstrap",
                "action": "create_calendar_service",
                "result": "missing_config",
                "auth_mode": settings.auth_mode,
                "correlation_id": get_correlation_id(),
            },
        )
        return None

    from withdrawal.infra.calendar.google_calendar_client import GoogleCalendarClient

    client = GoogleCalendarClient.from_settings(settings)
    logger.info(
        "calendar_service_created",
        extra={
            "component": "bootstrap",
            "action": "create_calendar_service",
            "result": "ok",
            "auth_mode": settings.auth_mode,
        },
    )
    return client


def create_log_lifecycle(
    *,
    store: LogStoreProtocol,
    loader: RecordLoaderProtocol,
    messenger: MessengerProtocol | None = None,
    withdrawal_settings: WithdrawalSettings | None = None,
    calendar_service: CalendarServiceProtocol | None = None,
    calendar_id: str | None = None,
) -> LogLifecycle:
    """Conecta derivador (presave) e notificador (update) ao ciclo de vida.

    Sem calendar_service explicito, usa create_calendar_service() e o
    GOOGLE_CALENDAR_ID configurado.
    """
    settings = withdrawal_settings or get_withdrawal_settings()
    if calendar_service is None:
        calendar_service = create_calendar_service()
    if calendar_id is None:
        calendar_id = get_calendar_settings().google_calendar_id

    deriver = WithdrawalDeriver(loader, settings)
    notifier = WithdrawalNotifier(
        loader,
        messenger or LoggingMessenger(),
        settings,
        calendar_service=calendar_service,
        calendar_id=calendar_id,
    )
    return LogLifecycle(store, presave_hooks=[deriver], update_hooks=[notifier])


__all__ = [
    "create_calendar_service",
    "create_log_lifecycle",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
