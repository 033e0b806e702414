"""Configuracao de logging estruturado.

Re-exporta funcoes e classes para configuracao de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicializacao (bootstrap)
    configure_logging(level="INFO", service_name="farm_withdrawal")

    # Em qualquer modulo
    logger = get_logger(__name__)
    logger.info("withdrawal_derived", extra={"log_id": "log-1"})

Campos obrigatorios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Logs operacionais levam ids de animais, nunca labels; apenas o
LoggingMessenger (canal de mensagens de usuario) grava o texto exibido.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuracao principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
