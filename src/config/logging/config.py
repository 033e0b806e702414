"""Configuracao centralizada de logging.

Configura logging estruturado JSON com campos obrigatorios
(correlation_id, service, level, logger, message) e nivel
configuravel por ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Niveis de log validos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "farm_withdrawal"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o servico.

    Deve ser chamada uma vez na inicializacao (withdrawal/bootstrap/).

    Args:
        level: Nivel de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do servico para identificacao nos logs.
        correlation_id_getter: Funcao opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nivel de log for invalido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nivel de log invalido: {level}. "
            f"Validos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicacao
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o modulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)
