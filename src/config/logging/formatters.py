"""Formatters de logging estruturado.

Define o formatter JSON com os campos obrigatorios de todo log.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatorios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrao
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2024-01-01T10:30:00",
            "level": "INFO",
            "logger": "withdrawal.services.withdrawal_deriver",
            "message": "withdrawal_derived",
            "correlation_id": "abc-123",
            "service": "farm_withdrawal"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
