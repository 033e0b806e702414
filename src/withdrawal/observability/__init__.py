"""Observabilidade: correlation_id para logs estruturados.

Uso:
    from withdrawal.observability import get_correlation_id, set_correlation_id
"""

from withdrawal.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
