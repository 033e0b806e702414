"""Stores: implementacoes concretas de persistencia.

Modulos disponiveis:
    - memory_stores: logs e registros referenciados em memoria (dev/test)
"""

from __future__ import annotations

from withdrawal.infra.stores.memory_stores import MemoryLogStore, MemoryRecordLoader

__all__ = [
    "MemoryLogStore",
    "MemoryRecordLoader",
]
