"""Protocolo de persistencia de logs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from withdrawal.domain.log import Log


class LogStoreProtocol(ABC):
    """Contrato minimo sincrono para armazenamento de Log."""

    @abstractmethod
    def save(self, log: Log) -> None: ...

    @abstractmethod
    def load(self, log_id: str) -> Log | None: ...

    @abstractmethod
    def exists(self, log_id: str) -> bool: ...
