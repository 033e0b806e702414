"""Contrato do canal de mensagens exibidas ao usuario."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessengerProtocol(Protocol):
    """Recebe mensagens de aviso, status e erro destinadas ao usuario."""

    def warn(self, text: str) -> None: ...

    def status(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...
