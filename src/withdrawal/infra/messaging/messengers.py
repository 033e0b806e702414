"""Messengers concretos para mensagens exibidas ao usuario."""

from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

MessageLevel = Literal["warning", "status", "error"]

_COMPONENT = "messenger"


class LoggingMessenger:
    """Encaminha mensagens de usuario para o logger estruturado.

    Usado quando nao ha interface interativa; o texto vai em `user_message`.
    E o unico ponto que grava labels de animais: os servicos logam apenas ids.
    """

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def warn(self, text: str) -> None:
        self._emit(logging.WARNING, "warning", text)

    def status(self, text: str) -> None:
        self._emit(logging.INFO, "status", text)

    def error(self, text: str) -> None:
        self._emit(logging.ERROR, "error", text)

    def _emit(self, level: int, kind: MessageLevel, text: str) -> None:
        self._logger.log(
            level,
            "user_message",
            extra={"component": _COMPONENT, "message_level": kind, "user_message": text},
        )


class MemoryMessenger:
    """Acumula mensagens em memoria: apenas para dev/test."""

    def __init__(self) -> None:
        self.messages: list[tuple[MessageLevel, str]] = []

    def warn(self, text: str) -> None:
        self.messages.append(("warning", text))

    def status(self, text: str) -> None:
        self.messages.append(("status", text))

    def error(self, text: str) -> None:
        self.messages.append(("error", text))

    def texts(self, level: MessageLevel | None = None) -> list[str]:
        return [text for kind, text in self.messages if level is None or kind == level]
