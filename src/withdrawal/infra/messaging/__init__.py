"""Messengers para mensagens de usuario."""

from withdrawal.infra.messaging.messengers import (
    LoggingMessenger,
    MemoryMessenger,
    MessageLevel,
)

__all__ = ["LoggingMessenger", "MemoryMessenger", "MessageLevel"]
