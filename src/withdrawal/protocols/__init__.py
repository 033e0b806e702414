"""Protocolos e contratos do core de carencia."""

from collections.abc import Callable

from withdrawal.domain.log import Log

from .calendar_service import CalendarServiceProtocol
from .log_store import LogStoreProtocol
from .messenger import MessengerProtocol
from .record_loader import RecordLoaderProtocol

# Hooks do ciclo de vida recebem o log em memoria
PresaveHook = Callable[[Log], object]
UpdateHook = Callable[[Log], object]

__all__ = [
    "CalendarServiceProtocol",
    "LogStoreProtocol",
    "MessengerProtocol",
    "PresaveHook",
    "RecordLoaderProtocol",
    "UpdateHook",
]
