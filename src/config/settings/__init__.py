"""Agregador de settings do farm_withdrawal.

Re-exporta as settings e funcoes de cada modulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarAuthMode,
    CalendarSettings,
    get_calendar_settings,
)

# Withdrawal settings
from config.settings.withdrawal import (
    NotifyStatusPolicy,
    WithdrawalSettings,
    get_withdrawal_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "CalendarAuthMode",
    "CalendarSettings",
    "Environment",
    "NotifyStatusPolicy",
    "WithdrawalSettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_withdrawal_settings",
]
