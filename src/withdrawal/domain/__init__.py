"""Modelos de dominio da carencia de abate."""

from withdrawal.domain.calendar import AllDayEvent, CalendarEvent
from withdrawal.domain.log import (
    MATERIAL_BUNDLE,
    MEDICAL_BUNDLE,
    Asset,
    Log,
    LogStatus,
    MaterialType,
    Quantity,
)
from withdrawal.domain.withdrawal import (
    WithdrawalPeriod,
    compute_withdrawal_period,
    format_withdrawal_warning,
)

__all__ = [
    "MATERIAL_BUNDLE",
    "MEDICAL_BUNDLE",
    "AllDayEvent",
    "Asset",
    "CalendarEvent",
    "Log",
    "LogStatus",
    "MaterialType",
    "Quantity",
    "WithdrawalPeriod",
    "compute_withdrawal_period",
    "format_withdrawal_warning",
]
