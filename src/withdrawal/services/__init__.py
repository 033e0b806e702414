"""Servicos de carencia.

Unidades de regra de negocio sem IO direto; implementacoes concretas
de IO ficam em withdrawal/infra/.
"""

from withdrawal.services.log_lifecycle import LogLifecycle
from withdrawal.services.withdrawal_deriver import (
    DerivationOutcome,
    WithdrawalDeriver,
    derive_meat_withdrawal,
)
from withdrawal.services.withdrawal_notifier import (
    WithdrawalNotice,
    WithdrawalNotifier,
    should_notify,
)

__all__ = [
    "DerivationOutcome",
    "LogLifecycle",
    "WithdrawalDeriver",
    "WithdrawalNotice",
    "WithdrawalNotifier",
    "derive_meat_withdrawal",
    "should_notify",
]
