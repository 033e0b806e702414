"""Derivacao da carencia de abate no presave de logs medicos.

A carencia do log e o maior valor informado pelos tipos de material
referenciados pelas quantidades. Qualquer quantidade fora do padrao
(sem material ou sem tipo) cancela a derivacao inteira.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from config.settings.withdrawal import WithdrawalSettings
from withdrawal.domain.log import MATERIAL_BUNDLE
from withdrawal.observability import get_correlation_id

if TYPE_CHECKING:
    from withdrawal.domain.log import Log
    from withdrawal.protocols.record_loader import RecordLoaderProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "withdrawal_deriver"


class DerivationOutcome(StrEnum):
    """Resultado de uma execucao do derivador."""

    SKIPPED = "skipped"
    ABORTED = "aborted"
    EMPTY = "empty"
    DERIVED = "derived"


class AbortedDerivation:
    """Marca derivacao cancelada por quantidade fora do padrao."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "DERIVATION_ABORTED"


DERIVATION_ABORTED: Final = AbortedDerivation()


def _max_days(current: int | None, candidate: int | None) -> int | None:
    if candidate is None:
        return current
    if current is None:
        return candidate
    return max(current, candidate)


def derive_meat_withdrawal(
    log: Log,
    loader: RecordLoaderProtocol,
) -> int | None | AbortedDerivation:
    """Calcula a maior carencia entre os materiais do log.

    Returns:
        Maior carencia encontrada, None se nenhum material informa valor,
        ou DERIVATION_ABORTED se alguma quantidade nao e material tipado.
    """
    max_withdrawal: int | None = None
    for quantity_id in log.quantity_ids:
        quantity = loader.load_quantity(quantity_id)
        if quantity is None or quantity.bundle != MATERIAL_BUNDLE or not quantity.material_type_ids:
            return DERIVATION_ABORTED

        material_type = loader.load_material_type(quantity.material_type_ids[0])
        if material_type is not None:
            max_withdrawal = _max_days(max_withdrawal, material_type.meat_withdrawal_days)
    return max_withdrawal


def should_derive(log: Log) -> bool:
    return log.is_medical and bool(log.quantity_ids) and not log.has_withdrawal


class WithdrawalDeriver:
    """Hook de presave que preenche withdrawal_days em logs medicos."""

    def __init__(
        self,
        loader: RecordLoaderProtocol,
        settings: WithdrawalSettings | None = None,
    ) -> None:
        self._loader = loader
        self._settings = settings or WithdrawalSettings()

    def __call__(self, log: Log) -> DerivationOutcome:
        return self.on_presave(log)

    def on_presave(self, log: Log) -> DerivationOutcome:
        if not should_derive(log):
            return DerivationOutcome.SKIPPED

        result = derive_meat_withdrawal(log, self._loader)
        if isinstance(result, AbortedDerivation):
            self._log(log, DerivationOutcome.ABORTED)
            return DerivationOutcome.ABORTED

        if result is None:
            if self._settings.assign_empty_withdrawal:
                log.withdrawal_days = None
            self._log(log, DerivationOutcome.EMPTY)
            return DerivationOutcome.EMPTY

        log.withdrawal_days = result
        self._log(log, DerivationOutcome.DERIVED, withdrawal_days=result)
        return DerivationOutcome.DERIVED

    def _log(self, log: Log, outcome: DerivationOutcome, **fields: object) -> None:
        level = logging.INFO if outcome is DerivationOutcome.DERIVED else logging.DEBUG
        logger.log(
            level,
            f"withdrawal_{outcome.value}",
            extra={
                "component": _COMPONENT,
                "action": "on_presave",
                "result": outcome.value,
                "log_id": log.log_id,
                "correlation_id": get_correlation_id(),
                **fields,
            },
        )


__all__ = [
    "DERIVATION_ABORTED",
    "AbortedDerivation",
    "DerivationOutcome",
    "WithdrawalDeriver",
    "derive_meat_withdrawal",
    "should_derive",
]
