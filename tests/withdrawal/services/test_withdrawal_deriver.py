"""Testes do derivador de carencia no presave."""

from __future__ import annotations

import pytest

from config.settings.withdrawal import WithdrawalSettings
from withdrawal.domain.log import Log, LogStatus, MaterialType, Quantity
from withdrawal.infra.stores import MemoryRecordLoader
from withdrawal.services.withdrawal_deriver import (
    DERIVATION_ABORTED,
    AbortedDerivation,
    DerivationOutcome,
    WithdrawalDeriver,
    derive_meat_withdrawal,
    should_derive,
)


def _medical_log(**overrides: object) -> Log:
    data: dict[str, object] = {
        "log_id": "log-1",
        "bundle": "medical",
        "timestamp": 1704067200,
        "status": LogStatus.PENDING,
        "quantity_ids": ["q-pen", "q-oxy"],
        "asset_ids": ["a-42"],
    }
    data.update(overrides)
    return Log(**data)


def test_sets_max_withdrawal_from_material_types(loader: MemoryRecordLoader) -> None:
    log = _medical_log()

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.DERIVED
    assert log.withdrawal_days == 30


def test_order_of_quantities_does_not_change_max(loader: MemoryRecordLoader) -> None:
    log = _medical_log(quantity_ids=["q-oxy", "q-pen"])

    WithdrawalDeriver(loader).on_presave(log)

    assert log.withdrawal_days == 30


def test_non_medical_log_is_untouched(loader: MemoryRecordLoader) -> None:
    log = _medical_log(bundle="activity")

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.SKIPPED
    assert log.withdrawal_days is None
    assert "withdrawal_days" not in log.model_fields_set


def test_log_without_quantities_is_skipped(loader: MemoryRecordLoader) -> None:
    log = _medical_log(quantity_ids=[])

    assert WithdrawalDeriver(loader).on_presave(log) is DerivationOutcome.SKIPPED
    assert log.withdrawal_days is None


def test_existing_value_is_never_overwritten(loader: MemoryRecordLoader) -> None:
    log = _medical_log(withdrawal_days=5)

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.SKIPPED
    assert log.withdrawal_days == 5


def test_running_twice_keeps_first_value(loader: MemoryRecordLoader) -> None:
    deriver = WithdrawalDeriver(loader)
    log = _medical_log(quantity_ids=["q-pen"])
    deriver.on_presave(log)

    # Mudanca no catalogo depois da primeira derivacao nao reflete no log.
    loader.add_material_type(
        MaterialType(material_type_id="mt-pen", name="Penicillin", meat_withdrawal_days=60)
    )
    second = deriver.on_presave(log)

    assert second is DerivationOutcome.SKIPPED
    assert log.withdrawal_days == 14


@pytest.mark.parametrize(
    "quantity_ids",
    [
        ["q-weight"],
        ["q-pen", "q-weight"],
        ["q-untyped", "q-oxy"],
        ["q-pen", "q-missing"],
    ],
)
def test_malformed_quantity_aborts_whole_derivation(
    loader: MemoryRecordLoader,
    quantity_ids: list[str],
) -> None:
    log = _medical_log(quantity_ids=quantity_ids)

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.ABORTED
    assert log.withdrawal_days is None
    assert "withdrawal_days" not in log.model_fields_set


def test_material_without_value_keeps_other_values(loader: MemoryRecordLoader) -> None:
    log = _medical_log(quantity_ids=["q-saline", "q-pen", "q-saline"])

    WithdrawalDeriver(loader).on_presave(log)

    assert log.withdrawal_days == 14


def test_missing_material_type_record_is_ignored(loader: MemoryRecordLoader) -> None:
    loader.add_quantity(Quantity(quantity_id="q-ghost", material_type_ids=["mt-ghost"]))
    log = _medical_log(quantity_ids=["q-ghost", "q-oxy"])

    WithdrawalDeriver(loader).on_presave(log)

    assert log.withdrawal_days == 30


def test_only_first_material_type_is_read(loader: MemoryRecordLoader) -> None:
    loader.add_quantity(Quantity(quantity_id="q-mix", material_type_ids=["mt-pen", "mt-oxy"]))
    log = _medical_log(quantity_ids=["q-mix"])

    WithdrawalDeriver(loader).on_presave(log)

    assert log.withdrawal_days == 14


def test_zero_days_is_a_real_value(loader: MemoryRecordLoader) -> None:
    loader.add_material_type(MaterialType(material_type_id="mt-zero", meat_withdrawal_days=0))
    loader.add_quantity(Quantity(quantity_id="q-zero", material_type_ids=["mt-zero"]))
    log = _medical_log(quantity_ids=["q-zero"])

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.DERIVED
    assert log.withdrawal_days == 0


def test_empty_result_is_assigned_by_default(loader: MemoryRecordLoader) -> None:
    log = _medical_log(quantity_ids=["q-saline"])

    outcome = WithdrawalDeriver(loader).on_presave(log)

    assert outcome is DerivationOutcome.EMPTY
    assert log.withdrawal_days is None
    assert "withdrawal_days" in log.model_fields_set


def test_empty_result_can_skip_assignment(loader: MemoryRecordLoader) -> None:
    log = _medical_log(quantity_ids=["q-saline"])
    settings = WithdrawalSettings(assign_empty_withdrawal=False)

    outcome = WithdrawalDeriver(loader, settings).on_presave(log)

    assert outcome is DerivationOutcome.EMPTY
    assert "withdrawal_days" not in log.model_fields_set


def test_derive_meat_withdrawal_returns_sentinel_on_abort(loader: MemoryRecordLoader) -> None:
    assert derive_meat_withdrawal(_medical_log(quantity_ids=["q-weight"]), loader) is (
        DERIVATION_ABORTED
    )
    assert derive_meat_withdrawal(_medical_log(quantity_ids=["q-saline"]), loader) is None
    assert derive_meat_withdrawal(_medical_log(), loader) == 30


def test_should_derive_preconditions() -> None:
    assert should_derive(_medical_log()) is True
    assert should_derive(_medical_log(bundle="observation")) is False
    assert should_derive(_medical_log(quantity_ids=[])) is False
    assert should_derive(_medical_log(withdrawal_days=0)) is False


def test_deriver_is_callable_as_hook(loader: MemoryRecordLoader) -> None:
    log = _medical_log()

    assert WithdrawalDeriver(loader)(log) is DerivationOutcome.DERIVED
    assert log.withdrawal_days == 30


def test_abort_sentinel_type_is_public(loader: MemoryRecordLoader) -> None:
    result = derive_meat_withdrawal(_medical_log(quantity_ids=["q-pen", "q-weight"]), loader)

    assert isinstance(result, AbortedDerivation)
    assert not isinstance(derive_meat_withdrawal(_medical_log(), loader), AbortedDerivation)
    assert repr(DERIVATION_ABORTED) == "DERIVATION_ABORTED"
