"""Testes do dono do ciclo de vida dos logs."""

from __future__ import annotations

from tests.fakes.fake_calendar_service import FakeCalendarService

from withdrawal.bootstrap import create_log_lifecycle
from withdrawal.domain.log import MAX_WITHDRAWAL_DAYS, Log, LogStatus, MaterialType, Quantity
from withdrawal.infra.messaging import MemoryMessenger
from withdrawal.infra.stores import MemoryLogStore, MemoryRecordLoader
from withdrawal.observability import get_correlation_id
from withdrawal.services.log_lifecycle import LogLifecycle


def _treatment(status: LogStatus = LogStatus.PENDING) -> Log:
    return Log(
        log_id="log-treat",
        bundle="medical",
        name="Mastitis treatment",
        timestamp=1704067200,
        status=status,
        quantity_ids=["q-pen", "q-oxy"],
        asset_ids=["a-42"],
    )


def test_presave_runs_on_create_and_update_only_on_existing(store: MemoryLogStore) -> None:
    calls: list[tuple[str, str]] = []
    lifecycle = LogLifecycle(
        store,
        presave_hooks=[lambda log: calls.append(("presave", log.log_id))],
        update_hooks=[lambda log: calls.append(("update", log.log_id))],
    )
    log = _treatment()

    lifecycle.save(log)
    lifecycle.save(log)

    assert calls == [("presave", "log-treat"), ("presave", "log-treat"), ("update", "log-treat")]


def test_registered_hooks_run_in_order(store: MemoryLogStore) -> None:
    calls: list[str] = []
    lifecycle = LogLifecycle(store)
    lifecycle.register_presave(lambda log: calls.append("first"))
    lifecycle.register_presave(lambda log: calls.append("second"))

    lifecycle.save(_treatment())

    assert calls == ["first", "second"]


def test_presave_changes_are_persisted(store: MemoryLogStore) -> None:
    def _stamp(log: Log) -> None:
        log.withdrawal_days = 3

    LogLifecycle(store, presave_hooks=[_stamp]).save(_treatment())

    stored = store.load("log-treat")
    assert stored is not None
    assert stored.withdrawal_days == 3


def test_correlation_id_is_scoped_to_save(store: MemoryLogStore) -> None:
    seen: list[str] = []
    lifecycle = LogLifecycle(store, presave_hooks=[lambda log: seen.append(get_correlation_id())])

    lifecycle.save(_treatment(), correlation_id="corr-1")

    assert seen == ["corr-1"]
    assert get_correlation_id() == ""


def test_full_flow_derives_then_notifies_when_done(
    store: MemoryLogStore,
    loader: MemoryRecordLoader,
    messenger: MemoryMessenger,
) -> None:
    calendar = FakeCalendarService()
    lifecycle = create_log_lifecycle(
        store=store,
        loader=loader,
        messenger=messenger,
        calendar_service=calendar,
        calendar_id="farm-calendar",
    )
    log = _treatment()

    lifecycle.save(log)
    assert log.withdrawal_days == 30
    assert messenger.messages == []

    log.status = LogStatus.DONE
    lifecycle.save(log)

    assert messenger.texts("warning") == ["Cow42 Meat Withdrawal 30 days. Ends 2024-01-31"]
    assert messenger.texts("status") == ["Cow42 meat withdrawal added to calendar"]
    assert len(calendar.calls) == 1
    stored = store.load("log-treat")
    assert stored is not None
    assert stored.withdrawal_days == 30
    assert stored.status == LogStatus.DONE


def test_longest_accepted_withdrawal_saves_and_notifies(
    store: MemoryLogStore,
    loader: MemoryRecordLoader,
    messenger: MemoryMessenger,
) -> None:
    loader.add_material_type(
        MaterialType(
            material_type_id="mt-max",
            name="Depot injection",
            meat_withdrawal_days=MAX_WITHDRAWAL_DAYS,
        )
    )
    loader.add_quantity(Quantity(quantity_id="q-max", material_type_ids=["mt-max"]))
    lifecycle = create_log_lifecycle(
        store=store,
        loader=loader,
        messenger=messenger,
        calendar_id="",
    )
    log = _treatment()
    log.quantity_ids = ["q-pen", "q-max"]

    lifecycle.save(log)
    log.status = LogStatus.DONE
    lifecycle.save(log)

    assert log.withdrawal_days == MAX_WITHDRAWAL_DAYS
    assert messenger.texts("warning") == [
        f"Cow42 Meat Withdrawal {MAX_WITHDRAWAL_DAYS} days. Ends 2123-12-08"
    ]
