"""Dono do ciclo de vida de logs: persiste e dispara os hooks.

Os hooks sao registrados explicitamente na instancia; nao existe
dispatcher global.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from withdrawal.observability import reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Iterable

    from withdrawal.domain.log import Log
    from withdrawal.protocols import PresaveHook, UpdateHook
    from withdrawal.protocols.log_store import LogStoreProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "log_lifecycle"


class LogLifecycle:
    """Salva logs rodando presave antes e update depois da persistencia."""

    def __init__(
        self,
        store: LogStoreProtocol,
        presave_hooks: Iterable[PresaveHook] = (),
        update_hooks: Iterable[UpdateHook] = (),
    ) -> None:
        self._store = store
        self._presave_hooks: list[PresaveHook] = list(presave_hooks)
        self._update_hooks: list[UpdateHook] = list(update_hooks)

    def register_presave(self, hook: PresaveHook) -> None:
        self._presave_hooks.append(hook)

    def register_update(self, hook: UpdateHook) -> None:
        self._update_hooks.append(hook)

    def save(self, log: Log, *, correlation_id: str | None = None) -> Log:
        """Persiste o log.

        Hooks de presave recebem o objeto do chamador e podem altera-lo.
        Hooks de update so rodam quando o log ja existia no store.
        """
        token = set_correlation_id(correlation_id)
        try:
            is_update = self._store.exists(log.log_id)
            for hook in self._presave_hooks:
                hook(log)

            self._store.save(log)
            logger.debug(
                "log_saved",
                extra={
                    "component": _COMPONENT,
                    "action": "save",
                    "result": "updated" if is_update else "created",
                    "log_id": log.log_id,
                },
            )

            if is_update:
                for hook in self._update_hooks:
                    hook(log)
            return log
        finally:
            reset_correlation_id(token)


__all__ = ["LogLifecycle"]
