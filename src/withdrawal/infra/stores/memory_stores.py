"""Stores em memoria: apenas para desenvolvimento e testes.

ATENCAO: Nao usar em staging/production. Sem persistencia entre reinicios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from withdrawal.protocols.log_store import LogStoreProtocol

if TYPE_CHECKING:
    from withdrawal.domain.log import Asset, Log, MaterialType, Quantity


class MemoryLogStore(LogStoreProtocol):
    """Store de logs em memoria: apenas para dev/test.

    Guarda copias profundas para que mutacoes posteriores no objeto do
    chamador nao alterem o registro salvo.
    """

    def __init__(self) -> None:
        self._store: dict[str, Log] = {}

    def save(self, log: Log) -> None:
        self._store[log.log_id] = log.model_copy(deep=True)

    def load(self, log_id: str) -> Log | None:
        log = self._store.get(log_id)
        return log.model_copy(deep=True) if log is not None else None

    def exists(self, log_id: str) -> bool:
        return log_id in self._store


class MemoryRecordLoader:
    """Loader de quantidades, materiais e ativos em memoria."""

    def __init__(self) -> None:
        self._quantities: dict[str, Quantity] = {}
        self._material_types: dict[str, MaterialType] = {}
        self._assets: dict[str, Asset] = {}

    def add_quantity(self, quantity: Quantity) -> Quantity:
        self._quantities[quantity.quantity_id] = quantity
        return quantity

    def add_material_type(self, material_type: MaterialType) -> MaterialType:
        self._material_types[material_type.material_type_id] = material_type
        return material_type

    def add_asset(self, asset: Asset) -> Asset:
        self._assets[asset.asset_id] = asset
        return asset

    def load_quantity(self, quantity_id: str) -> Quantity | None:
        return self._quantities.get(quantity_id)

    def load_material_type(self, material_type_id: str) -> MaterialType | None:
        return self._material_types.get(material_type_id)

    def load_asset(self, asset_id: str) -> Asset | None:
        return self._assets.get(asset_id)
