"""Contrato de leitura dos registros referenciados por um log.

Substitui o carregamento preguicoso de referencias: o servico pede
explicitamente cada registro pelo id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from withdrawal.domain.log import Asset, MaterialType, Quantity


@runtime_checkable
class RecordLoaderProtocol(Protocol):
    """Contrato para resolver ids de quantidade, material e ativo."""

    def load_quantity(self, quantity_id: str) -> Quantity | None:
        """Retorna a quantidade ou None se nao existir."""
        ...

    def load_material_type(self, material_type_id: str) -> MaterialType | None:
        """Retorna o tipo de material ou None se nao existir."""
        ...

    def load_asset(self, asset_id: str) -> Asset | None:
        """Retorna o ativo ou None se nao existir."""
        ...
