"""Configuracao do pytest para o projeto farm_withdrawal."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from withdrawal.domain.log import Asset, MaterialType, Quantity  # noqa: E402
from withdrawal.infra.messaging import MemoryMessenger  # noqa: E402
from withdrawal.infra.stores import MemoryLogStore, MemoryRecordLoader  # noqa: E402


@pytest.fixture
def loader() -> MemoryRecordLoader:
    """Catalogo com dois materiais, quantidades e dois animais."""
    records = MemoryRecordLoader()
    records.add_material_type(
        MaterialType(material_type_id="mt-pen", name="Penicillin", meat_withdrawal_days=14)
    )
    records.add_material_type(
        MaterialType(material_type_id="mt-oxy", name="Oxytetracycline", meat_withdrawal_days=30)
    )
    records.add_material_type(MaterialType(material_type_id="mt-none", name="Saline"))
    records.add_quantity(Quantity(quantity_id="q-pen", material_type_ids=["mt-pen"]))
    records.add_quantity(Quantity(quantity_id="q-oxy", material_type_ids=["mt-oxy"]))
    records.add_quantity(Quantity(quantity_id="q-saline", material_type_ids=["mt-none"]))
    records.add_quantity(Quantity(quantity_id="q-untyped", material_type_ids=[]))
    records.add_quantity(Quantity(quantity_id="q-weight", bundle="standard", value=410.0))
    records.add_asset(Asset(asset_id="a-42", label="Cow42"))
    records.add_asset(Asset(asset_id="a-7", label="Cow7"))
    return records


@pytest.fixture
def messenger() -> MemoryMessenger:
    return MemoryMessenger()


@pytest.fixture
def store() -> MemoryLogStore:
    return MemoryLogStore()
