"""Modelos de dominio dos registros de manejo.

Referencias entre registros sao ids; quem resolve ids e o loader
injetado nos servicos, nunca o proprio modelo.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

MEDICAL_BUNDLE = "medical"
MATERIAL_BUNDLE = "material"

# Teto de carencia aceito (100 anos); acima disso a data final nao e representavel.
MAX_WITHDRAWAL_DAYS = 36500


class LogStatus(StrEnum):
    """Status conhecidos de um log; o host pode usar outros."""

    PENDING = "pending"
    DONE = "done"
    ABANDONED = "abandoned"


class MaterialType(BaseModel):
    """Entrada do catalogo de materiais com a carencia legal de abate."""

    model_config = ConfigDict(extra="ignore")

    material_type_id: str = Field(..., description="Identificador do tipo de material.")
    name: str = Field(default="", description="Nome do material.")
    meat_withdrawal_days: int | None = Field(
        default=None,
        ge=0,
        le=MAX_WITHDRAWAL_DAYS,
        description="Carencia de abate em dias.",
    )


class Quantity(BaseModel):
    """Quantidade anexada a um log, opcionalmente tipada por material."""

    model_config = ConfigDict(extra="ignore")

    quantity_id: str = Field(..., description="Identificador da quantidade.")
    bundle: str = Field(default=MATERIAL_BUNDLE, description="Tipo da quantidade.")
    material_type_ids: list[str] = Field(
        default_factory=list,
        description="Referencias a MaterialType; apenas a primeira e considerada.",
    )
    value: float | None = Field(default=None, description="Valor medido.")
    units: str = Field(default="", description="Unidade do valor.")


class Asset(BaseModel):
    """Animal (ou outro ativo) ao qual o log se aplica."""

    model_config = ConfigDict(extra="ignore")

    asset_id: str = Field(..., description="Identificador do ativo.")
    label: str = Field(..., description="Nome de exibicao usado nas mensagens.")


class Log(BaseModel):
    """Log de manejo; apenas o bundle "medical" interessa a carencia."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    log_id: str = Field(..., description="Identificador do log.")
    bundle: str = Field(..., description="Tipo do log (ex: medical, activity).")
    name: str = Field(default="", description="Nome de exibicao do log.")
    timestamp: int = Field(..., description="Momento do evento em epoch seconds.")
    status: str = Field(
        default=LogStatus.PENDING.value,
        description="Status do log; valores fora de LogStatus vem do host e sao aceitos.",
    )
    quantity_ids: list[str] = Field(
        default_factory=list,
        description="Quantidades referenciadas, em ordem.",
    )
    asset_ids: list[str] = Field(
        default_factory=list,
        description="Ativos referenciados, em ordem.",
    )
    withdrawal_days: int | None = Field(
        default=None,
        ge=0,
        le=MAX_WITHDRAWAL_DAYS,
        description="Carencia de abate derivada; None enquanto nao definida.",
    )

    @property
    def is_medical(self) -> bool:
        return self.bundle == MEDICAL_BUNDLE

    @property
    def has_withdrawal(self) -> bool:
        return self.withdrawal_days is not None


__all__ = [
    "MATERIAL_BUNDLE",
    "MAX_WITHDRAWAL_DAYS",
    "MEDICAL_BUNDLE",
    "Asset",
    "Log",
    "LogStatus",
    "MaterialType",
    "Quantity",
]
