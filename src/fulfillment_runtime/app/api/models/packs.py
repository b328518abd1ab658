"""Pydantic models for pack catalog and box-size worklist responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fulfillment_runtime.app.api.models.orders import OrderModel
from fulfillment_runtime.domain.packing.models import PackDefinition


class PackDefinitionModel(BaseModel):
    key: str
    name: str
    max_items: int
    combinations: list[list[str]] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, pack: PackDefinition) -> "PackDefinitionModel":
        return cls(
            key=pack.key,
            name=pack.name,
            max_items=pack.max_items,
            combinations=[list(layout) for layout in pack.combinations],
        )


class PackCatalogResponse(BaseModel):
    packs: list[PackDefinitionModel]


class WorklistEntryModel(BaseModel):
    order: OrderModel
    category: str | None = None
    optimal: str
    compatible: list[str]


class WorklistResponse(BaseModel):
    size: str
    pack: str
    count: int
    entries: list[WorklistEntryModel]
