"""Pydantic models for classification API responses."""

from __future__ import annotations

from pydantic import BaseModel

from fulfillment_runtime.app.api.models.orders import OrderItemModel, OrderModel
from fulfillment_runtime.domain.classification.models import BulkGroup, HighVolumeGroup


class BulkGroupModel(BaseModel):
    signature: str
    items: list[OrderItemModel]
    order_ids: list[str]
    total_orders: int

    @classmethod
    def from_domain(cls, group: BulkGroup) -> "BulkGroupModel":
        return cls(
            signature=group.signature,
            items=[OrderItemModel.from_domain(item) for item in group.items],
            order_ids=list(group.order_ids),
            total_orders=group.total_orders,
        )


class HighVolumeGroupModel(BaseModel):
    sku: str
    item_name: str
    size: str
    color: str
    order_ids: list[str]
    order_count: int
    total_quantity: int

    @classmethod
    def from_domain(cls, group: HighVolumeGroup) -> "HighVolumeGroupModel":
        return cls(
            sku=group.sku,
            item_name=group.item_name,
            size=group.size,
            color=group.color,
            order_ids=list(group.order_ids),
            order_count=group.order_count,
            total_quantity=group.total_quantity,
        )


class ClassificationResponse(BaseModel):
    """Category counts plus the group breakdowns."""

    counts: dict[str, int]
    singles: list[str]
    bulk_groups: list[BulkGroupModel]
    high_volume_groups: list[HighVolumeGroupModel]
    unique: list[str]


class CategoryOrdersResponse(BaseModel):
    category: str
    count: int
    orders: list[OrderModel]


class BulkGroupsResponse(BaseModel):
    min_orders: int
    count: int
    groups: list[BulkGroupModel]


class HighVolumeGroupsResponse(BaseModel):
    count: int
    groups: list[HighVolumeGroupModel]
