"""Pydantic models for order and pack-fit API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fulfillment_runtime.domain.fulfillment.model import Order, OrderItem
from fulfillment_runtime.domain.packing.models import PackCatalog, PackFitResult


class OrderItemModel(BaseModel):
    sku: str
    quantity: int
    size: str
    color: str
    name: str

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemModel":
        return cls(sku=item.sku, quantity=item.quantity, size=item.size, color=item.color, name=item.name)


class OrderModel(BaseModel):
    """Fulfillment lines aggregated under one order key."""

    id: str
    customer_id: str
    customer_name: str
    items: list[OrderItemModel]
    total_quantity: int
    status: str
    order_date: str
    ship_date: str
    created_date: str = ""

    @classmethod
    def from_domain(cls, order: Order) -> "OrderModel":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            items=[OrderItemModel.from_domain(item) for item in order.items],
            total_quantity=order.total_quantity,
            status=order.status,
            order_date=order.order_date,
            ship_date=order.ship_date,
            created_date=order.created_date,
        )


class PackFitModel(BaseModel):
    """Packs an order exactly fills."""

    order_id: str
    optimal: str = Field(description="Pack key, or 'custom' when no pack fits")
    optimal_name: str
    all: list[str] = Field(default_factory=list, description="Every compatible pack key")

    @classmethod
    def from_domain(cls, order_id: str, fit: PackFitResult, catalog: PackCatalog) -> "PackFitModel":
        return cls(
            order_id=order_id,
            optimal=fit.optimal,
            optimal_name=catalog.name_of(fit.optimal),
            all=list(fit.compatible),
        )
