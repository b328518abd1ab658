"""Pydantic models for fulfillment and rollup API responses."""

from __future__ import annotations

from pydantic import BaseModel

from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord
from fulfillment_runtime.domain.fulfillment.rollups import CustomerSummary, DataSummary, InventoryItem


class FulfillmentModel(BaseModel):
    """One shipped line item."""

    id: str
    order_key: str | None
    transaction_id: str
    sku: str
    item_name: str
    size: str
    color: str
    quantity: int
    customer_id: str
    customer_name: str
    ship_date: str
    created_date: str
    order_date: str
    ship_method: str
    urgency: str
    order_class: str
    memo: str
    status: str

    @classmethod
    def from_domain(cls, record: FulfillmentRecord) -> "FulfillmentModel":
        return cls(
            id=record.fulfillment_id,
            order_key=record.order_key,
            transaction_id=record.transaction_id,
            sku=record.sku,
            item_name=record.item_name,
            size=record.size,
            color=record.color,
            quantity=record.quantity,
            customer_id=record.customer_id,
            customer_name=record.customer_name,
            ship_date=record.ship_date,
            created_date=record.created_date,
            order_date=record.order_date,
            ship_method=record.ship_method,
            urgency=record.urgency,
            order_class=record.order_class,
            memo=record.memo,
            status=record.status,
        )


class FulfillmentListResponse(BaseModel):
    """Paginated fulfillment listing."""

    fulfillments: list[FulfillmentModel]
    total: int
    limit: int
    offset: int


class InventoryItemModel(BaseModel):
    sku: str
    name: str
    color: str
    size: str
    total_fulfilled: int
    last_fulfilled: str

    @classmethod
    def from_domain(cls, item: InventoryItem) -> "InventoryItemModel":
        return cls(
            sku=item.sku,
            name=item.name,
            color=item.color,
            size=item.size,
            total_fulfilled=item.total_fulfilled,
            last_fulfilled=item.last_fulfilled,
        )


class CustomerModel(BaseModel):
    id: str
    name: str
    total_orders: int
    total_quantity: int
    last_order_date: str

    @classmethod
    def from_domain(cls, customer: CustomerSummary) -> "CustomerModel":
        return cls(
            id=customer.id,
            name=customer.name,
            total_orders=customer.total_orders,
            total_quantity=customer.total_quantity,
            last_order_date=customer.last_order_date,
        )


class SummaryModel(BaseModel):
    total_fulfillments: int
    total_items: int
    total_orders: int
    total_customers: int

    @classmethod
    def from_domain(cls, summary: DataSummary) -> "SummaryModel":
        return cls(
            total_fulfillments=summary.total_fulfillments,
            total_items=summary.total_items,
            total_orders=summary.total_orders,
            total_customers=summary.total_customers,
        )
