from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from fulfillment_runtime.domain.common.dates import latest_date
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord, Order


@dataclass(frozen=True)
class InventoryItem:
    sku: str
    name: str
    color: str
    size: str
    total_fulfilled: int
    last_fulfilled: str


@dataclass(frozen=True)
class CustomerSummary:
    id: str
    name: str
    total_orders: int
    total_quantity: int
    last_order_date: str


@dataclass(frozen=True)
class DataSummary:
    total_fulfillments: int
    total_items: int
    total_orders: int
    total_customers: int


def inventory_rollup(fulfillments: Iterable[FulfillmentRecord]) -> list[InventoryItem]:
    """Per-SKU shipped units, in first-seen SKU order."""
    by_sku: dict[str, dict] = {}
    for record in fulfillments:
        if not record.sku:
            continue
        entry = by_sku.get(record.sku)
        if entry is None:
            entry = {
                "sku": record.sku,
                "name": record.item_name or record.sku,
                "color": record.color,
                "size": record.size,
                "total_fulfilled": 0,
                "last_fulfilled": record.created_date,
            }
            by_sku[record.sku] = entry
        entry["total_fulfilled"] += record.quantity
        entry["last_fulfilled"] = latest_date(entry["last_fulfilled"], record.created_date)
    return [InventoryItem(**entry) for entry in by_sku.values()]


def customer_rollup(
    fulfillments: Iterable[FulfillmentRecord], orders: Mapping[str, Order]
) -> list[CustomerSummary]:
    """Per-customer order totals. Records without a customer id are not counted."""
    customers: dict[str, dict] = {}
    for record in fulfillments:
        if not record.customer_id:
            continue
        entry = customers.setdefault(
            record.customer_id,
            {"name": record.customer_name, "last_order_date": record.created_date},
        )
        entry["name"] = record.customer_name or entry["name"]
        entry["last_order_date"] = latest_date(entry["last_order_date"], record.created_date)

    totals: dict[str, tuple[int, int, str]] = {}
    for order in orders.values():
        if order.customer_id not in customers:
            continue
        count, quantity, last = totals.get(order.customer_id, (0, 0, ""))
        totals[order.customer_id] = (
            count + 1,
            quantity + order.total_quantity,
            latest_date(last, order.order_date),
        )

    summaries = []
    for customer_id, entry in customers.items():
        count, quantity, last = totals.get(customer_id, (0, 0, ""))
        summaries.append(
            CustomerSummary(
                id=customer_id,
                name=entry["name"],
                total_orders=count,
                total_quantity=quantity,
                last_order_date=latest_date(entry["last_order_date"], last),
            )
        )
    return summaries


def data_summary(fulfillments: list[FulfillmentRecord], orders: Mapping[str, Order]) -> DataSummary:
    return DataSummary(
        total_fulfillments=len(fulfillments),
        total_items=len({r.sku for r in fulfillments if r.sku}),
        total_orders=len(orders),
        total_customers=len({r.customer_id for r in fulfillments if r.customer_id}),
    )
