from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fulfillment_runtime.domain.common.ids import OrderKey


def resolve_order_key(sales_order_id: str | None, transaction_id: str | None) -> OrderKey | None:
    """
    Resolve the order-grouping key of a fulfillment line.

    Priority: sales order id if non-empty, else transaction id if non-empty, else None.
    """
    if sales_order_id:
        return OrderKey(sales_order_id)
    if transaction_id:
        return OrderKey(transaction_id)
    return None


@dataclass(frozen=True)
class FulfillmentRecord:
    """One shipped line item."""

    order_key: Optional[OrderKey]
    sku: str
    quantity: int
    item_name: str = ""
    size: str = ""
    color: str = ""
    customer_id: str = ""
    customer_name: str = ""
    ship_date: str = ""
    created_date: str = ""
    order_date: str = ""
    status: str = "Fulfilled"
    fulfillment_id: str = ""
    transaction_id: str = ""
    ship_method: str = ""
    urgency: str = ""
    order_class: str = ""
    memo: str = ""

    @staticmethod
    def new(
        sku: str,
        quantity: int = 1,
        sales_order_id: Optional[str] = None,
        transaction_id: Optional[str] = None,
        **fields: str,
    ) -> "FulfillmentRecord":
        return FulfillmentRecord(
            order_key=resolve_order_key(sales_order_id, transaction_id),
            sku=sku,
            quantity=quantity,
            transaction_id=transaction_id or "",
            **fields,
        )


@dataclass(frozen=True)
class OrderItem:
    sku: str
    quantity: int
    size: str = ""
    color: str = ""
    name: str = ""


@dataclass(frozen=True)
class Order:
    """All fulfillment lines sharing one order key, in arrival order."""

    id: OrderKey
    items: tuple[OrderItem, ...]
    customer_id: str = ""
    customer_name: str = ""
    status: str = "Fulfilled"
    order_date: str = ""
    ship_date: str = ""
    created_date: str = ""

    @property
    def sort_date(self) -> str:
        """Order date, or the first record's created date when NetSuite left it blank."""
        return self.order_date or self.created_date

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def line_count(self) -> int:
        return len(self.items)

    @property
    def skus(self) -> list[str]:
        return [item.sku for item in self.items]
