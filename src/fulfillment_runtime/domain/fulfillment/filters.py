from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord

T = TypeVar("T")


def filter_fulfillments(
    records: Sequence[FulfillmentRecord],
    customer: Optional[str] = None,
    item: Optional[str] = None,
    urgency: Optional[str] = None,
) -> list[FulfillmentRecord]:
    """
    Case-insensitive substring filters over fulfillment records.

    Args:
        customer: matched against the customer name
        item: matched against the SKU or the item name
        urgency: matched against the urgency label
    """
    result = list(records)
    if customer:
        needle = customer.lower()
        result = [r for r in result if needle in r.customer_name.lower()]
    if item:
        needle = item.lower()
        result = [r for r in result if needle in r.sku.lower() or needle in r.item_name.lower()]
    if urgency:
        needle = urgency.lower()
        result = [r for r in result if needle in r.urgency.lower()]
    return result


def paginate(items: Sequence[T], limit: int, offset: int = 0) -> list[T]:
    if limit <= 0 or offset < 0:
        return []
    return list(items[offset : offset + limit])
