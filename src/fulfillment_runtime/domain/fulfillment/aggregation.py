from __future__ import annotations

import logging
from typing import Iterable

from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord, Order, OrderItem

logger = logging.getLogger(__name__)


def is_well_formed(record: FulfillmentRecord) -> bool:
    """A record is classifiable only with an order key, a SKU and at least one unit."""
    return bool(record.order_key) and bool(record.sku) and record.quantity >= 1


def _build_order(order_key: OrderKey, records: list[FulfillmentRecord]) -> Order:
    first = records[0]
    items = tuple(
        OrderItem(
            sku=record.sku,
            quantity=record.quantity,
            size=record.size,
            color=record.color,
            name=record.item_name,
        )
        for record in records
    )
    return Order(
        id=order_key,
        items=items,
        customer_id=first.customer_id,
        customer_name=first.customer_name,
        status=first.status,
        order_date=first.order_date,
        ship_date=first.ship_date,
        created_date=first.created_date,
    )


def aggregate(fulfillments: Iterable[FulfillmentRecord]) -> dict[OrderKey, Order]:
    """
    Group fulfillment records into orders keyed by order key.

    Orders appear in first-seen order and items keep arrival order. Lines are
    never merged, so a SKU shipped on two lines stays two items. Malformed
    records are logged and left out.
    """
    grouped: dict[OrderKey, list[FulfillmentRecord]] = {}
    skipped = 0
    for record in fulfillments:
        if not is_well_formed(record):
            skipped += 1
            logger.warning(
                "Skipping malformed fulfillment %s (order_key=%r, sku=%r, quantity=%r)",
                record.fulfillment_id or "<no id>",
                record.order_key,
                record.sku,
                record.quantity,
            )
            continue
        grouped.setdefault(record.order_key, []).append(record)

    if skipped:
        logger.info("Excluded %d malformed fulfillment records from aggregation", skipped)

    return {order_key: _build_order(order_key, records) for order_key, records in grouped.items()}
