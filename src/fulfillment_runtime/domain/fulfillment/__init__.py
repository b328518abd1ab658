from __future__ import annotations

from fulfillment_runtime.domain.fulfillment.aggregation import aggregate, is_well_formed
from fulfillment_runtime.domain.fulfillment.filters import filter_fulfillments, paginate
from fulfillment_runtime.domain.fulfillment.model import (
    FulfillmentRecord,
    Order,
    OrderItem,
    resolve_order_key,
)
from fulfillment_runtime.domain.fulfillment.rollups import (
    CustomerSummary,
    DataSummary,
    InventoryItem,
    customer_rollup,
    data_summary,
    inventory_rollup,
)

__all__ = [
    "FulfillmentRecord",
    "Order",
    "OrderItem",
    "resolve_order_key",
    "aggregate",
    "is_well_formed",
    "filter_fulfillments",
    "paginate",
    "InventoryItem",
    "CustomerSummary",
    "DataSummary",
    "inventory_rollup",
    "customer_rollup",
    "data_summary",
]
