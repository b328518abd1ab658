from __future__ import annotations

from typing import Mapping

from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import PackFitResult


def classification_rows(
    ctx: RunContext, result: ClassificationResult, orders: Mapping[OrderKey, Order]
) -> list[dict]:
    """One row per order with its category and, for grouped categories, the group it joined."""
    bulk_index = {
        order_id: group.signature for group in result.bulk_groups for order_id in group.order_ids
    }
    high_volume_index: dict[str, list[str]] = {}
    for group in result.high_volume_groups:
        for order_id in group.order_ids:
            high_volume_index.setdefault(order_id, []).append(group.sku)

    rows = []
    for order_id in result.order_ids:
        order = orders[order_id]
        rows.append(
            {
                "correlation_id": ctx.correlation_id.value,
                "as_of_ts": ctx.as_of_ts.isoformat(),
                "order_id": order_id,
                "category": result.category_of(order_id),
                "customer_name": order.customer_name,
                "line_count": order.line_count,
                "total_quantity": order.total_quantity,
                "bulk_signature": bulk_index.get(order_id),
                "high_volume_skus": high_volume_index.get(order_id, []),
            }
        )
    return rows


def pack_fit_rows(ctx: RunContext, fits: Mapping[OrderKey, PackFitResult]) -> list[dict]:
    return [
        {
            "correlation_id": ctx.correlation_id.value,
            "order_id": order_id,
            **fit.to_dict(),
        }
        for order_id, fit in fits.items()
    ]
