"""
Priority-ordered classification stages.

Each stage takes the result object of the stage before it and only looks at
the orders that stage left unclaimed, so the four categories are disjoint by
construction and cannot be computed out of order:

    singles -> bulk -> high volume -> unique
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from fulfillment_runtime.domain.classification import rules
from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.classification.models import (
    BulkGroup,
    BulkStage,
    ClassificationResult,
    HighVolumeGroup,
    HighVolumeStage,
    SinglesStage,
)
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order

logger = logging.getLogger(__name__)


def _require_stage(stage: object, expected: type, name: str) -> None:
    if not isinstance(stage, expected):
        raise TypeError(f"{name} must be given a {expected.__name__}, got {type(stage).__name__}")


def is_single(order: Order) -> bool:
    """Exactly one fulfillment line carrying exactly one unit."""
    return order.line_count == 1 and order.total_quantity == 1


def item_signature(order: Order) -> str:
    """
    Canonical signature of an order's (sku, quantity) pairs.

    Pairs are sorted by SKU, then quantity, and rendered as ``sku:qty`` joined
    by ``|``, so two orders with the same lines in any order share a signature.
    """
    pairs = sorted((item.sku, item.quantity) for item in order.items)
    return rules.SIGNATURE_ITEM_SEPARATOR.join(
        f"{sku}{rules.SIGNATURE_PAIR_SEPARATOR}{quantity}" for sku, quantity in pairs
    )


def classify_singles(
    orders: Mapping[OrderKey, Order], config: Optional[ClassificationConfig] = None
) -> SinglesStage:
    singles = [order_id for order_id, order in orders.items() if is_single(order)]
    claimed = frozenset(singles)
    remaining = tuple(order_id for order_id in orders if order_id not in claimed)
    logger.info("Categorized %d single orders", len(claimed))
    return SinglesStage(
        orders=orders,
        config=config or ClassificationConfig(),
        singles=claimed,
        remaining=remaining,
    )


def classify_bulk(stage: SinglesStage) -> BulkStage:
    _require_stage(stage, SinglesStage, "classify_bulk")
    min_orders = stage.config.bulk_min_orders

    by_signature: dict[str, list[OrderKey]] = {}
    for order_id in stage.remaining:
        signature = item_signature(stage.orders[order_id])
        by_signature.setdefault(signature, []).append(order_id)

    groups = [
        BulkGroup(
            signature=signature,
            items=stage.orders[order_ids[0]].items,
            order_ids=tuple(order_ids),
        )
        for signature, order_ids in by_signature.items()
        if len(order_ids) >= min_orders
    ]
    # sorted() is stable, so equal-sized groups keep discovery order
    groups = sorted(groups, key=lambda g: g.total_orders, reverse=True)

    claimed = frozenset(order_id for group in groups for order_id in group.order_ids)
    remaining = tuple(order_id for order_id in stage.remaining if order_id not in claimed)
    logger.info(
        "Categorized %d bulk orders in %d groups (excluding %d singles)",
        len(claimed),
        len(groups),
        len(stage.singles),
    )
    return BulkStage(previous=stage, bulk=claimed, groups=tuple(groups), remaining=remaining)


def classify_high_volume(stage: BulkStage) -> HighVolumeStage:
    _require_stage(stage, BulkStage, "classify_high_volume")
    orders = stage.previous.orders
    min_orders = stage.previous.config.high_volume_min_orders

    by_sku: dict[str, dict] = {}
    for order_id in stage.remaining:
        for item in orders[order_id].items:
            entry = by_sku.get(item.sku)
            if entry is None:
                entry = {
                    "item_name": item.name,
                    "size": item.size,
                    "color": item.color,
                    "order_ids": [],
                    "seen": set(),
                    "total_quantity": 0,
                }
                by_sku[item.sku] = entry
            # an order with several lines of one SKU still counts once
            if order_id not in entry["seen"]:
                entry["seen"].add(order_id)
                entry["order_ids"].append(order_id)
            entry["total_quantity"] += item.quantity

    groups = [
        HighVolumeGroup(
            sku=sku,
            item_name=entry["item_name"],
            size=entry["size"],
            color=entry["color"],
            order_ids=tuple(entry["order_ids"]),
            total_quantity=entry["total_quantity"],
        )
        for sku, entry in by_sku.items()
        if len(entry["order_ids"]) >= min_orders
    ]
    groups = sorted(groups, key=lambda g: g.order_count, reverse=True)

    claimed = frozenset(order_id for group in groups for order_id in group.order_ids)
    remaining = tuple(order_id for order_id in stage.remaining if order_id not in claimed)
    logger.info(
        "Categorized %d high volume orders across %d SKUs (excluding %d singles + %d bulk)",
        len(claimed),
        len(groups),
        len(stage.previous.singles),
        len(stage.bulk),
    )
    return HighVolumeStage(previous=stage, high_volume=claimed, groups=tuple(groups), remaining=remaining)


def classify_unique(stage: HighVolumeStage) -> ClassificationResult:
    _require_stage(stage, HighVolumeStage, "classify_unique")
    bulk_stage = stage.previous
    singles_stage = bulk_stage.previous
    unique = frozenset(stage.remaining)
    logger.info("Found %d unique orders", len(unique))
    return ClassificationResult(
        order_ids=tuple(singles_stage.orders),
        singles=singles_stage.singles,
        bulk=bulk_stage.bulk,
        high_volume=stage.high_volume,
        unique=unique,
        bulk_groups=bulk_stage.groups,
        high_volume_groups=stage.groups,
    )


def classify(
    orders: Mapping[OrderKey, Order], config: Optional[ClassificationConfig] = None
) -> ClassificationResult:
    """Run the four stages in priority order over a fresh order set."""
    singles = classify_singles(orders, config)
    bulk = classify_bulk(singles)
    high_volume = classify_high_volume(bulk)
    return classify_unique(high_volume)


def filter_bulk_groups(groups: tuple[BulkGroup, ...], min_orders: int) -> list[BulkGroup]:
    """Narrow reported bulk groups for display without changing membership."""
    return [group for group in groups if group.total_orders >= min_orders]
