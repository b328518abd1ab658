from __future__ import annotations

import logging
from typing import Optional, Sequence

from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import (
    CUSTOM_PACK,
    SINGLE_PACK_KEY,
    PackCatalog,
    PackDefinition,
    PackFitResult,
)
from fulfillment_runtime.domain.packing.sizing import (
    DEFAULT_SIZE_RULES,
    SizeRule,
    matches_size_filter,
    project_size,
)

logger = logging.getLogger(__name__)


def flatten_size_tags(order: Order, size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES) -> Optional[list[str]]:
    """
    Expand an order into one size tag per physical unit.

    Returns None when any item's SKU has no size tag: such an order cannot go
    into any multi-item pack, and its unknown items are never dropped.
    """
    tags: list[str] = []
    for item in order.items:
        tag = project_size(item.sku, size_rules)
        if tag is None:
            logger.debug("Order %s: unknown SKU size for %s, cannot pack in standard packs", order.id, item.sku)
            return None
        tags.extend([tag] * item.quantity)
    return tags


class _OrderUnits:
    """Per-order facts shared by every pack check; size tags are built on first use."""

    def __init__(self, order: Order, size_rules: Sequence[SizeRule]) -> None:
        self.order = order
        self.total = order.total_quantity
        self._size_rules = size_rules
        self._sorted_tags: Optional[list[str]] = None
        self._resolved = False

    @property
    def sorted_tags(self) -> Optional[list[str]]:
        if not self._resolved:
            tags = flatten_size_tags(self.order, self._size_rules)
            self._sorted_tags = sorted(tags) if tags is not None else None
            self._resolved = True
        return self._sorted_tags


def _fits_layouts(units: _OrderUnits, pack: PackDefinition) -> bool:
    # Packs never partially fill or overflow.
    if units.total != pack.max_items:
        logger.debug(
            "Order %s: total quantity %d does not match pack size %d for %s",
            units.order.id,
            units.total,
            pack.max_items,
            pack.key,
        )
        return False

    tags = units.sorted_tags
    if tags is None:
        return False
    if len(tags) != units.total:
        logger.debug(
            "Order %s: %d size tags for %d units", units.order.id, len(tags), units.total
        )
        return False

    # A layout fits iff it is a permutation of the order's unit tags.
    for layout in pack.combinations:
        if len(layout) == len(tags) and sorted(layout) == tags:
            return True
    return False


def _fits(units: _OrderUnits, pack: PackDefinition) -> bool:
    if pack.is_single:
        return units.total == 1
    return _fits_layouts(units, pack)


def can_fit(
    order: Order,
    catalog: PackCatalog,
    pack_key: str,
    size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES,
) -> bool:
    """Whether an order exactly fills one pack. A key missing from the catalog never fits."""
    pack = catalog.get(pack_key)
    if pack is None:
        logger.debug("Pack %s is not in the catalog", pack_key)
        return False
    return _fits(_OrderUnits(order, size_rules), pack)


def compatible_packs(
    order: Order,
    catalog: PackCatalog,
    size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES,
) -> PackFitResult:
    """
    Resolve every pack an order exactly fills, and the optimal one.

    Rules:
    1. total quantity 1 => the single pack is compatible and optimal
    2. every other pack fits iff its capacity equals the total quantity and
       one of its combinations is a permutation of the order's unit size tags
    3. optimal (when not single) is the first fitting pack in catalog order
    4. nothing fits => optimal is CUSTOM_PACK and no pack is compatible
    """
    units = _OrderUnits(order, size_rules)
    single_fits = units.total == 1 and SINGLE_PACK_KEY in catalog

    compatible: list[str] = [SINGLE_PACK_KEY] if single_fits else []
    for pack in catalog:
        if pack.is_single:
            continue
        if _fits_layouts(units, pack):
            compatible.append(pack.key)

    if single_fits:
        optimal = SINGLE_PACK_KEY
    else:
        optimal = compatible[0] if compatible else CUSTOM_PACK

    logger.debug("Order %s: optimal pack %s, compatible %s", order.id, optimal, compatible)
    return PackFitResult(optimal=optimal, compatible=tuple(compatible))


def has_size_match(order: Order, size_filter: str) -> bool:
    """At least one item of the order matches the operator size filter."""
    return any(matches_size_filter(item.sku, item.size, size_filter) for item in order.items)


def fits_combined_filter(
    order: Order,
    size_filter: str,
    pack_key: str,
    catalog: PackCatalog,
    size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES,
) -> bool:
    """Order has at least one item matching the size filter and exactly fills the pack."""
    if not has_size_match(order, size_filter):
        logger.debug("Order %s: no items match item size filter %s", order.id, size_filter)
        return False
    return can_fit(order, catalog, pack_key, size_rules)
