from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.common.dates import date_sort_key
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import PackCatalog, PackFitResult
from fulfillment_runtime.domain.packing.resolver import compatible_packs, fits_combined_filter, has_size_match
from fulfillment_runtime.domain.packing.sizing import ALL_SIZES, DEFAULT_SIZE_RULES, SizeRule

ALL_PACKS = "all"


@dataclass(frozen=True)
class BoxSizeEntry:
    order: Order
    fit: PackFitResult
    category: Optional[str] = None


def build_box_size_worklist(
    orders: Mapping[OrderKey, Order],
    catalog: PackCatalog,
    classification: Optional[ClassificationResult] = None,
    size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES,
) -> list[BoxSizeEntry]:
    """Every order with its pack fit, sorted by optimal pack key then newest order first."""
    entries = [
        BoxSizeEntry(
            order=order,
            fit=compatible_packs(order, catalog, size_rules),
            category=classification.category_of(order_id) if classification else None,
        )
        for order_id, order in orders.items()
    ]
    entries.sort(key=lambda e: date_sort_key(e.order.sort_date), reverse=True)
    entries.sort(key=lambda e: e.fit.optimal)
    return entries


def filter_worklist(
    entries: Sequence[BoxSizeEntry],
    catalog: PackCatalog,
    size_filter: str = ALL_SIZES,
    pack_key: str = ALL_PACKS,
    size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES,
) -> list[BoxSizeEntry]:
    """Apply the item-size and pack filters together; a pack filter keeps only orders that fit it."""
    if pack_key == ALL_PACKS:
        return [e for e in entries if has_size_match(e.order, size_filter)]
    return [e for e in entries if fits_combined_filter(e.order, size_filter, pack_key, catalog, size_rules)]
