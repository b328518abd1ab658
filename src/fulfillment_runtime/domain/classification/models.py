from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from fulfillment_runtime.domain.classification import rules
from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order, OrderItem


@dataclass(frozen=True)
class BulkGroup:
    """Two or more orders with an identical item signature."""

    signature: str
    items: tuple[OrderItem, ...]  # items of the first order seen
    order_ids: tuple[OrderKey, ...]

    @property
    def total_orders(self) -> int:
        return len(self.order_ids)


@dataclass(frozen=True)
class HighVolumeGroup:
    """A SKU shipped to several otherwise unclassified orders."""

    sku: str
    item_name: str
    size: str
    color: str
    order_ids: tuple[OrderKey, ...]  # distinct, first-seen order
    total_quantity: int

    @property
    def order_count(self) -> int:
        return len(self.order_ids)


@dataclass(frozen=True)
class SinglesStage:
    orders: Mapping[OrderKey, Order]
    config: ClassificationConfig
    singles: frozenset[OrderKey]
    remaining: tuple[OrderKey, ...]


@dataclass(frozen=True)
class BulkStage:
    previous: SinglesStage
    bulk: frozenset[OrderKey]
    groups: tuple[BulkGroup, ...]
    remaining: tuple[OrderKey, ...]


@dataclass(frozen=True)
class HighVolumeStage:
    previous: BulkStage
    high_volume: frozenset[OrderKey]
    groups: tuple[HighVolumeGroup, ...]
    remaining: tuple[OrderKey, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Immutable outcome of one classification pass."""

    order_ids: tuple[OrderKey, ...]
    singles: frozenset[OrderKey]
    bulk: frozenset[OrderKey]
    high_volume: frozenset[OrderKey]
    unique: frozenset[OrderKey]
    bulk_groups: tuple[BulkGroup, ...]
    high_volume_groups: tuple[HighVolumeGroup, ...]

    def members(self, category: str) -> frozenset[OrderKey]:
        if category == rules.SINGLES:
            return self.singles
        if category == rules.BULK:
            return self.bulk
        if category == rules.HIGH_VOLUME:
            return self.high_volume
        if category == rules.UNIQUE:
            return self.unique
        raise ValueError(f"Unknown category: {category}")

    def category_of(self, order_id: str) -> Optional[str]:
        for category in rules.CATEGORY_ORDER:
            if order_id in self.members(category):
                return category
        return None

    def counts(self) -> dict[str, int]:
        return {category: len(self.members(category)) for category in rules.CATEGORY_ORDER}

    def ordered_members(self, category: str) -> list[OrderKey]:
        """Members of a category in order-arrival order."""
        members = self.members(category)
        return [order_id for order_id in self.order_ids if order_id in members]
