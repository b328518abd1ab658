from __future__ import annotations

from dataclasses import dataclass

# A group of one is never a repeat, so thresholds below two are rejected.
MIN_GROUP_ORDERS = 2


@dataclass(frozen=True)
class ClassificationConfig:
    bulk_min_orders: int = MIN_GROUP_ORDERS
    high_volume_min_orders: int = MIN_GROUP_ORDERS

    def __post_init__(self) -> None:
        if self.bulk_min_orders < MIN_GROUP_ORDERS:
            raise ValueError(f"bulk_min_orders must be >= {MIN_GROUP_ORDERS}, got {self.bulk_min_orders}")
        if self.high_volume_min_orders < MIN_GROUP_ORDERS:
            raise ValueError(
                f"high_volume_min_orders must be >= {MIN_GROUP_ORDERS}, got {self.high_volume_min_orders}"
            )
