from __future__ import annotations

from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.classification.models import (
    BulkGroup,
    BulkStage,
    ClassificationResult,
    HighVolumeGroup,
    HighVolumeStage,
    SinglesStage,
)
from fulfillment_runtime.domain.classification.stages import (
    classify,
    classify_bulk,
    classify_high_volume,
    classify_singles,
    classify_unique,
    filter_bulk_groups,
    is_single,
    item_signature,
)
from fulfillment_runtime.domain.classification import rules

__all__ = [
    "ClassificationConfig",
    "ClassificationResult",
    "BulkGroup",
    "HighVolumeGroup",
    "SinglesStage",
    "BulkStage",
    "HighVolumeStage",
    "classify",
    "classify_singles",
    "classify_bulk",
    "classify_high_volume",
    "classify_unique",
    "filter_bulk_groups",
    "is_single",
    "item_signature",
    "rules",
]
