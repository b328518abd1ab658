from __future__ import annotations

from fulfillment_runtime.domain.packing.models import (
    CUSTOM_PACK,
    SINGLE_PACK_KEY,
    PackCatalog,
    PackDefinition,
    PackFitResult,
)
from fulfillment_runtime.domain.packing.resolver import (
    can_fit,
    compatible_packs,
    fits_combined_filter,
    flatten_size_tags,
    has_size_match,
)
from fulfillment_runtime.domain.packing.sizing import (
    ALL_SIZES,
    DEFAULT_SIZE_RULES,
    SIZE_FILTERS,
    SizeRule,
    matches_size_filter,
    project_size,
)
from fulfillment_runtime.domain.packing.worklist import (
    ALL_PACKS,
    BoxSizeEntry,
    build_box_size_worklist,
    filter_worklist,
)

__all__ = [
    "CUSTOM_PACK",
    "SINGLE_PACK_KEY",
    "PackCatalog",
    "PackDefinition",
    "PackFitResult",
    "can_fit",
    "compatible_packs",
    "fits_combined_filter",
    "flatten_size_tags",
    "has_size_match",
    "ALL_SIZES",
    "DEFAULT_SIZE_RULES",
    "SIZE_FILTERS",
    "SizeRule",
    "matches_size_filter",
    "project_size",
    "ALL_PACKS",
    "BoxSizeEntry",
    "build_box_size_worklist",
    "filter_worklist",
]
