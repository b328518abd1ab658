"""
SKU to size-tag projection.

The mapping is an ordered table of ``(prefix, tag)`` rules evaluated once per
SKU; the first rule whose prefix matches wins. Extending the catalog with a
new product family means adding a rule here, not a new conditional.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

TAG_DPT10 = "DPT10"
TAG_DPT16 = "DPT16"
TAG_DPT26 = "DPT26"
TAG_STICKERS = "stickers"


@dataclass(frozen=True)
class SizeRule:
    prefix: str
    tag: str


DEFAULT_SIZE_RULES: tuple[SizeRule, ...] = (
    SizeRule("DPT10", TAG_DPT10),
    SizeRule("PT10", TAG_DPT10),
    SizeRule("DPT16", TAG_DPT16),
    SizeRule("PT16", TAG_DPT16),
    SizeRule("DPT26", TAG_DPT26),
    SizeRule("PT26", TAG_DPT26),
    SizeRule("PL-STCK", TAG_STICKERS),
)


@dataclass(frozen=True)
class SizeFilter:
    """Operator-facing item-size filter (the 10oz / 16oz / 26oz / stickers buttons)."""

    label: str
    sku_prefixes: tuple[str, ...]
    size_token: Optional[str] = None  # also matched against the item's size field


ALL_SIZES = "all"

SIZE_FILTERS: dict[str, SizeFilter] = {
    "10oz": SizeFilter("10oz", ("DPT10", "PT10"), "10oz"),
    "16oz": SizeFilter("16oz", ("DPT16", "PT16"), "16oz"),
    "26oz": SizeFilter("26oz", ("DPT26", "PT26"), "26oz"),
    "stickers": SizeFilter("stickers", ("PL-STCK",)),
}


def project_size(sku: str, size_rules: Sequence[SizeRule] = DEFAULT_SIZE_RULES) -> Optional[str]:
    """Map a SKU to its size tag, or None when no rule matches."""
    for rule in size_rules:
        if sku.startswith(rule.prefix):
            return rule.tag
    return None


def matches_size_filter(sku: str, size: str, size_filter: str) -> bool:
    """Check one item against an operator size filter; unknown labels match nothing."""
    if size_filter == ALL_SIZES:
        return True
    size_spec = SIZE_FILTERS.get(size_filter)
    if size_spec is None:
        return False
    sku = sku or ""
    if any(sku.startswith(prefix) for prefix in size_spec.sku_prefixes):
        return True
    return bool(size_spec.size_token and size_spec.size_token in (size or ""))
