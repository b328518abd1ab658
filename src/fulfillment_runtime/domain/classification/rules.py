from __future__ import annotations

# Categories, in claim priority
SINGLES = "singles"
BULK = "bulk"
HIGH_VOLUME = "high_volume"
UNIQUE = "unique"

CATEGORY_ORDER = (SINGLES, BULK, HIGH_VOLUME, UNIQUE)

# Signature rendering
SIGNATURE_PAIR_SEPARATOR = ":"
SIGNATURE_ITEM_SEPARATOR = "|"
