from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

SINGLE_PACK_KEY = "single"
CUSTOM_PACK = "custom"  # optimal-pack sentinel when nothing fits


@dataclass(frozen=True)
class PackDefinition:
    """A named box capacity plus the size-tag layouts it can hold."""

    key: str
    name: str
    max_items: int
    combinations: tuple[tuple[str, ...], ...] = ()

    @property
    def is_single(self) -> bool:
        return self.key == SINGLE_PACK_KEY


@dataclass(frozen=True)
class PackCatalog:
    """Pack definitions in configuration order."""

    packs: tuple[PackDefinition, ...] = ()

    def get(self, key: str) -> Optional[PackDefinition]:
        for pack in self.packs:
            if pack.key == key:
                return pack
        return None

    def keys(self) -> list[str]:
        return [pack.key for pack in self.packs]

    def name_of(self, key: str) -> str:
        pack = self.get(key)
        return pack.name if pack else key

    def __contains__(self, key: object) -> bool:
        return any(pack.key == key for pack in self.packs)

    def __iter__(self) -> Iterator[PackDefinition]:
        return iter(self.packs)

    def __len__(self) -> int:
        return len(self.packs)


@dataclass(frozen=True)
class PackFitResult:
    optimal: str  # pack key, or CUSTOM_PACK
    compatible: tuple[str, ...]  # every fitting pack key, catalog order

    @property
    def is_resolved(self) -> bool:
        return self.optimal != CUSTOM_PACK

    def to_dict(self) -> dict:
        return {"optimal": self.optimal, "all": list(self.compatible)}
