from __future__ import annotations

from typing import Protocol

from fulfillment_runtime.domain.packing.models import PackCatalog


class PackCatalogProvider(Protocol):
    def get_catalog(self) -> PackCatalog: ...
