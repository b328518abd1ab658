from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from fulfillment_runtime.adapters.config.pack_catalog_loader import load_pack_catalog
from fulfillment_runtime.domain.packing.models import PackCatalog
from fulfillment_runtime.ports.pack_catalog_provider import PackCatalogProvider


class JsonPackCatalogProvider(PackCatalogProvider):
    """Loads the catalog from a JSON file and caches it (and any load error) for a short TTL."""

    def __init__(
        self,
        config_path: Path | str,
        schema_path: Optional[Path | str] = None,
        cache_ttl_seconds: int = 60,
    ) -> None:
        self.config_path = Path(config_path)
        self.schema_path = Path(schema_path) if schema_path else None
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cached: Optional[tuple[float, PackCatalog]] = None
        self._cached_error: Optional[tuple[float, Exception]] = None

    def get_catalog(self) -> PackCatalog:
        now = time.time()

        if self._cached is not None:
            cached_time, catalog = self._cached
            if now - cached_time < self.cache_ttl_seconds:
                return catalog

        if self._cached_error is not None:
            cached_time, error = self._cached_error
            if now - cached_time < self.cache_ttl_seconds:
                raise error

        try:
            catalog = load_pack_catalog(self.config_path, self.schema_path)
        except Exception as e:
            self._cached_error = (now, e)
            raise

        self._cached = (now, catalog)
        self._cached_error = None
        return catalog


class StaticPackCatalogProvider(PackCatalogProvider):
    def __init__(self, catalog: PackCatalog) -> None:
        self.catalog = catalog

    def get_catalog(self) -> PackCatalog:
        return self.catalog
