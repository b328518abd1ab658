from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    output_dir: str = "/tmp/fulfillment-runtime-output"
    # Adapter selection: "netsuite" reads a saved-search export, anything else is in-memory
    runtime_adapters: str = "local"
    fulfillments_path: str = "data/sample-data.json"
    # Pack catalog
    pack_config_path: str = "config/pack-config.json"
    pack_schema_path: Optional[str] = None
    pack_cache_ttl_seconds: int = 60
    # Classification thresholds
    bulk_min_orders: int = 2
    high_volume_min_orders: int = 2

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            output_dir=os.getenv("OUTPUT_DIR", cls.output_dir),
            runtime_adapters=os.getenv("RUNTIME_ADAPTERS", cls.runtime_adapters).lower(),
            fulfillments_path=os.getenv("FULFILLMENTS_PATH", cls.fulfillments_path),
            pack_config_path=os.getenv("PACK_CONFIG_PATH", cls.pack_config_path),
            pack_schema_path=os.getenv("PACK_SCHEMA_PATH"),
            pack_cache_ttl_seconds=int(os.getenv("PACK_CACHE_TTL_SECONDS", cls.pack_cache_ttl_seconds)),
            bulk_min_orders=int(os.getenv("BULK_MIN_ORDERS", cls.bulk_min_orders)),
            high_volume_min_orders=int(os.getenv("HIGH_VOLUME_MIN_ORDERS", cls.high_volume_min_orders)),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
