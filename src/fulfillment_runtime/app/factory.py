from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fulfillment_runtime.ports.fulfillments_repository import FulfillmentsRepository
    from fulfillment_runtime.ports.outputs_repository import OutputsRepository
    from fulfillment_runtime.ports.pack_catalog_provider import PackCatalogProvider

from fulfillment_runtime.adapters.config.json_pack_catalog_provider import JsonPackCatalogProvider
from fulfillment_runtime.adapters.inputs.in_memory_fulfillments_repository import InMemoryFulfillmentsRepository
from fulfillment_runtime.adapters.inputs.netsuite_fulfillments_repository import NetSuiteFulfillmentsRepository
from fulfillment_runtime.adapters.outputs.file_outputs_repository import FileOutputsRepository
from fulfillment_runtime.adapters.outputs.stdout_outputs_repository import StdoutOutputsRepository
from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.settings import Settings, get_settings


def create_fulfillments_repository(settings: Settings) -> "FulfillmentsRepository":
    """NetSuite export when RUNTIME_ADAPTERS=netsuite, otherwise the in-memory demo set."""
    if settings.runtime_adapters == "netsuite":
        return NetSuiteFulfillmentsRepository(settings.fulfillments_path)
    return InMemoryFulfillmentsRepository()


@lru_cache(maxsize=8)
def create_pack_catalog_provider(settings: Settings) -> "PackCatalogProvider":
    # Cached per settings so the provider's TTL cache survives across API requests.
    return JsonPackCatalogProvider(
        settings.pack_config_path,
        schema_path=settings.pack_schema_path,
        cache_ttl_seconds=settings.pack_cache_ttl_seconds,
    )


def create_classification_config(settings: Settings) -> ClassificationConfig:
    return ClassificationConfig(
        bulk_min_orders=settings.bulk_min_orders,
        high_volume_min_orders=settings.high_volume_min_orders,
    )


def create_adapters(
    settings: Optional[Settings] = None,
    stdout_outputs: bool = False,
) -> tuple[
    "FulfillmentsRepository",
    "PackCatalogProvider",
    "OutputsRepository",
]:
    """
    Factory function to create adapters based on settings.

    Outputs go to JSONL files under OUTPUT_DIR unless stdout_outputs is set.
    """
    settings = settings or get_settings()

    fulfillments_repo = create_fulfillments_repository(settings)
    catalog_provider = create_pack_catalog_provider(settings)

    if stdout_outputs:
        outputs_repo: OutputsRepository = StdoutOutputsRepository()
    else:
        outputs_repo = FileOutputsRepository(settings.output_dir)

    return (fulfillments_repo, catalog_provider, outputs_repo)
