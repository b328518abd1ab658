"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends

from fulfillment_runtime.app.api.services.warehouse_data import WarehouseDataService
from fulfillment_runtime.app.factory import (
    create_classification_config,
    create_fulfillments_repository,
    create_pack_catalog_provider,
)
from fulfillment_runtime.settings import Settings, get_settings


def get_warehouse_data_service(settings: Settings = Depends(get_settings)) -> WarehouseDataService:
    """Dependency to provide WarehouseDataService."""
    return WarehouseDataService(
        fulfillments_repo=create_fulfillments_repository(settings),
        catalog_provider=create_pack_catalog_provider(settings),
        classification_config=create_classification_config(settings),
    )
