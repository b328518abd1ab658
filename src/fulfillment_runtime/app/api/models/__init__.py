"""Pydantic models for API responses."""

from fulfillment_runtime.app.api.models.classification import (
    BulkGroupModel,
    BulkGroupsResponse,
    CategoryOrdersResponse,
    ClassificationResponse,
    HighVolumeGroupModel,
    HighVolumeGroupsResponse,
)
from fulfillment_runtime.app.api.models.fulfillments import (
    CustomerModel,
    FulfillmentListResponse,
    FulfillmentModel,
    InventoryItemModel,
    SummaryModel,
)
from fulfillment_runtime.app.api.models.orders import OrderItemModel, OrderModel, PackFitModel
from fulfillment_runtime.app.api.models.packs import (
    PackCatalogResponse,
    PackDefinitionModel,
    WorklistEntryModel,
    WorklistResponse,
)

__all__ = [
    "FulfillmentModel",
    "FulfillmentListResponse",
    "InventoryItemModel",
    "CustomerModel",
    "SummaryModel",
    "OrderItemModel",
    "OrderModel",
    "PackFitModel",
    "BulkGroupModel",
    "HighVolumeGroupModel",
    "ClassificationResponse",
    "CategoryOrdersResponse",
    "BulkGroupsResponse",
    "HighVolumeGroupsResponse",
    "PackDefinitionModel",
    "PackCatalogResponse",
    "WorklistEntryModel",
    "WorklistResponse",
]
