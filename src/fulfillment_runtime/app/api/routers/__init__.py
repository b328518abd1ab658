"""API routers for warehouse-facing endpoints."""

from fulfillment_runtime.app.api.routers.classification import router as classification_router
from fulfillment_runtime.app.api.routers.fulfillments import router as fulfillments_router
from fulfillment_runtime.app.api.routers.orders import router as orders_router
from fulfillment_runtime.app.api.routers.packs import router as packs_router

__all__ = ["fulfillments_router", "orders_router", "classification_router", "packs_router"]
