"""Router for order endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fulfillment_runtime.app.api.dependencies import get_warehouse_data_service
from fulfillment_runtime.app.api.models.fulfillments import FulfillmentModel
from fulfillment_runtime.app.api.models.orders import OrderModel, PackFitModel
from fulfillment_runtime.app.api.services.warehouse_data import WarehouseDataService
from fulfillment_runtime.application.errors import NotFoundError, PackCatalogError

router = APIRouter()


@router.get("/orders", response_model=list[OrderModel])
def list_orders(service: WarehouseDataService = Depends(get_warehouse_data_service)) -> list[OrderModel]:
    """Orders aggregated from the current fulfillment set, in first-seen order."""
    try:
        return [OrderModel.from_domain(order) for order in service.orders().values()]
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/orders/{order_id}", response_model=OrderModel)
def get_order(
    order_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> OrderModel:
    try:
        return OrderModel.from_domain(service.get_order(order_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/orders/{order_id}/fulfillments", response_model=list[FulfillmentModel])
def get_order_fulfillments(
    order_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> list[FulfillmentModel]:
    try:
        return [FulfillmentModel.from_domain(r) for r in service.order_fulfillments(order_id)]
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/orders/{order_id}/packs", response_model=PackFitModel)
def get_order_packs(
    order_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> PackFitModel:
    """
    Get the packs an order exactly fills.

    Returns the optimal pack key (or "custom") plus every compatible pack.
    """
    try:
        fit = service.pack_fit(order_id)
        return PackFitModel.from_domain(order_id, fit, service.catalog())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PackCatalogError as e:
        raise HTTPException(status_code=500, detail=f"Error loading pack catalog: {str(e)}")
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading inputs: {str(e)}")
