"""Router for fulfillment, inventory and customer endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fulfillment_runtime.app.api.dependencies import get_warehouse_data_service
from fulfillment_runtime.app.api.models.fulfillments import (
    CustomerModel,
    FulfillmentListResponse,
    FulfillmentModel,
    InventoryItemModel,
    SummaryModel,
)
from fulfillment_runtime.app.api.services.warehouse_data import WarehouseDataService
from fulfillment_runtime.application.errors import NotFoundError
from fulfillment_runtime.domain.fulfillment.filters import filter_fulfillments, paginate

router = APIRouter()


@router.get("/summary", response_model=SummaryModel)
def get_summary(service: WarehouseDataService = Depends(get_warehouse_data_service)) -> SummaryModel:
    """Counts of fulfillments, distinct SKUs, orders and customers."""
    try:
        return SummaryModel.from_domain(service.summary())
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/fulfillments", response_model=FulfillmentListResponse)
def list_fulfillments(
    customer: str | None = Query(None, description="Substring match on customer name"),
    item: str | None = Query(None, description="Substring match on SKU or item name"),
    urgency: str | None = Query(None, description="Substring match on urgency"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of results"),
    offset: int = Query(0, ge=0, description="Number of results to skip"),
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> FulfillmentListResponse:
    """
    List fulfillment records.

    Filters are case-insensitive and combined; total counts the filtered set
    before pagination.
    """
    try:
        records = filter_fulfillments(service.fulfillments(), customer=customer, item=item, urgency=urgency)
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    page = paginate(records, limit, offset)
    return FulfillmentListResponse(
        fulfillments=[FulfillmentModel.from_domain(r) for r in page],
        total=len(records),
        limit=limit,
        offset=offset,
    )


@router.get("/fulfillments/{fulfillment_id}", response_model=FulfillmentModel)
def get_fulfillment(
    fulfillment_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> FulfillmentModel:
    try:
        return FulfillmentModel.from_domain(service.get_fulfillment(fulfillment_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/inventory", response_model=list[InventoryItemModel])
def list_inventory(service: WarehouseDataService = Depends(get_warehouse_data_service)) -> list[InventoryItemModel]:
    try:
        return [InventoryItemModel.from_domain(item) for item in service.inventory()]
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/inventory/{sku}", response_model=InventoryItemModel)
def get_inventory_item(
    sku: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> InventoryItemModel:
    try:
        inventory = service.inventory()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    for item in inventory:
        if item.sku == sku:
            return InventoryItemModel.from_domain(item)
    raise HTTPException(status_code=404, detail=f"Item not found: {sku}")


@router.get("/customers", response_model=list[CustomerModel])
def list_customers(service: WarehouseDataService = Depends(get_warehouse_data_service)) -> list[CustomerModel]:
    try:
        return [CustomerModel.from_domain(c) for c in service.customers()]
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")


@router.get("/customers/{customer_id}", response_model=CustomerModel)
def get_customer(
    customer_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> CustomerModel:
    try:
        customers = service.customers()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    for customer in customers:
        if customer.id == customer_id:
            return CustomerModel.from_domain(customer)
    raise HTTPException(status_code=404, detail=f"Customer not found: {customer_id}")


@router.get("/customers/{customer_id}/fulfillments", response_model=list[FulfillmentModel])
def get_customer_fulfillments(
    customer_id: str,
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> list[FulfillmentModel]:
    try:
        return [FulfillmentModel.from_domain(r) for r in service.customer_fulfillments(customer_id)]
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
