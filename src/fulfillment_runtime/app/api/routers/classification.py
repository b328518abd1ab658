"""Router for order classification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fulfillment_runtime.app.api.dependencies import get_warehouse_data_service
from fulfillment_runtime.app.api.models.classification import (
    BulkGroupModel,
    BulkGroupsResponse,
    CategoryOrdersResponse,
    ClassificationResponse,
    HighVolumeGroupModel,
    HighVolumeGroupsResponse,
)
from fulfillment_runtime.app.api.models.orders import OrderModel
from fulfillment_runtime.app.api.services.warehouse_data import ALL_COLORS, WarehouseDataService
from fulfillment_runtime.domain.classification import rules
from fulfillment_runtime.domain.classification.stages import filter_bulk_groups
from fulfillment_runtime.domain.packing.sizing import ALL_SIZES

router = APIRouter()


@router.get("/classification", response_model=ClassificationResponse)
def get_classification(
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> ClassificationResponse:
    """
    Classify every order into exactly one category.

    Stages run singles, then bulk, then high-volume, and the rest are unique.
    """
    try:
        _, result = service.classification()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    return ClassificationResponse(
        counts=result.counts(),
        singles=list(result.ordered_members(rules.SINGLES)),
        bulk_groups=[BulkGroupModel.from_domain(g) for g in result.bulk_groups],
        high_volume_groups=[HighVolumeGroupModel.from_domain(g) for g in result.high_volume_groups],
        unique=list(result.ordered_members(rules.UNIQUE)),
    )


@router.get("/classification/singles", response_model=CategoryOrdersResponse)
def get_singles(
    size: str = Query(ALL_SIZES, description="Item size filter (all/10oz/16oz/26oz/stickers)"),
    color: str = Query(ALL_COLORS, description="Exact item color, or 'all'"),
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> CategoryOrdersResponse:
    try:
        singles = service.singles(size=size, color=color)
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    return CategoryOrdersResponse(
        category=rules.SINGLES,
        count=len(singles),
        orders=[OrderModel.from_domain(o) for o in singles],
    )


@router.get("/classification/bulk", response_model=BulkGroupsResponse)
def get_bulk_groups(
    min_orders: int = Query(2, ge=2, description="Only groups with at least this many orders"),
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> BulkGroupsResponse:
    try:
        _, result = service.classification()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    groups = filter_bulk_groups(result.bulk_groups, min_orders)
    return BulkGroupsResponse(
        min_orders=min_orders,
        count=len(groups),
        groups=[BulkGroupModel.from_domain(g) for g in groups],
    )


@router.get("/classification/high-volume", response_model=HighVolumeGroupsResponse)
def get_high_volume_groups(
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> HighVolumeGroupsResponse:
    try:
        _, result = service.classification()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    return HighVolumeGroupsResponse(
        count=len(result.high_volume_groups),
        groups=[HighVolumeGroupModel.from_domain(g) for g in result.high_volume_groups],
    )


@router.get("/classification/unique", response_model=CategoryOrdersResponse)
def get_unique_orders(
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> CategoryOrdersResponse:
    try:
        orders, result = service.classification()
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading fulfillments: {str(e)}")
    unique = [orders[order_id] for order_id in result.ordered_members(rules.UNIQUE)]
    return CategoryOrdersResponse(
        category=rules.UNIQUE,
        count=len(unique),
        orders=[OrderModel.from_domain(o) for o in unique],
    )
