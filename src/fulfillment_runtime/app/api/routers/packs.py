"""Router for pack catalog and box-size worklist endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fulfillment_runtime.app.api.dependencies import get_warehouse_data_service
from fulfillment_runtime.app.api.models.orders import OrderModel
from fulfillment_runtime.app.api.models.packs import (
    PackCatalogResponse,
    PackDefinitionModel,
    WorklistEntryModel,
    WorklistResponse,
)
from fulfillment_runtime.app.api.services.warehouse_data import WarehouseDataService
from fulfillment_runtime.application.errors import PackCatalogError
from fulfillment_runtime.domain.packing.sizing import ALL_SIZES
from fulfillment_runtime.domain.packing.worklist import ALL_PACKS

router = APIRouter()


@router.get("/packs", response_model=PackCatalogResponse)
def get_pack_catalog(
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> PackCatalogResponse:
    """Pack definitions in catalog order."""
    try:
        catalog = service.catalog()
    except (PackCatalogError, FileNotFoundError) as e:
        raise HTTPException(status_code=500, detail=f"Error loading pack catalog: {str(e)}")
    return PackCatalogResponse(packs=[PackDefinitionModel.from_domain(p) for p in catalog])


@router.get("/packs/worklist", response_model=WorklistResponse)
def get_box_size_worklist(
    size: str = Query(ALL_SIZES, description="Item size filter (all/10oz/16oz/26oz/stickers)"),
    pack: str = Query(ALL_PACKS, description="Only orders compatible with this pack key"),
    service: WarehouseDataService = Depends(get_warehouse_data_service),
) -> WorklistResponse:
    """
    Get every order with its pack fit.

    Sorted by optimal pack key, newest order first within a pack. Size and pack
    filters combine.
    """
    try:
        entries = service.worklist(size=size, pack=pack)
    except PackCatalogError as e:
        raise HTTPException(status_code=500, detail=f"Error loading pack catalog: {str(e)}")
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=f"Error loading inputs: {str(e)}")
    return WorklistResponse(
        size=size,
        pack=pack,
        count=len(entries),
        entries=[
            WorklistEntryModel(
                order=OrderModel.from_domain(e.order),
                category=e.category,
                optimal=e.fit.optimal,
                compatible=list(e.fit.compatible),
            )
            for e in entries
        ],
    )
