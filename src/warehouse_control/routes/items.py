"""Item routes; mounted behind the role gate."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from warehouse_control.auth.dependencies import ProtectedRoute, get_inventory_service
from warehouse_control.errors import StoreError
from warehouse_control.models.schemas import (
    CreateItemRequest,
    ItemResponse,
    StatusResponse,
    UpdateItemRequest,
)
from warehouse_control.routes.errors import http_error
from warehouse_control.services import InventoryServicePort

items_router = APIRouter(prefix="/items", tags=["items"], route_class=ProtectedRoute)


@items_router.post("", response_model=ItemResponse, summary="Create a new item (admin)")
async def create_item(
    request: CreateItemRequest,
    service: InventoryServicePort = Depends(get_inventory_service),
):
    try:
        item = await service.create_item(request.name, request.count)
    except StoreError as exc:
        raise http_error(exc)

    logger.info("successfully handled request and created new item {}", item.id)
    return item


@items_router.get("", response_model=List[ItemResponse], summary="Get all items")
async def get_all_items(service: InventoryServicePort = Depends(get_inventory_service)):
    try:
        items = await service.get_all_items()
    except StoreError as exc:
        raise http_error(exc)

    logger.info("successfully handled request and returned {} items", len(items))
    return items


@items_router.put("/{item_id}", response_model=StatusResponse, summary="Update an item (admin, manager)")
async def update_item(
    item_id: int,
    request: UpdateItemRequest,
    service: InventoryServicePort = Depends(get_inventory_service),
):
    """Partially update an item; the change is recorded against ``user_id``."""
    try:
        await service.update_item(
            item_id,
            request.user_id,
            name=request.name,
            count=request.count,
        )
    except StoreError as exc:
        raise http_error(exc)

    logger.info("successfully handled request and updated item {}", item_id)
    return StatusResponse(status="successfully updated item")


@items_router.delete("/{item_id}", response_model=StatusResponse, summary="Delete an item (admin)")
async def delete_item(
    item_id: int,
    service: InventoryServicePort = Depends(get_inventory_service),
):
    """Delete an item. Deleting an id that does not exist still succeeds."""
    try:
        await service.delete_item(item_id)
    except StoreError as exc:
        raise http_error(exc)

    logger.info("successfully handled request and deleted item {}", item_id)
    return StatusResponse(status="successfully deleted item")


__all__ = ["items_router"]
