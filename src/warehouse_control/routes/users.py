"""User routes: public registration and the protected change history."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from warehouse_control.auth.dependencies import ProtectedRoute, get_inventory_service, get_token_service
from warehouse_control.auth.tokens import TokenService
from warehouse_control.errors import StoreError, TokenError
from warehouse_control.models.schemas import CreateUserRequest, UserHistory, UserResponse
from warehouse_control.routes.errors import http_error
from warehouse_control.services import InventoryServicePort

users_router = APIRouter(prefix="/users", tags=["users"])
history_router = APIRouter(prefix="/users", tags=["users"], route_class=ProtectedRoute)


@users_router.post("", response_model=UserResponse, summary="Create a new user")
async def create_user(
    request: CreateUserRequest,
    service: InventoryServicePort = Depends(get_inventory_service),
    token_service: TokenService = Depends(get_token_service),
):
    """Create a user and return it together with a token for its role."""
    try:
        user = await service.create_user(request.name, request.role)
        token = token_service.issue(user.role)
    except (StoreError, TokenError) as exc:
        raise http_error(exc)

    logger.info("successfully handled request and created new user {}", user.id)
    response = UserResponse.model_validate(user, from_attributes=True)
    return response.model_copy(update={"token": token})


@history_router.get("/history", response_model=List[UserHistory], summary="Get users with their changes")
async def get_users_with_changes(service: InventoryServicePort = Depends(get_inventory_service)):
    try:
        history = await service.get_users_with_changes()
    except StoreError as exc:
        raise http_error(exc)

    logger.info("successfully handled request and returned history of {} users", len(history))
    return history


__all__ = ["users_router", "history_router"]
