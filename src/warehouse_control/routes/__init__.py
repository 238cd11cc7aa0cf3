"""API routers."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from warehouse_control.auth.dependencies import security

from .items import items_router
from .pages import pages_router
from .users import history_router, users_router

# Routes on items_router and history_router are ProtectedRoutes: the token and
# role policy check runs before the request is parsed. The security dependency
# only documents the bearer scheme in OpenAPI.
protected_router = APIRouter(dependencies=[Depends(security)])
protected_router.include_router(items_router)
protected_router.include_router(history_router)

api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(pages_router)
api_router.include_router(protected_router)


__all__ = ["api_router", "protected_router"]
