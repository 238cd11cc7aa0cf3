"""Authentication dependencies for FastAPI."""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Optional

from fastapi import HTTPException, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger

from warehouse_control.auth.policy import authorize
from warehouse_control.auth.tokens import TokenService
from warehouse_control.errors import AuthError, InvalidCredential, MissingCredential, TokenError
from warehouse_control.models import Role
from warehouse_control.services.port import InventoryServicePort

security = HTTPBearer(auto_error=False, description="Token returned by POST /users")

MISSING_CREDENTIAL_DETAIL = "Authorization header required"
NOT_AUTHORIZED_DETAIL = "Not authorized"


def get_token_service(request: Request) -> TokenService:
    """Get the token service built by the application factory."""
    return request.app.state.token_service


def get_inventory_service(request: Request) -> InventoryServicePort:
    """Get the inventory service built by the application factory."""
    return request.app.state.inventory_service


def resolve_role(
    credentials: Optional[HTTPAuthorizationCredentials],
    method: str,
    token_service: TokenService,
) -> Role:
    """Verify the bearer token and run the policy for ``method``."""
    if credentials is None or not credentials.credentials:
        raise MissingCredential("bearer credential is missing")

    try:
        role = token_service.verify(credentials.credentials)
    except TokenError as exc:
        raise InvalidCredential(str(exc)) from exc

    return authorize(role, method)


async def require_role(request: Request) -> Role:
    """Check the bearer token and role policy for ``request``.

    Raises the 401 ``HTTPException`` sent back for every rejected request.
    """
    credentials = await security(request)
    try:
        return resolve_role(credentials, request.method, get_token_service(request))
    except MissingCredential as exc:
        logger.warning("{} {} rejected: {}", request.method, request.url.path, exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=MISSING_CREDENTIAL_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthError as exc:
        logger.warning(
            "{} {} rejected ({}): {}", request.method, request.url.path, type(exc).__name__, exc
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHORIZED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ProtectedRoute(APIRoute):
    """Route that runs ``require_role`` before the body, path or dependencies are parsed."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            await require_role(request)
            return await handler(request)

        return gated_handler


__all__ = [
    "security",
    "get_token_service",
    "get_inventory_service",
    "resolve_role",
    "require_role",
    "ProtectedRoute",
]
