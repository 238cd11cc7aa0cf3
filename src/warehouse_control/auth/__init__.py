"""Token issuance, role policy and the request gate."""

from warehouse_control.auth.dependencies import ProtectedRoute, require_role, resolve_role
from warehouse_control.auth.policy import Decision, authorize, decide
from warehouse_control.auth.tokens import TokenService, issue_token, verify_token

__all__ = [
    "TokenService",
    "issue_token",
    "verify_token",
    "Decision",
    "authorize",
    "decide",
    "require_role",
    "ProtectedRoute",
    "resolve_role",
]
