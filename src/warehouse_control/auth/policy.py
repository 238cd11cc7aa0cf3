"""Role based authorization policy keyed on the HTTP verb."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet

from warehouse_control.errors import AccessDenied, UnknownRole
from warehouse_control.models import Role


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


ALL_ROLES: FrozenSet[Role] = frozenset(Role)

# Verbs missing from this table are open to every recognised role.
VERB_ROLES: Dict[str, FrozenSet[Role]] = {
    "POST": frozenset({Role.ADMIN}),
    "DELETE": frozenset({Role.ADMIN}),
    "PUT": frozenset({Role.ADMIN, Role.MANAGER}),
    "GET": ALL_ROLES,
}


def allowed_roles(verb: str) -> FrozenSet[Role]:
    return VERB_ROLES.get(verb.upper(), ALL_ROLES)


def authorize(role: object, verb: str) -> Role:
    """Return the recognised role if it may use ``verb``.

    Raises ``UnknownRole`` for a role outside the known set (empty included)
    and ``AccessDenied`` when the role is known but not allowed.
    """
    parsed = Role.parse(role)
    if parsed is None:
        raise UnknownRole(f"unknown role {role!r}")
    if parsed not in allowed_roles(verb):
        raise AccessDenied(f"role {parsed.value!r} may not use {verb.upper()}")
    return parsed


def decide(role: object, verb: str) -> Decision:
    try:
        authorize(role, verb)
    except (UnknownRole, AccessDenied):
        return Decision.DENY
    return Decision.ALLOW


__all__ = ["Decision", "VERB_ROLES", "allowed_roles", "authorize", "decide"]
