"""Exception hierarchy shared by the token service, policy, store and handlers."""

from __future__ import annotations


class WarehouseError(Exception):
    """Base class for every error raised by warehouse control."""


# Authentication and authorization


class AuthError(WarehouseError):
    """Request is not allowed to reach a protected handler."""


class MissingCredential(AuthError):
    """No ``Authorization: Bearer`` header was sent."""


class InvalidCredential(AuthError):
    """The bearer token failed verification."""


class UnknownRole(AuthError):
    """The token carries a role outside of the recognised set."""


class AccessDenied(AuthError):
    """The role is recognised but may not use the HTTP verb."""


# Tokens


class TokenError(WarehouseError):
    """Base class for token verification failures."""


class InvalidSignature(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class MalformedClaims(TokenError):
    pass


# Storage


class StoreError(WarehouseError):
    """A store call failed: connection, transaction or query error."""


class NotFoundError(StoreError):
    """The targeted row does not exist."""


class ConstraintViolation(StoreError):
    """The write would break a table constraint."""


__all__ = [
    "WarehouseError",
    "AuthError",
    "MissingCredential",
    "InvalidCredential",
    "UnknownRole",
    "AccessDenied",
    "TokenError",
    "InvalidSignature",
    "TokenExpired",
    "MalformedClaims",
    "StoreError",
    "NotFoundError",
    "ConstraintViolation",
]
