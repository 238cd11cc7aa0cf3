"""Issuing and verifying role-bearing access tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from warehouse_control.errors import InvalidSignature, MalformedClaims, TokenError, TokenExpired
from warehouse_control.models import Role

DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRE_HOURS = 3


class TokenService:
    """Signs and checks HMAC JWTs carrying ``{role, exp}``.

    Tokens hold no user identity, so verifying one never needs a store lookup.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expire_hours = expire_hours

    def issue(self, role: Role | str, issued_at: Optional[datetime] = None) -> str:
        """Create a signed token for ``role`` expiring ``expire_hours`` after ``issued_at``."""
        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {
            "role": role.value if isinstance(role, Role) else role,
            "exp": issued_at + timedelta(hours=self.expire_hours),
        }
        try:
            return jwt.encode(payload, self.secret, algorithm=self.algorithm)
        except jwt.PyJWTError as exc:
            raise TokenError(f"could not sign jwt token: {exc}") from exc

    def verify(self, token: str) -> str:
        """Return the role claim of a valid token.

        The role is returned verbatim; deciding whether it is a known role is
        left to the authorization policy.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired("token has expired") from exc
        except jwt.MissingRequiredClaimError as exc:
            raise MalformedClaims(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidSignature(f"could not verify token: {exc}") from exc

        role = payload.get("role")
        if not isinstance(role, str):
            raise MalformedClaims("role claim is missing or not a string")
        return role


def issue_token(secret: str, role: Role | str) -> str:
    return TokenService(secret).issue(role)


def verify_token(secret: str, token: str) -> str:
    return TokenService(secret).verify(token)


__all__ = ["TokenService", "issue_token", "verify_token", "DEFAULT_EXPIRE_HOURS"]
