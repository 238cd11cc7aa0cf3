#!/usr/bin/env python3
"""Create a user and print a bearer token for its role."""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from warehouse_control.auth.tokens import TokenService
from warehouse_control.config import get_settings
from warehouse_control.db import create_engine, create_session_factory
from warehouse_control.models import Role
from warehouse_control.store import SQLInventoryStore


async def create_user(name: str, role: Role) -> None:
    settings = get_settings()
    engine = create_engine(settings.database)
    try:
        store = SQLInventoryStore(create_session_factory(engine))
        user = await store.create_user(name, role)
    finally:
        await engine.dispose()

    token = TokenService(
        settings.security.secret,
        algorithm=settings.security.jwt_algorithm,
        expire_hours=settings.security.token_expire_hours,
    ).issue(user.role)

    print(f"Created user {user.id} '{user.name}' with role {user.role}")
    print(f"Token (valid {settings.security.token_expire_hours}h): {token}")


def main():
    roles = ", ".join(role.value for role in Role)
    if len(sys.argv) != 3:
        print("Usage:")
        print(f"  python scripts/create_user.py <name> <role>   # role is one of: {roles}")
        sys.exit(1)

    role = Role.parse(sys.argv[2])
    if role is None:
        print(f"Unknown role '{sys.argv[2]}', expected one of: {roles}")
        sys.exit(1)

    asyncio.run(create_user(sys.argv[1], role))


if __name__ == "__main__":
    main()
