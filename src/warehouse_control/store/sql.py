"""PostgreSQL inventory store."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from loguru import logger
from sqlalchemy import delete, func, select, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select as sqlmodel_select
from sqlmodel.ext.asyncio.session import AsyncSession

from warehouse_control.db import SessionFactory, session_scope
from warehouse_control.db.audit import ACTOR_SETTING
from warehouse_control.errors import ConstraintViolation, NotFoundError, StoreError
from warehouse_control.models import Item, Role, User
from warehouse_control.models.schemas import UserHistory
from warehouse_control.store.port import InventoryStore

USERS_WITH_CHANGES_QUERY = text("""
SELECT u.id, u.name, u.role, u.created_at,
    COALESCE(
        JSON_AGG(
            JSON_BUILD_OBJECT(
                'item_id', ih.item_id,
                'changed_column', ih.changed_column,
                'changed_from', ih.changed_from,
                'change_time', ih.change_time
            )
            ORDER BY ih.change_time, ih.id
        ) FILTER (WHERE ih.id IS NOT NULL),
        '[]'
    ) AS history
FROM users u
LEFT JOIN items_history ih ON ih.changed_by_id = u.id
GROUP BY u.id, u.name, u.role, u.created_at
ORDER BY u.id
""")


class SQLInventoryStore(InventoryStore):
    """Inventory store backed by SQLModel tables and the item audit trigger."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, action: str) -> AsyncIterator[AsyncSession]:
        """Run a unit of work, committing on success and translating driver errors."""
        try:
            async with session_scope(self.session_factory) as session:
                yield session
        except StoreError:
            raise
        except IntegrityError as exc:
            raise ConstraintViolation(f"{action}: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"{action}: {exc}") from exc

    async def create_item(self, name: str, count: int) -> Item:
        if not name:
            raise ConstraintViolation("could not create item: name must not be empty")

        item = Item(name=name, count=count)
        async with self._transaction("could not create item") as session:
            session.add(item)
            await session.flush()
            await session.refresh(item)

        logger.debug("Created item {} ({})", item.id, item.name)
        return item

    async def create_user(self, name: str, role: Role) -> User:
        if not name:
            raise ConstraintViolation("could not create user: name must not be empty")

        user = User(name=name, role=Role(role))
        async with self._transaction("could not create user") as session:
            session.add(user)
            await session.flush()
            await session.refresh(user)

        logger.debug("Created user {} with role {}", user.id, user.role)
        return user

    async def get_all_items(self) -> List[Item]:
        async with self._transaction("could not get items") as session:
            result = await session.exec(sqlmodel_select(Item).order_by(Item.id))
            return list(result.all())

    async def get_user_role(self, user_id: int) -> Role:
        async with self._transaction("could not get user role") as session:
            user = await session.get(User, user_id)
            if user is None:
                raise NotFoundError(f"no such user: {user_id}")
            return Role(user.role)

    async def update_item(
        self,
        item_id: int,
        acting_user_id: int,
        name: Optional[str] = None,
        count: Optional[int] = None,
    ) -> None:
        # Absent fields are assigned to themselves so the trigger sees no change.
        values = {
            "name": Item.name if name is None else name,
            "count": Item.count if count is None else count,
        }

        async with self._transaction("could not update item") as session:
            connection = await session.connection()
            # Transaction-local setting read by log_item_changes(); bound, never interpolated.
            await connection.execute(
                select(func.set_config(ACTOR_SETTING, str(acting_user_id), True))
            )
            result = await connection.execute(
                update(Item).where(Item.id == item_id).values(**values)
            )
            if result.rowcount == 0:
                raise NotFoundError(f"no item with id {item_id}")

        logger.debug("Item {} updated by user {}", item_id, acting_user_id)

    async def delete_item(self, item_id: int) -> None:
        async with self._transaction("could not delete item") as session:
            connection = await session.connection()
            await connection.execute(delete(Item).where(Item.id == item_id))

    async def get_users_with_changes(self) -> List[UserHistory]:
        async with self._transaction("could not get change history") as session:
            connection = await session.connection()
            rows = (await connection.execute(USERS_WITH_CHANGES_QUERY)).mappings().all()

        histories = []
        for row in rows:
            history = row["history"]
            if isinstance(history, (str, bytes)):
                history = json.loads(history)
            histories.append(
                UserHistory(
                    id=row["id"],
                    name=row["name"],
                    role=row["role"],
                    created_at=row["created_at"],
                    history=history,
                )
            )
        return histories


__all__ = ["SQLInventoryStore", "USERS_WITH_CHANGES_QUERY"]
