"""Inventory application service."""

from __future__ import annotations

import asyncio
from typing import Awaitable, List, Optional, TypeVar

from loguru import logger

from warehouse_control.errors import StoreError
from warehouse_control.models import Item, Role, User
from warehouse_control.models.schemas import UserHistory
from warehouse_control.services.port import InventoryServicePort
from warehouse_control.store import InventoryStore

T = TypeVar("T")


class InventoryService(InventoryServicePort):
    """Orchestrates store calls for the HTTP handlers.

    Every store call is bounded by ``timeout`` seconds. When the bound is hit
    the in-flight store coroutine is cancelled, which rolls its transaction
    back, and the caller gets a ``StoreError``.
    """

    def __init__(self, store: InventoryStore, timeout: Optional[float] = None):
        self.store = store
        self.timeout = timeout

    async def _bounded(self, operation: str, call: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Store operation {} timed out after {}s", operation, self.timeout)
            raise StoreError(f"could not {operation}: store operation timed out") from exc

    async def create_item(self, name: str, count: int) -> Item:
        return await self._bounded("create item", self.store.create_item(name, count))

    async def create_user(self, name: str, role: Role) -> User:
        return await self._bounded("create user", self.store.create_user(name, role))

    async def get_all_items(self) -> List[Item]:
        return await self._bounded("get items", self.store.get_all_items())

    async def get_user_role(self, user_id: int) -> Role:
        return await self._bounded("get user role", self.store.get_user_role(user_id))

    async def update_item(
        self,
        item_id: int,
        acting_user_id: int,
        name: Optional[str] = None,
        count: Optional[int] = None,
    ) -> None:
        await self._bounded(
            "update item",
            self.store.update_item(item_id, acting_user_id, name=name, count=count),
        )

    async def delete_item(self, item_id: int) -> None:
        await self._bounded("delete item", self.store.delete_item(item_id))

    async def get_users_with_changes(self) -> List[UserHistory]:
        return await self._bounded("get change history", self.store.get_users_with_changes())
