from __future__ import annotations

import asyncio

import pytest

from warehouse_control.errors import NotFoundError, StoreError
from warehouse_control.models import Role
from warehouse_control.services import InventoryService

pytestmark = pytest.mark.anyio


class SlowStore:
    """Store stand-in whose update never finishes on its own."""

    def __init__(self):
        self.cancelled = False

    async def update_item(self, item_id, acting_user_id, name=None, count=None):
        try:
            await asyncio.sleep(60)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


async def test_service_delegates_to_store(memory_store):
    service = InventoryService(memory_store, timeout=5)

    user = await service.create_user("ann", Role.ADMIN)
    item = await service.create_item("bolt", 5)
    await service.update_item(item.id, user.id, count=6)

    assert await service.get_user_role(user.id) is Role.ADMIN
    assert [stored.count for stored in await service.get_all_items()] == [6]
    history = await service.get_users_with_changes()
    assert [change.changed_column for change in history[0].history] == ["count"]


async def test_partial_update_keeps_untouched_fields(memory_store):
    service = InventoryService(memory_store)
    user = await service.create_user("ann", Role.MANAGER)
    item = await service.create_item("bolt", 5)

    await service.update_item(item.id, user.id, count=9)

    assert memory_store.items[item.id].name == "bolt"
    assert [change["changed_column"] for change in memory_store.changes] == ["count"]


async def test_store_errors_pass_through(memory_store):
    service = InventoryService(memory_store)

    with pytest.raises(NotFoundError):
        await service.get_user_role(42)


async def test_timeout_cancels_store_call():
    store = SlowStore()
    service = InventoryService(store, timeout=0.05)

    with pytest.raises(StoreError, match="timed out"):
        await service.update_item(1, 1, name="x")

    assert store.cancelled
