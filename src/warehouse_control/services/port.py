"""Application service port consumed by the request handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from warehouse_control.models import Item, Role, User
from warehouse_control.models.schemas import UserHistory


class InventoryServicePort(ABC):
    """Operations the HTTP handlers call; handler tests substitute a fake."""

    @abstractmethod
    async def create_item(self, name: str, count: int) -> Item: ...

    @abstractmethod
    async def create_user(self, name: str, role: Role) -> User: ...

    @abstractmethod
    async def get_all_items(self) -> List[Item]: ...

    @abstractmethod
    async def get_user_role(self, user_id: int) -> Role: ...

    @abstractmethod
    async def update_item(
        self,
        item_id: int,
        acting_user_id: int,
        name: Optional[str] = None,
        count: Optional[int] = None,
    ) -> None: ...

    @abstractmethod
    async def delete_item(self, item_id: int) -> None: ...

    @abstractmethod
    async def get_users_with_changes(self) -> List[UserHistory]: ...
