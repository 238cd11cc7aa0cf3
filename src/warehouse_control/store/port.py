"""Inventory store port: the operations the application service needs from storage.

The service programs against this interface; tests swap in an in-memory
adapter while the application runs ``SQLInventoryStore``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from warehouse_control.models import Item, Role, User
from warehouse_control.models.schemas import UserHistory


class InventoryStore(ABC):
    """Abstract interface for inventory storage adapters."""

    @abstractmethod
    async def create_item(self, name: str, count: int) -> Item:
        """Insert an item; the store assigns ``id`` and ``created_at``.

        Raises ``ConstraintViolation`` for an empty name.
        """
        ...

    @abstractmethod
    async def create_user(self, name: str, role: Role) -> User:
        """Insert a user; the store assigns ``id`` and ``created_at``."""
        ...

    @abstractmethod
    async def get_all_items(self) -> List[Item]:
        """Return every item, or an empty list."""
        ...

    @abstractmethod
    async def get_user_role(self, user_id: int) -> Role:
        """Return the role of a user. Raises ``NotFoundError`` for an unknown id."""
        ...

    @abstractmethod
    async def update_item(
        self,
        item_id: int,
        acting_user_id: int,
        name: Optional[str] = None,
        count: Optional[int] = None,
    ) -> None:
        """Apply a partial update attributed to ``acting_user_id``.

        The update and its ``items_history`` rows are written in one
        transaction. Raises ``NotFoundError`` when no item has ``item_id``.
        """
        ...

    @abstractmethod
    async def delete_item(self, item_id: int) -> None:
        """Delete an item; deleting a missing id is not an error."""
        ...

    @abstractmethod
    async def get_users_with_changes(self) -> List[UserHistory]:
        """Return every user with their changes ordered by ``change_time``."""
        ...
