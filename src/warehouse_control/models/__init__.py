"""Database models for the warehouse control service."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func
from sqlmodel import Field, SQLModel


class Role(str, Enum):
    """Roles a user can hold; the authorization policy only recognises these."""

    ADMIN = "admin"
    MANAGER = "manager"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Return the matching role, or ``None`` for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


ROLE_VALUES = tuple(role.value for role in Role)


def created_at_field() -> Field:
    return Field(
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
        ),
    )


def foreign_key_field(target: str, ondelete: str | None = None) -> Field:
    return Field(
        sa_column=Column(
            Integer,
            ForeignKey(target, ondelete=ondelete),
            nullable=False,
            index=True,
        ),
    )


class Item(SQLModel, table=True):
    __tablename__ = "items"
    __table_args__ = (CheckConstraint("name <> ''", name="ck_items_name_not_empty"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    count: int = Field(default=0, nullable=False)

    created_at: datetime = created_at_field()


class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_users_name_not_empty"),
        CheckConstraint(
            "role IN ({})".format(", ".join(f"'{value}'" for value in ROLE_VALUES)),
            name="ck_users_role",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    role: Role = Field(sa_type=String, nullable=False)

    created_at: datetime = created_at_field()


class ItemChange(SQLModel, table=True):
    """One column modification of an item, appended by the ``items`` update trigger."""

    __tablename__ = "items_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    item_id: int = foreign_key_field("items.id", ondelete="CASCADE")
    changed_column: str
    changed_from: Optional[str] = None
    changed_by_id: int = foreign_key_field("users.id")
    change_time: datetime = created_at_field()


metadata = SQLModel.metadata

__all__ = ["Role", "ROLE_VALUES", "Item", "User", "ItemChange", "metadata"]
