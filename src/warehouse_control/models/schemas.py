"""Request and response models for the HTTP API."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from warehouse_control.models import Role


class CreateItemRequest(BaseModel):
    """Create item request."""
    name: str = Field(min_length=1)
    count: int = Field(ge=0, strict=True)


class CreateUserRequest(BaseModel):
    """Create user request."""
    name: str = Field(min_length=1)
    role: Role


class UpdateItemRequest(BaseModel):
    """Partial item update; absent fields keep their stored value."""
    user_id: int = Field(gt=0, strict=True)
    name: Optional[str] = Field(default=None, min_length=1)
    count: Optional[int] = Field(default=None, ge=0, strict=True)


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    count: int
    created_at: datetime


class UserResponse(BaseModel):
    """User response model; ``token`` is only filled in when the user is created."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    role: Role
    created_at: datetime
    token: Optional[str] = None


class Change(BaseModel):
    item_id: int
    changed_column: str
    changed_from: Optional[str] = None
    change_time: datetime


class UserHistory(BaseModel):
    """A user together with every item change attributed to them, oldest first."""
    id: int
    name: str
    role: Role
    created_at: datetime
    history: List[Change] = Field(default_factory=list)


class StatusResponse(BaseModel):
    status: str


__all__ = [
    "CreateItemRequest",
    "CreateUserRequest",
    "UpdateItemRequest",
    "ItemResponse",
    "UserResponse",
    "Change",
    "UserHistory",
    "StatusResponse",
]
