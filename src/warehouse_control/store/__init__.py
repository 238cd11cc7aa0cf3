"""Inventory storage port and its PostgreSQL adapter."""

from warehouse_control.store.port import InventoryStore
from warehouse_control.store.sql import SQLInventoryStore

__all__ = ["InventoryStore", "SQLInventoryStore"]
