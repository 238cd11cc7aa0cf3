"""Business services for inventory operations."""

from warehouse_control.services.inventory_service import InventoryService
from warehouse_control.services.port import InventoryServicePort

__all__ = ["InventoryService", "InventoryServicePort"]
