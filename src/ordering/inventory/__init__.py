"""Inventory adapter factory: pluggable inventory integration.

Uses FakeInventory by default. In production, set INVENTORY_ADAPTER=http
and INVENTORY_SERVICE_URL.
"""

from ordering.config import OrderingSettings
from ordering.inventory.port import InventoryPort


def build_inventory(settings: OrderingSettings) -> InventoryPort:
    """Return a new inventory adapter for the configured backend."""
    adapter = settings.inventory_adapter
    if adapter == "fake":
        from ordering.inventory.fake_adapter import FakeInventory

        return FakeInventory()
    elif adapter == "http":
        from ordering.inventory.http_adapter import HttpInventoryClient

        return HttpInventoryClient(
            base_url=settings.inventory_service_url,
            timeout=settings.inventory_timeout_seconds,
        )
    else:
        raise ValueError(f"Unknown inventory adapter: {adapter}")
