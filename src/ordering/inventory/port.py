"""Inventory port: the availability capability owned by the Inventory domain.

The Inventory domain owns stock and the catalogue. This context only asks
whether a quantity of a product can be ordered right now; the answer is
advisory, because stock is reserved later and asynchronously by the
inventory owner when it receives OrderCreated.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AvailabilityResult(BaseModel):
    """Answer to a single availability check (camelCase on the wire).

    ``available=False`` is a legitimate business answer, not a failure.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    available: bool
    product_id: int = Field(alias="productId")
    product_name: str | None = Field(default=None, alias="productName")
    product_sku: str | None = Field(default=None, alias="productSku")
    current_price: Decimal | None = Field(default=None, alias="currentPrice")
    available_quantity: int | None = Field(default=None, alias="availableQuantity")
    message: str | None = None

    @model_validator(mode="after")
    def available_products_carry_a_snapshot(self):
        if self.available and (not self.product_name or not self.product_sku or self.current_price is None):
            raise ValueError("An available product must report its name, SKU and current price")
        if self.current_price is not None and self.current_price < 0:
            raise ValueError("Current price cannot be negative")
        return self


class InventoryPort(ABC):
    """Abstract interface for inventory adapters."""

    @abstractmethod
    def check_availability(self, product_id: int, quantity: int) -> AvailabilityResult:
        """Ask whether ``quantity`` units of ``product_id`` are available.

        Raises:
            InventoryUnavailable: the check could not be completed
                (network error, timeout, bad status, malformed answer).
        """
        ...
