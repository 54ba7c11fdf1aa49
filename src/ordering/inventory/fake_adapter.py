"""Fake inventory adapter: in-memory stock for development and testing.

Behaves like the remote inventory service: unknown products are reported as
unavailable, and the adapter can be configured to fail like a degraded
transport, either for every call or for selected products.
"""

from decimal import Decimal

import pydantic

from ordering.errors import InventoryUnavailable
from ordering.inventory.port import AvailabilityResult, InventoryPort


class FakeInventory(InventoryPort):
    """Inventory adapter backed by a dict of products."""

    def __init__(self):
        self.products: dict[int, dict] = {}
        self.should_succeed = True
        self.failure_reason = "Inventory service unavailable"
        self.unreachable_products: set[int] = set()
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Inventory service unavailable"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def add_product(self, product_id: int, name: str, sku: str, price, stock: int):
        self.products[product_id] = {
            "name": name,
            "sku": sku,
            "price": Decimal(str(price)),
            "stock": stock,
        }

    def set_stock(self, product_id: int, stock: int):
        self.products[product_id]["stock"] = stock

    def set_price(self, product_id: int, price):
        self.products[product_id]["price"] = Decimal(str(price))

    def make_unreachable(self, product_id: int):
        """Fail checks for one product only, as if the call timed out."""
        self.unreachable_products.add(product_id)

    def check_availability(self, product_id: int, quantity: int) -> AvailabilityResult:
        self.calls.append({"product_id": product_id, "quantity": quantity})

        if not self.should_succeed or product_id in self.unreachable_products:
            raise InventoryUnavailable(product_id, self.failure_reason)

        product = self.products.get(product_id)
        if product is None:
            return AvailabilityResult(
                available=False,
                product_id=product_id,
                available_quantity=0,
                message="Product not found",
            )

        available = product["stock"] >= quantity
        try:
            return AvailabilityResult(
                available=available,
                product_id=product_id,
                product_name=product["name"],
                product_sku=product["sku"],
                current_price=product["price"],
                available_quantity=product["stock"],
                message="Product available" if available else "Insufficient stock",
            )
        except pydantic.ValidationError as exc:
            raise InventoryUnavailable(product_id, "malformed response") from exc

    def reset(self):
        """Clear products and recorded calls (useful between tests)."""
        self.products.clear()
        self.unreachable_products.clear()
        self.calls.clear()
        self.should_succeed = True
        self.failure_reason = "Inventory service unavailable"
