"""Availability verifier: one availability check per requested line item.

Thin adapter over the inventory port with no local state. It keeps the two
outcomes apart: ``available=False`` comes back as a result, while a call that
could not complete raises InventoryUnavailable.
"""

import structlog
from protean.exceptions import ValidationError

from ordering.errors import InventoryUnavailable
from ordering.inventory.port import AvailabilityResult, InventoryPort

logger = structlog.get_logger(__name__)


class AvailabilityVerifier:
    def __init__(self, inventory: InventoryPort):
        self._inventory = inventory

    def check_availability(self, product_id: int, quantity: int) -> AvailabilityResult:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a positive integer"]})

        logger.info("Checking availability", product_id=product_id, quantity=quantity)
        result = self._inventory.check_availability(product_id, quantity)

        if result.product_id != product_id:
            logger.error(
                "Inventory answered for a different product",
                product_id=product_id,
                answered_product_id=result.product_id,
            )
            raise InventoryUnavailable(product_id, f"response was for product {result.product_id}")

        logger.info(
            "Availability check answered",
            product_id=product_id,
            available=result.available,
            available_quantity=result.available_quantity,
            message=result.message,
        )
        return result
