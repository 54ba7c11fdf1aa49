"""Order aggregate: the consistency boundary for a placed order.

An Order owns its line items outright. Product name, SKU and price are
snapshots taken from the inventory answer at verification time; they are
never re-read from the catalogue, so the order stays historically accurate
when the catalogue changes later.

Status changes are delegated to the lifecycle state machine
(ordering.order.lifecycle); nothing assigns ``status`` directly.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderCancelled, OrderCreated, OrderStatusChanged
from ordering.order.lifecycle import (
    INITIAL_STATUS,
    OrderStatus,
    assert_can_cancel,
    assert_can_transition,
)
from ordering.order.money import format_money, line_subtotal, money_sum, to_money

__all__ = ["Order", "OrderLineItem", "OrderStatus"]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLineItem:
    """A product and quantity within an order, priced at the time of ordering."""

    product_id = Integer(required=True)
    product_name = String(required=True, max_length=255)
    product_sku = String(required=True, max_length=100)
    quantity = Integer(required=True, min_value=1)
    price_at_order = String(required=True, max_length=32)  # serialized Decimal
    subtotal = String(required=True, max_length=32)  # quantity × price_at_order

    @invariant.post
    def subtotal_is_quantity_times_price(self):
        if to_money(self.subtotal) != line_subtotal(self.quantity, self.price_at_order):
            raise ValidationError({"subtotal": ["Subtotal must equal quantity × price at order"]})

    @classmethod
    def snapshot(cls, product_id, product_name, product_sku, quantity, price):
        """Build a line item from verified product data, deriving the subtotal."""
        return cls(
            product_id=product_id,
            product_name=product_name,
            product_sku=product_sku,
            quantity=quantity,
            price_at_order=format_money(price),
            subtotal=format_money(line_subtotal(quantity, price)),
        )

    def to_snapshot(self) -> dict:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "product_sku": self.product_sku,
            "quantity": self.quantity,
            "price": self.price_at_order,
            "subtotal": self.subtotal,
        }


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Integer(required=True)
    status = String(choices=OrderStatus, default=INITIAL_STATUS.value)
    items = HasMany(OrderLineItem)
    total_amount = String(required=True, max_length=32)  # serialized Decimal
    shipping_address = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_amount_matches_line_items(self):
        if not self.items:
            return
        if to_money(self.total_amount) != money_sum(item.subtotal for item in self.items):
            raise ValidationError({"total_amount": ["Total amount must equal the sum of line item subtotals"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, line_items, shipping_address=""):
        """Create a new order in PENDING state.

        This is the only way an Order comes into existence.

        Args:
            user_id: The (already validated) user placing the order.
            line_items: OrderLineItem snapshots, in request order.
            shipping_address: Free-text delivery address.
        """
        if not line_items:
            raise ValidationError({"items": ["An order must contain at least one line item"]})

        now = datetime.now(UTC)
        total = money_sum(item.subtotal for item in line_items)

        order = cls(
            user_id=user_id,
            status=INITIAL_STATUS.value,
            items=list(line_items),
            total_amount=format_money(total),
            shipping_address=shipping_address or "",
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                user_id=user_id,
                items=json.dumps([item.to_snapshot() for item in line_items]),
                total_amount=format_money(total),
                shipping_address=shipping_address or "",
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def cancel(self):
        """Cancel the order. Only allowed before confirmation."""
        previous = OrderStatus(self.status)
        target = assert_can_cancel(previous)

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                previous_status=previous.value,
                cancelled_at=now,
            )
        )

    def advance_to(self, target_status):
        """Move the order to ``target_status`` if the state machine allows it.

        Cancellation is routed through ``cancel`` so its narrower guard applies.
        """
        target = target_status if isinstance(target_status, OrderStatus) else OrderStatus(target_status)
        if target == OrderStatus.CANCELLED:
            self.cancel()
            return

        previous = OrderStatus(self.status)
        assert_can_transition(previous, target)

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous.value,
                new_status=target.value,
                changed_at=now,
            )
        )

    def mark_failed(self):
        """Mark the order as failed (e.g. reservation or payment could not complete)."""
        self.advance_to(OrderStatus.FAILED)
