"""Order aggregate builder: turns verified line items into an Order.

Pure and deterministic: no I/O, no clock other than the aggregate's own
timestamps. The request only contributes product ids and quantities; the
authoritative name, SKU and price come from the availability answers.
"""

from dataclasses import dataclass

from protean.exceptions import ValidationError

from ordering.order.order import Order, OrderLineItem


@dataclass(frozen=True)
class LineItemRequest:
    """A requested product and quantity, as received from the caller."""

    product_id: int
    quantity: int

    def __post_init__(self):
        if isinstance(self.product_id, bool) or not isinstance(self.product_id, int) or self.product_id < 1:
            raise ValidationError({"product_id": ["Product ID must be a positive integer"]})
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a positive integer"]})

    @classmethod
    def from_dict(cls, data: dict) -> "LineItemRequest":
        try:
            return cls(product_id=data["product_id"], quantity=data["quantity"])
        except KeyError as exc:
            raise ValidationError({exc.args[0]: ["is required"]}) from exc


def build_order(user_id, items, availability, shipping_address=""):
    """Build a PENDING Order from requested items and their availability answers.

    ``items`` and ``availability`` correspond 1:1 and in order. A mismatch is
    a programming error and raises ValueError.
    """
    if len(items) != len(availability):
        raise ValueError(f"Expected {len(items)} availability results, got {len(availability)}")

    line_items = []
    for requested, answer in zip(items, availability, strict=True):
        if answer.product_id != requested.product_id:
            raise ValueError(
                f"Availability result for product {answer.product_id} does not match "
                f"requested product {requested.product_id}"
            )
        line_items.append(
            OrderLineItem.snapshot(
                product_id=answer.product_id,
                product_name=answer.product_name,
                product_sku=answer.product_sku,
                quantity=requested.quantity,
                price=answer.current_price,
            )
        )

    return Order.create(
        user_id=user_id,
        line_items=line_items,
        shipping_address=shipping_address,
    )
