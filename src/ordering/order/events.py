"""Domain events for the Order aggregate.

Events are immutable facts raised by the aggregate and recorded by Protean
when the aggregate is persisted. They form the in-process audit trail of an
order; the messages sent to the inventory owner are separate contracts
(see shared.events.ordering).
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A new order was placed after every line item was verified available."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    user_id = Integer(required=True)
    items = Text(required=True)  # JSON: list of line item snapshots
    total_amount = String(required=True)  # serialized Decimal
    shipping_address = String(max_length=500)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """An order was cancelled before confirmation; reserved stock must be released."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """The order moved along its lifecycle (reservation, payment, shipping, failure)."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
