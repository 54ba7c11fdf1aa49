"""Cross-domain event contracts for Ordering events.

These are the messages the Inventory domain consumes to reserve stock when an
order is created and to release it when an order is cancelled. They are
external contracts (camelCase on the wire), separate from the Protean domain
events in src/ordering/order/events.py.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ORDER_CREATED = "ORDER_CREATED"
ORDER_CANCELLED = "ORDER_CANCELLED"


class OrderItemPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: int = Field(alias="productId")
    product_name: str = Field(alias="productName")
    product_sku: str = Field(alias="productSku")
    quantity: int
    price: Decimal


class OrderCreated(BaseModel):
    """An order was placed; the inventory owner should reserve each line item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order_id: str = Field(alias="orderId")
    user_id: int = Field(alias="userId")
    items: list[OrderItemPayload]
    total_amount: Decimal = Field(alias="totalAmount")
    shipping_address: str = Field(default="", alias="shippingAddress")
    created_at: datetime = Field(alias="createdAt")
    event_type: Literal["ORDER_CREATED"] = Field(default=ORDER_CREATED, alias="eventType")

    @classmethod
    def from_order(cls, order) -> "OrderCreated":
        return cls(
            order_id=str(order.id),
            user_id=order.user_id,
            items=[
                OrderItemPayload(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    product_sku=item.product_sku,
                    quantity=item.quantity,
                    price=Decimal(item.price_at_order),
                )
                for item in order.items
            ],
            total_amount=Decimal(order.total_amount),
            shipping_address=order.shipping_address or "",
            created_at=order.created_at,
        )


class OrderCancelled(BaseModel):
    """An order was cancelled; the inventory owner should release its reservation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order_id: str = Field(alias="orderId")
    event_type: Literal["ORDER_CANCELLED"] = Field(default=ORDER_CANCELLED, alias="eventType")
