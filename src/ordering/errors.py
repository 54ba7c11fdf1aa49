"""Domain errors raised by order placement and cancellation.

Every error carries a ``kind``: business failures are final answers and must
not be retried; transport failures mean a collaborator could not be reached
and the caller may retry with backoff at its own discretion.
"""

from enum import Enum


class ErrorKind(Enum):
    BUSINESS = "Business"
    TRANSPORT = "Transport"


class OrderingError(Exception):
    kind = ErrorKind.BUSINESS

    @property
    def retryable(self) -> bool:
        return self.kind == ErrorKind.TRANSPORT


class UserNotFound(OrderingError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User not found with ID: {user_id}")


class OrderNotFound(OrderingError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order not found with ID: {order_id}")


class InsufficientStock(OrderingError):
    """A requested line item cannot be satisfied by current stock."""

    def __init__(self, product_id, product_name, requested, available):
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name or product_id}. "
            f"Available: {available}, Requested: {requested}"
        )


class InvalidStateTransition(OrderingError):
    """The order's current status does not allow the attempted action."""

    def __init__(self, current_status, action):
        self.current_status = current_status
        self.action = action
        super().__init__(f"Cannot {action} order in {current_status} state")


class InventoryUnavailable(OrderingError):
    """The inventory capability could not be reached or answered garbage."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, product_id, reason):
        self.product_id = product_id
        self.reason = reason
        super().__init__(f"Failed to check product availability for {product_id}: {reason}")


class UserDirectoryUnavailable(OrderingError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, user_id, reason):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"Failed to look up user {user_id}: {reason}")
