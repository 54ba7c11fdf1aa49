"""Order lifecycle state machine.

Happy path (each step driven by an event consumer outside this context):
    PENDING → INVENTORY_RESERVED → PAYMENT_PENDING → CONFIRMED → SHIPPED → DELIVERED

CANCELLED and FAILED are terminal and absorbing. FAILED is reachable from any
non-terminal state; CANCELLED only from PENDING, INVENTORY_RESERVED and
PAYMENT_PENDING. Orders that are CONFIRMED or later need a refund/return flow
instead, which is not handled here.
"""

from enum import Enum

from ordering.errors import InvalidStateTransition


class OrderStatus(Enum):
    PENDING = "Pending"
    INVENTORY_RESERVED = "Inventory_Reserved"
    PAYMENT_PENDING = "Payment_Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    FAILED = "Failed"


INITIAL_STATUS = OrderStatus.PENDING

TERMINAL_STATES = frozenset(
    {
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
        OrderStatus.FAILED,
    }
)

# States from which cancellation is allowed
CANCELLABLE_STATES = frozenset(
    {
        OrderStatus.PENDING,
        OrderStatus.INVENTORY_RESERVED,
        OrderStatus.PAYMENT_PENDING,
    }
)

# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.INVENTORY_RESERVED, OrderStatus.CANCELLED, OrderStatus.FAILED},
    OrderStatus.INVENTORY_RESERVED: {OrderStatus.PAYMENT_PENDING, OrderStatus.CANCELLED, OrderStatus.FAILED},
    OrderStatus.PAYMENT_PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED, OrderStatus.FAILED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.FAILED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.FAILED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
    OrderStatus.FAILED: set(),  # Terminal
}


def _as_status(status) -> OrderStatus:
    return status if isinstance(status, OrderStatus) else OrderStatus(status)


def is_terminal(status) -> bool:
    return _as_status(status) in TERMINAL_STATES


def allowed_transitions(status) -> frozenset:
    return frozenset(_VALID_TRANSITIONS[_as_status(status)])


def can_transition(current, target) -> bool:
    return _as_status(target) in _VALID_TRANSITIONS[_as_status(current)]


def can_cancel(current) -> bool:
    return _as_status(current) in CANCELLABLE_STATES


def assert_can_transition(current, target) -> OrderStatus:
    """Validate ``current → target`` and return the target status.

    Raises InvalidStateTransition carrying the current status otherwise.
    """
    current, target = _as_status(current), _as_status(target)
    if not can_transition(current, target):
        raise InvalidStateTransition(current.value, f"transition to {target.value}")
    return target


def assert_can_cancel(current) -> OrderStatus:
    current = _as_status(current)
    if not can_cancel(current):
        raise InvalidStateTransition(current.value, "cancel")
    return OrderStatus.CANCELLED
