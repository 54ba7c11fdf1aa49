"""Order orchestrator: places and cancels orders across the inventory boundary.

Placement:
    1. Resolve the user (UserNotFound before any side effect)
    2. Verify availability item by item, in request order; the first
       unavailable item or transport failure aborts, nothing is persisted
    3. Build the Order and persist it through the Order Store
    4. Publish OrderCreated (best effort, failures never reach the caller)

Cancellation:
    load → cancellation guard → persist CANCELLED → publish OrderCancelled

The availability answer is advisory: stock is reserved later by the
inventory owner, so two concurrent orders can both be told "available" for
the same last unit. This context cannot lock remote stock.

Cancellation and lifecycle updates are a guarded read-then-write with no
locking; a concurrent cancel and status update on one order can lose an update.
"""

from dataclasses import dataclass

import structlog
from protean.exceptions import ValidationError

from ordering.errors import (
    ErrorKind,
    InsufficientStock,
    InventoryUnavailable,
    OrderingError,
    OrderNotFound,
    UserNotFound,
)
from ordering.inventory.verifier import AvailabilityVerifier
from ordering.notifier.notifier import OrderEventNotifier
from ordering.order.builder import LineItemRequest, build_order
from ordering.order.lifecycle import OrderStatus
from ordering.order.order import Order
from ordering.order.store import OrderStore
from ordering.users.port import UserDirectory

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderResult:
    """Outcome of a placement or cancellation, without exception control flow."""

    success: bool
    order: Order | None = None
    error: OrderingError | None = None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def retryable(self) -> bool:
        return self.error is not None and self.error.retryable


def _as_line_items(items) -> list[LineItemRequest]:
    if not items:
        raise ValidationError({"items": ["An order must contain at least one item"]})
    return [item if isinstance(item, LineItemRequest) else LineItemRequest.from_dict(item) for item in items]


class OrderOrchestrator:
    """Composes verifier, builder, state machine, store and notifier.

    All collaborators are injected; the orchestrator keeps no state of its own
    between calls.
    """

    def __init__(
        self,
        users: UserDirectory,
        verifier: AvailabilityVerifier,
        store: OrderStore,
        notifier: OrderEventNotifier,
    ):
        self._users = users
        self._verifier = verifier
        self._store = store
        self._notifier = notifier

    # -------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------
    def place_order(self, user_id: int, items, shipping_address: str = "") -> Order:
        """Place an order for ``items`` (LineItemRequest or {product_id, quantity} dicts).

        Raises:
            UserNotFound, InsufficientStock, InventoryUnavailable,
            UserDirectoryUnavailable, ValidationError
        """
        line_items = _as_line_items(items)
        logger.info("Placing order", user_id=user_id, item_count=len(line_items))

        if self._users.find_by_id(user_id) is None:
            logger.warning("Order rejected, unknown user", user_id=user_id)
            raise UserNotFound(user_id)

        availability = []
        for requested in line_items:
            try:
                result = self._verifier.check_availability(requested.product_id, requested.quantity)
            except InventoryUnavailable as exc:
                logger.error(
                    "Order aborted, inventory unavailable",
                    user_id=user_id,
                    product_id=requested.product_id,
                    error=str(exc),
                )
                raise

            if not result.available:
                logger.warning(
                    "Order aborted, insufficient stock",
                    user_id=user_id,
                    product_id=result.product_id,
                    requested=requested.quantity,
                    available=result.available_quantity,
                )
                raise InsufficientStock(
                    product_id=result.product_id,
                    product_name=result.product_name,
                    requested=requested.quantity,
                    available=result.available_quantity or 0,
                )
            availability.append(result)

        order = build_order(user_id, line_items, availability, shipping_address=shipping_address)
        order = self._store.save(order)
        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=user_id,
            total_amount=order.total_amount,
        )

        self._notifier.notify_order_created(order)
        return order

    def try_place_order(self, user_id: int, items, shipping_address: str = "") -> OrderResult:
        """Like ``place_order`` but returns an OrderResult instead of raising domain errors."""
        try:
            order = self.place_order(user_id, items, shipping_address=shipping_address)
        except OrderingError as exc:
            return OrderResult(success=False, error=exc)
        return OrderResult(success=True, order=order)

    # -------------------------------------------------------------------
    # Cancellation (compensation)
    # -------------------------------------------------------------------
    def cancel_order(self, order_id) -> Order:
        """Cancel an order that has not been confirmed yet.

        Raises:
            OrderNotFound, InvalidStateTransition
        """
        logger.info("Cancelling order", order_id=str(order_id))
        order = self._load(order_id)

        try:
            order.cancel()
        except OrderingError:
            logger.warning("Order cancellation rejected", order_id=str(order_id), status=order.status)
            raise

        order = self._store.save(order)
        logger.info("Order cancelled", order_id=str(order_id))

        self._notifier.notify_order_cancelled(order.id)
        return order

    def try_cancel_order(self, order_id) -> OrderResult:
        """Like ``cancel_order`` but returns an OrderResult instead of raising domain errors."""
        try:
            order = self.cancel_order(order_id)
        except OrderingError as exc:
            return OrderResult(success=False, error=exc)
        return OrderResult(success=True, order=order)

    # -------------------------------------------------------------------
    # Lifecycle updates from downstream event consumers
    # -------------------------------------------------------------------
    def update_order_status(self, order_id, new_status) -> Order:
        """Advance an order along its lifecycle (reservation, payment, shipping, failure).

        Cancellation has its own guard and notification; use ``cancel_order``.
        """
        try:
            target = new_status if isinstance(new_status, OrderStatus) else OrderStatus(new_status)
        except ValueError as exc:
            raise ValidationError({"status": [f"Unknown order status: {new_status!r}"]}) from exc
        if target == OrderStatus.CANCELLED:
            raise ValidationError({"status": ["Use cancel_order to cancel an order"]})

        order = self._load(order_id)
        previous = order.status
        order.advance_to(target)
        order = self._store.save(order)
        logger.info(
            "Order status updated",
            order_id=str(order_id),
            previous_status=previous,
            new_status=target.value,
        )
        return order

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get_order(self, order_id) -> Order | None:
        return self._store.find_by_id(order_id)

    def list_orders_for_user(self, user_id: int) -> list[Order]:
        return self._store.find_by_user_id(user_id)

    def list_all_orders(self) -> list[Order]:
        return self._store.find_all()

    def _load(self, order_id) -> Order:
        order = self._store.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order
