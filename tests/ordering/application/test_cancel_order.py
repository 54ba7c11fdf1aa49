"""Application tests for order cancellation (compensation)."""

import pytest
from ordering.errors import InvalidStateTransition, OrderNotFound
from ordering.order.order import OrderStatus
from shared.events.ordering import ORDER_CANCELLED


def _place(orchestrator):
    return orchestrator.place_order(1, [{"product_id": 1, "quantity": 1}])


def _advance(orchestrator, order_id, *statuses):
    for status in statuses:
        orchestrator.update_order_status(order_id, status)


class TestCancelOrder:
    def test_cancel_pending_order(self, orchestrator):
        order = _place(orchestrator)

        cancelled = orchestrator.cancel_order(order.id)

        assert cancelled.status == OrderStatus.CANCELLED.value
        assert orchestrator.get_order(order.id).status == OrderStatus.CANCELLED.value

    def test_publishes_order_cancelled(self, orchestrator, publisher):
        order = _place(orchestrator)
        publisher.reset()

        orchestrator.cancel_order(order.id)

        assert publisher.published == [
            {
                "topic": "order-events",
                "key": ORDER_CANCELLED,
                "message": {"orderId": str(order.id), "eventType": "ORDER_CANCELLED"},
            }
        ]

    @pytest.mark.parametrize(
        "path",
        [
            (OrderStatus.INVENTORY_RESERVED,),
            (OrderStatus.INVENTORY_RESERVED, OrderStatus.PAYMENT_PENDING),
        ],
    )
    def test_cancel_before_confirmation(self, orchestrator, path):
        order = _place(orchestrator)
        _advance(orchestrator, order.id, *path)

        assert orchestrator.cancel_order(order.id).status == OrderStatus.CANCELLED.value

    def test_keeps_line_items_and_total(self, orchestrator):
        order = _place(orchestrator)

        orchestrator.cancel_order(order.id)

        stored = orchestrator.get_order(order.id)
        assert stored.total_amount == "999.99"
        assert len(stored.items) == 1


class TestCancelOrderRejections:
    @pytest.mark.parametrize(
        "path,expected",
        [
            (
                (OrderStatus.INVENTORY_RESERVED, OrderStatus.PAYMENT_PENDING, OrderStatus.CONFIRMED),
                OrderStatus.CONFIRMED,
            ),
            (
                (
                    OrderStatus.INVENTORY_RESERVED,
                    OrderStatus.PAYMENT_PENDING,
                    OrderStatus.CONFIRMED,
                    OrderStatus.SHIPPED,
                ),
                OrderStatus.SHIPPED,
            ),
            ((OrderStatus.FAILED,), OrderStatus.FAILED),
        ],
    )
    def test_cancel_rejected_after_confirmation_or_failure(self, orchestrator, publisher, path, expected):
        order = _place(orchestrator)
        _advance(orchestrator, order.id, *path)
        publisher.reset()

        with pytest.raises(InvalidStateTransition) as exc:
            orchestrator.cancel_order(order.id)

        assert exc.value.current_status == expected.value
        assert orchestrator.get_order(order.id).status == expected.value
        assert publisher.published == []

    def test_cancel_twice_rejected(self, orchestrator, publisher):
        order = _place(orchestrator)
        orchestrator.cancel_order(order.id)
        publisher.reset()

        with pytest.raises(InvalidStateTransition) as exc:
            orchestrator.cancel_order(order.id)

        assert exc.value.current_status == OrderStatus.CANCELLED.value
        assert publisher.published == []

    def test_cancel_unknown_order(self, orchestrator, publisher):
        with pytest.raises(OrderNotFound) as exc:
            orchestrator.cancel_order("does-not-exist")

        assert exc.value.order_id == "does-not-exist"
        assert publisher.published == []


class TestCancelOrderWithDegradedMessaging:
    def test_cancellation_committed_when_publish_fails(self, orchestrator, publisher):
        order = _place(orchestrator)
        publisher.configure(should_succeed=False)

        cancelled = orchestrator.cancel_order(order.id)

        assert cancelled.status == OrderStatus.CANCELLED.value
        assert orchestrator.get_order(order.id).status == OrderStatus.CANCELLED.value
