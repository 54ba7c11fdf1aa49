"""Tests for the event notifier and its publisher adapters."""

import json

import pytest
import redis
from ordering.notifier.fake_publisher import FakeEventPublisher
from ordering.notifier.notifier import OrderEventNotifier
from ordering.notifier.publisher_port import PublishFailed
from ordering.notifier.redis_publisher import RedisEventPublisher
from ordering.order.order import Order, OrderLineItem


class StubRedis:
    """Records publish calls; optionally fails like an unreachable server."""

    def __init__(self, error=None):
        self.error = error
        self.published = []
        self.closed = False

    def publish(self, channel, message):
        if self.error:
            raise self.error
        self.published.append((channel, message))
        return 1

    def close(self):
        self.closed = True


def _order():
    return Order.create(
        user_id=1,
        line_items=[OrderLineItem.snapshot(1, "Laptop", "LAP-001", 1, "999.99")],
    )


class TestRedisEventPublisher:
    def test_publishes_on_channel(self):
        client = StubRedis()
        publisher = RedisEventPublisher("redis://unused", client=client)

        publisher.publish("order-events", "ORDER_CANCELLED", '{"orderId": "o-1"}')

        assert client.published == [("order-events", '{"orderId": "o-1"}')]

    def test_redis_error_becomes_publish_failed(self):
        publisher = RedisEventPublisher("redis://unused", client=StubRedis(error=redis.ConnectionError("refused")))

        with pytest.raises(PublishFailed):
            publisher.publish("order-events", "ORDER_CREATED", "{}")

    def test_close(self):
        client = StubRedis()
        RedisEventPublisher("redis://unused", client=client).close()
        assert client.closed is True


class TestOrderEventNotifier:
    def test_order_created_delivered(self):
        publisher = FakeEventPublisher()
        order = _order()

        assert OrderEventNotifier(publisher).notify_order_created(order) is True
        assert publisher.messages("ORDER_CREATED")[0]["orderId"] == str(order.id)

    def test_order_cancelled_delivered(self):
        publisher = FakeEventPublisher()

        assert OrderEventNotifier(publisher, topic="orders").notify_order_cancelled("o-7") is True
        assert publisher.published[0]["topic"] == "orders"
        assert publisher.messages("ORDER_CANCELLED") == [{"orderId": "o-7", "eventType": "ORDER_CANCELLED"}]

    def test_publish_failure_reported_not_raised(self):
        publisher = FakeEventPublisher()
        publisher.configure(should_succeed=False)

        assert OrderEventNotifier(publisher).notify_order_created(_order()) is False
        assert OrderEventNotifier(publisher).notify_order_cancelled("o-1") is False

    def test_redis_failure_reported_not_raised(self):
        client = StubRedis(error=redis.TimeoutError("timed out"))
        notifier = OrderEventNotifier(RedisEventPublisher("redis://unused", client=client))

        assert notifier.notify_order_cancelled("o-1") is False

    def test_redis_message_body(self):
        client = StubRedis()
        order = _order()

        OrderEventNotifier(RedisEventPublisher("redis://unused", client=client)).notify_order_created(order)

        channel, message = client.published[0]
        assert channel == "order-events"
        assert json.loads(message)["eventType"] == "ORDER_CREATED"
