"""Event notifier: tells the inventory owner about committed order changes.

Delivery is best-effort and at-most-once: one publish attempt is made after
the local commit. A failed attempt is logged and reported as ``False``; it is
never raised, so order placement and cancellation stay available while the
messaging layer is degraded. Until a transactional outbox is in place, a
failed OrderCreated leaves a PENDING order for which no reservation is ever
requested.
"""

import structlog
from shared.events.ordering import ORDER_CANCELLED, ORDER_CREATED, OrderCancelled, OrderCreated

from ordering.notifier.publisher_port import EventPublisher

logger = structlog.get_logger(__name__)


class OrderEventNotifier:
    def __init__(self, publisher: EventPublisher, topic: str = "order-events"):
        self._publisher = publisher
        self._topic = topic

    def notify_order_created(self, order) -> bool:
        """Publish OrderCreated for a persisted order. Returns delivery success."""
        return self._publish(str(order.id), ORDER_CREATED, lambda: OrderCreated.from_order(order))

    def notify_order_cancelled(self, order_id) -> bool:
        """Publish OrderCancelled for a persisted cancellation. Returns delivery success."""
        return self._publish(str(order_id), ORDER_CANCELLED, lambda: OrderCancelled(order_id=str(order_id)))

    def _publish(self, order_id: str, event_type: str, build_message) -> bool:
        try:
            message = build_message()
            self._publisher.publish(self._topic, event_type, message.model_dump_json(by_alias=True))
        except Exception as e:
            logger.error(
                "Failed to publish order event",
                order_id=order_id,
                event_type=event_type,
                topic=self._topic,
                error=str(e),
            )
            return False

        logger.info("Order event published", order_id=order_id, event_type=event_type, topic=self._topic)
        return True
