"""Event publisher factory.

Uses FakeEventPublisher by default. In production, set EVENT_PUBLISHER=redis
and REDIS_URL.
"""

from ordering.config import OrderingSettings
from ordering.notifier.notifier import OrderEventNotifier
from ordering.notifier.publisher_port import EventPublisher


def build_publisher(settings: OrderingSettings) -> EventPublisher:
    """Return a new event publisher for the configured backend."""
    publisher = settings.event_publisher
    if publisher == "fake":
        from ordering.notifier.fake_publisher import FakeEventPublisher

        return FakeEventPublisher()
    elif publisher == "redis":
        from ordering.notifier.redis_publisher import RedisEventPublisher

        return RedisEventPublisher(
            redis_url=settings.redis_url,
            timeout=settings.publish_timeout_seconds,
        )
    else:
        raise ValueError(f"Unknown event publisher: {publisher}")


def build_notifier(settings: OrderingSettings, publisher: EventPublisher | None = None) -> OrderEventNotifier:
    return OrderEventNotifier(
        publisher=publisher or build_publisher(settings),
        topic=settings.order_events_channel,
    )
