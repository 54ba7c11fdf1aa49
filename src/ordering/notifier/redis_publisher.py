"""Redis event publisher: publishes order events on a Redis Pub/Sub channel.

Pub/Sub is fire-and-forget: a subscriber that is down misses the message,
which matches the at-most-once contract of the notifier. Redis channels have
no message key, so the ``eventType`` inside the payload plays that role.
"""

import redis

from ordering.notifier.publisher_port import EventPublisher, PublishFailed


class RedisEventPublisher(EventPublisher):
    def __init__(self, redis_url: str, timeout: float = 2.0, client: redis.Redis | None = None):
        self._client = client or redis.Redis.from_url(
            redis_url,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )

    def publish(self, topic: str, key: str, message: str) -> None:
        try:
            self._client.publish(topic, message)
        except redis.RedisError as exc:
            raise PublishFailed(f"{key} not published to {topic}: {exc}") from exc

    def close(self):
        self._client.close()
