"""Fake event publisher: records published messages for testing."""

import json

from ordering.notifier.publisher_port import EventPublisher, PublishFailed


class FakeEventPublisher(EventPublisher):
    """Publisher that keeps messages in memory for test assertions."""

    def __init__(self):
        self.published: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Message broker unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Message broker unavailable"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish(self, topic: str, key: str, message: str) -> None:
        if not self.should_succeed:
            raise PublishFailed(self.failure_reason)

        self.published.append(
            {
                "topic": topic,
                "key": key,
                "message": json.loads(message),
            }
        )

    def messages(self, key: str | None = None) -> list[dict]:
        """Published message bodies, optionally only those with ``key``."""
        return [record["message"] for record in self.published if key is None or record["key"] == key]

    def reset(self):
        """Clear published messages (useful between tests)."""
        self.published.clear()
        self.should_succeed = True
        self.failure_reason = "Message broker unavailable"
