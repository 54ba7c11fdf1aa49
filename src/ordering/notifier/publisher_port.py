"""Event publisher port: abstract interface for the messaging layer."""

from abc import ABC, abstractmethod


class PublishFailed(Exception):
    """The messaging layer did not accept the message."""


class EventPublisher(ABC):
    """Abstract interface for event publisher adapters."""

    @abstractmethod
    def publish(self, topic: str, key: str, message: str) -> None:
        """Make a single attempt to publish ``message`` on ``topic``.

        Raises:
            PublishFailed: the message was not accepted.
        """
        ...
