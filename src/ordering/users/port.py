"""User directory port: existence lookup against the user service.

Users are owned elsewhere. Ordering references them by id only and never
copies or caches user records.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    user_id: int
    username: str | None = None
    email: str | None = None


class UserDirectory(ABC):
    """Abstract interface for user lookup adapters."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user, or None if no such user exists.

        Raises:
            UserDirectoryUnavailable: the lookup could not be completed.
        """
        ...
