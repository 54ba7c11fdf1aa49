"""In-memory user directory for development and testing."""

from ordering.errors import UserDirectoryUnavailable
from ordering.users.port import UserDirectory, UserRecord


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, users: list[UserRecord] | None = None):
        self.users: dict[int, UserRecord] = {user.user_id: user for user in users or []}
        self.should_succeed = True
        self.failure_reason = "User service unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "User service unavailable"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def register(self, user_id: int, username: str | None = None, email: str | None = None) -> UserRecord:
        user = UserRecord(user_id=user_id, username=username, email=email)
        self.users[user_id] = user
        return user

    def find_by_id(self, user_id: int) -> UserRecord | None:
        if not self.should_succeed:
            raise UserDirectoryUnavailable(user_id, self.failure_reason)
        return self.users.get(user_id)
