"""User directory factory.

Uses InMemoryUserDirectory by default. In production, set
USER_DIRECTORY_ADAPTER=http and USER_SERVICE_URL.
"""

from ordering.config import OrderingSettings
from ordering.users.port import UserDirectory


def build_user_directory(settings: OrderingSettings) -> UserDirectory:
    """Return a new user directory for the configured backend."""
    adapter = settings.user_directory_adapter
    if adapter == "fake":
        from ordering.users.fake_adapter import InMemoryUserDirectory

        return InMemoryUserDirectory()
    elif adapter == "http":
        from ordering.users.http_adapter import HttpUserDirectory

        return HttpUserDirectory(
            base_url=settings.user_service_url,
            timeout=settings.user_timeout_seconds,
        )
    else:
        raise ValueError(f"Unknown user directory adapter: {adapter}")
