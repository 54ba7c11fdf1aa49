"""Runtime settings for the ordering service, read from the environment.

Adapters default to the in-memory fakes so the domain runs without any
external service. Deployments switch them via environment variables, in the
same way CARRIER_ADAPTER selects the shipping carrier.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class OrderingSettings:
    inventory_adapter: str = "fake"
    inventory_service_url: str = "http://localhost:8082"
    inventory_timeout_seconds: float = 5.0

    user_directory_adapter: str = "fake"
    user_service_url: str = "http://localhost:8081"
    user_timeout_seconds: float = 5.0

    event_publisher: str = "fake"
    redis_url: str = "redis://localhost:6379"
    order_events_channel: str = "order-events"
    publish_timeout_seconds: float = 2.0

    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> "OrderingSettings":
        return cls(
            inventory_adapter=os.environ.get("INVENTORY_ADAPTER", cls.inventory_adapter),
            inventory_service_url=os.environ.get("INVENTORY_SERVICE_URL", cls.inventory_service_url),
            inventory_timeout_seconds=_env_float("INVENTORY_TIMEOUT_SECONDS", cls.inventory_timeout_seconds),
            user_directory_adapter=os.environ.get("USER_DIRECTORY_ADAPTER", cls.user_directory_adapter),
            user_service_url=os.environ.get("USER_SERVICE_URL", cls.user_service_url),
            user_timeout_seconds=_env_float("USER_TIMEOUT_SECONDS", cls.user_timeout_seconds),
            event_publisher=os.environ.get("EVENT_PUBLISHER", cls.event_publisher),
            redis_url=os.environ.get("REDIS_URL", cls.redis_url),
            order_events_channel=os.environ.get("ORDER_EVENTS_CHANNEL", cls.order_events_channel),
            publish_timeout_seconds=_env_float("PUBLISH_TIMEOUT_SECONDS", cls.publish_timeout_seconds),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level),
            log_json=_env_bool("LOG_JSON", cls.log_json),
        )
