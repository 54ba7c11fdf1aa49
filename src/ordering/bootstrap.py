"""Composition root: wires the orchestrator's collaborators from settings.

Nothing here is cached at module level: every call builds a fresh set of
adapters, and callers (an API process, a worker, a test) own the result.
"""

from ordering.config import OrderingSettings
from ordering.domain import ordering
from ordering.inventory import build_inventory
from ordering.inventory.port import InventoryPort
from ordering.inventory.verifier import AvailabilityVerifier
from ordering.notifier import build_notifier
from ordering.notifier.publisher_port import EventPublisher
from ordering.order.orchestrator import OrderOrchestrator
from ordering.order.store import OrderStore, RepositoryOrderStore
from ordering.users import build_user_directory
from ordering.users.port import UserDirectory
from ordering.utils.logging import configure_logging


def init_domain(settings: OrderingSettings | None = None):
    """Configure logging and initialize the ordering domain. Returns the domain."""
    settings = settings or OrderingSettings.from_env()
    configure_logging(settings.log_level, json=settings.log_json)
    ordering.init()
    return ordering


def build_orchestrator(
    settings: OrderingSettings | None = None,
    *,
    users: UserDirectory | None = None,
    inventory: InventoryPort | None = None,
    store: OrderStore | None = None,
    publisher: EventPublisher | None = None,
) -> OrderOrchestrator:
    """Build an OrderOrchestrator; explicit collaborators override configuration."""
    settings = settings or OrderingSettings.from_env()
    return OrderOrchestrator(
        users=users or build_user_directory(settings),
        verifier=AvailabilityVerifier(inventory or build_inventory(settings)),
        store=store or RepositoryOrderStore(),
        notifier=build_notifier(settings, publisher=publisher),
    )
