import pytest
from ordering.bootstrap import build_orchestrator
from ordering.config import OrderingSettings
from ordering.inventory.fake_adapter import FakeInventory
from ordering.notifier.fake_publisher import FakeEventPublisher
from ordering.users.fake_adapter import InMemoryUserDirectory
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        # Clear all databases so orders never leak between tests
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def inventory():
    fake = FakeInventory()
    fake.add_product(1, name="Laptop", sku="LAP-001", price="999.99", stock=10)
    fake.add_product(2, name="Mouse", sku="MOU-001", price="25.50", stock=100)
    fake.add_product(3, name="Keyboard", sku="KEY-001", price="75.00", stock=2)
    return fake


@pytest.fixture()
def users():
    directory = InMemoryUserDirectory()
    directory.register(1, username="alice", email="alice@example.com")
    directory.register(2, username="bob", email="bob@example.com")
    return directory


@pytest.fixture()
def publisher():
    return FakeEventPublisher()


@pytest.fixture()
def orchestrator(users, inventory, publisher):
    return build_orchestrator(
        OrderingSettings(),
        users=users,
        inventory=inventory,
        publisher=publisher,
    )
