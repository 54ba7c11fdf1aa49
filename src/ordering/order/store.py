"""Order Store port and its Protean-backed adapter.

The orchestrator only sees ``OrderStore``. The default adapter persists
through the domain's repository, so whichever database provider Protean is
configured with (in-memory for development and tests) holds the orders.
"""

from abc import ABC, abstractmethod

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order
from ordering.order.repository import OrderRepository


class OrderStore(ABC):
    """Abstract interface for order persistence. Each call is atomic."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist the order together with its line items."""
        ...

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None: ...

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Order]: ...

    @abstractmethod
    def find_all(self) -> list[Order]: ...


class RepositoryOrderStore(OrderStore):
    """Order Store backed by the Protean repository for Order.

    Must be used inside an active domain context.
    """

    @staticmethod
    def _repo() -> OrderRepository:
        return current_domain.repository_for(Order)

    def save(self, order: Order) -> Order:
        self._repo().add(order)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        try:
            return self._repo().get(order_id)
        except ObjectNotFoundError:
            return None

    def find_by_user_id(self, user_id: int) -> list[Order]:
        return self._repo().find_by_user(user_id)

    def find_all(self) -> list[Order]:
        return self._repo().find_all()
