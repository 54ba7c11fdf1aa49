"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    """Order persistence with the queries the ordering workflow needs.

    The base repository provides ``add`` and ``get``.
    """

    def find_by_user(self, user_id: int) -> list[Order]:
        """Orders placed by ``user_id``, oldest first."""
        orders = self._dao.query.filter(user_id=user_id).all().items
        return sorted(orders, key=lambda order: order.created_at)

    def find_all(self) -> list[Order]:
        """Every order, oldest first."""
        orders = self._dao.query.all().items
        return sorted(orders, key=lambda order: order.created_at)
