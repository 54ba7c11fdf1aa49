"""Application tests for order lookups."""


class TestGetOrder:
    def test_get_existing_order(self, orchestrator):
        order = orchestrator.place_order(1, [{"product_id": 1, "quantity": 1}])

        found = orchestrator.get_order(order.id)

        assert found.id == order.id
        assert found.items[0].product_name == "Laptop"

    def test_get_missing_order_returns_none(self, orchestrator):
        assert orchestrator.get_order("missing") is None

    def test_repeated_reads_are_identical(self, orchestrator):
        order = orchestrator.place_order(1, [{"product_id": 2, "quantity": 2}])

        first = orchestrator.get_order(order.id)
        second = orchestrator.get_order(order.id)

        assert first.status == second.status
        assert first.total_amount == second.total_amount
        assert [i.to_snapshot() for i in first.items] == [i.to_snapshot() for i in second.items]


class TestListOrders:
    def test_orders_for_user(self, orchestrator):
        first = orchestrator.place_order(1, [{"product_id": 1, "quantity": 1}])
        second = orchestrator.place_order(1, [{"product_id": 2, "quantity": 1}])
        orchestrator.place_order(2, [{"product_id": 2, "quantity": 1}])

        orders = orchestrator.list_orders_for_user(1)

        assert {o.id for o in orders} == {first.id, second.id}

    def test_orders_for_user_without_orders(self, orchestrator):
        assert orchestrator.list_orders_for_user(1) == []

    def test_orders_for_unknown_user_is_empty(self, orchestrator):
        assert orchestrator.list_orders_for_user(404) == []

    def test_list_all_orders(self, orchestrator):
        orchestrator.place_order(1, [{"product_id": 1, "quantity": 1}])
        orchestrator.place_order(2, [{"product_id": 2, "quantity": 1}])

        assert len(orchestrator.list_all_orders()) == 2

    def test_cancelled_orders_still_listed(self, orchestrator):
        order = orchestrator.place_order(1, [{"product_id": 1, "quantity": 1}])
        orchestrator.cancel_order(order.id)

        assert [o.status for o in orchestrator.list_orders_for_user(1)] == ["Cancelled"]
