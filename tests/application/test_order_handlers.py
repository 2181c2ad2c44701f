"""Integration tests for the order query and status use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from freshcart.application.manage_orders import (
    ListOrdersHandler,
    ShowOrderHandler,
    UpdateOrderStatusHandler,
)
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.cart import CartLine
from freshcart.domain.model.order import Order, OrderStatus
from freshcart.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _repo() -> FakeOrderRepository:
    repo = FakeOrderRepository()
    for i, customer in enumerate(["c1", "c2", "c1"]):
        order = Order.from_cart(
            [CartLine(id="1", name="Apples", unit_price=Money.of("4.99"), quantity=i + 1)],
            customer_id=customer,
            order_number=f"00000{i}",
        )
        order.created_at = T0 + timedelta(hours=i)
        repo.save(order)
    return repo


class TestShowOrder:

    def test_show(self):
        dto = ShowOrderHandler(_repo()).handle(2)
        assert dto.customer_id == "c2"
        assert dto.total == "$9.98"
        assert dto.items[0].unit_price == "$4.99"

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="#42 not found"):
            ShowOrderHandler(_repo()).handle(42)


class TestListOrders:

    def test_newest_first(self):
        assert [o.id for o in ListOrdersHandler(_repo()).handle()] == [3, 2, 1]

    def test_by_customer(self):
        assert [o.id for o in ListOrdersHandler(_repo()).handle(customer_id="c1")] == [3, 1]

    def test_by_status(self):
        repo = _repo()
        UpdateOrderStatusHandler(repo).handle(1, "processing")
        result = ListOrdersHandler(repo).handle(status=OrderStatus.PROCESSING)
        assert [o.id for o in result] == [1]


class TestUpdateOrderStatus:

    def test_case_insensitive_status(self):
        dto = UpdateOrderStatusHandler(_repo()).handle(1, "CANCELLED")
        assert dto.status == "cancelled"

    def test_unknown_status(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            UpdateOrderStatusHandler(_repo()).handle(1, "shipped")

    def test_illegal_transition(self):
        with pytest.raises(ValidationError, match="Cannot move order"):
            UpdateOrderStatusHandler(_repo()).handle(1, "completed")
