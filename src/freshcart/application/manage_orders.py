"""Application services: order queries and status changes."""

from __future__ import annotations

import logging

from freshcart.application.dto import OrderDTO
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.order import OrderStatus
from freshcart.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_order(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        orders = sorted(self._order_repo.list_all(), key=lambda o: o.created_at, reverse=True)
        if customer_id:
            orders = [o for o in orders if o.customer_id == customer_id]
        if status is not None:
            orders = [o for o in orders if o.status is status]
        return [OrderDTO.from_order(o) for o in orders]


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            new_status = OrderStatus(status.lower())
        except ValueError:
            raise ValidationError(f"Unknown order status '{status}'")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)
        logger.info("Order #%s: %s -> %s", order_id, previous.value, new_status.value)
        return OrderDTO.from_order(order)
