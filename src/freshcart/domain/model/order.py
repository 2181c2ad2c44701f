"""Order aggregate.

An Order is what a checked-out cart becomes. Each item keeps the price
the shopper saw in the cart (``price_at_time``), so later catalog price
changes never rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.cart import CartLine
from freshcart.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    product_name: str
    quantity: Quantity
    price_at_time: Money

    @property
    def line_total(self) -> Money:
        return self.price_at_time * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.from_cart()`` for new orders. ``__init__`` stays simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    items: list[OrderItem]
    customer_id: str | None = None
    phone: str | None = None
    delivery_address: str = ""
    order_number: str = ""
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def from_cart(
        lines: Iterable[CartLine],
        customer_id: str | None = None,
        phone: str | None = None,
        delivery_address: str = "",
        order_number: str = "",
    ) -> Order:
        items = [
            OrderItem(
                product_id=line.id,
                product_name=line.name,
                quantity=Quantity(line.quantity),
                price_at_time=line.unit_price,
            )
            for line in lines
        ]
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=None,
            items=items,
            customer_id=customer_id,
            phone=phone,
            delivery_address=delivery_address,
            order_number=order_number,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        if new_status == self.status:
            return
        if new_status not in _TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        currency = self.items[0].price_at_time.currency if self.items else "USD"
        return Money.total((item.line_total for item in self.items), currency)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
