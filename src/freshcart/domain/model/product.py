"""Product aggregate.

Products live independently of carts and orders. Prices and stock levels
change over time; carts and orders keep their own price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.cart import CartCandidate
from freshcart.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 10


class StockStatus(Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


def stock_status_for(
    quantity: int, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
) -> StockStatus:
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < low_stock_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    stock_quantity: int = 0
    description: str = ""
    category: str | None = None
    unit: str | None = None
    image_url: str | None = None
    organic: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Lines already in a cart and existing orders keep the price they
        captured.
        """
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity

    def stock_status(
        self, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> StockStatus:
        return stock_status_for(self.stock_quantity, low_stock_threshold)

    def to_cart_candidate(
        self, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> CartCandidate:
        return CartCandidate(
            id=self.id,
            name=self.name,
            unit_price=self.price,
            status=self.stock_status(low_stock_threshold).value,
            image_url=self.image_url,
        )
