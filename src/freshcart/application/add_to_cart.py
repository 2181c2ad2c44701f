"""Application service: Add To Cart use case.

Resolves a catalog product and hands its candidate to the cart store.
The price the shopper sees now is the price the line keeps.
"""

from __future__ import annotations

from freshcart.application.cart_store import CartStore
from freshcart.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, StockStatus
from freshcart.domain.repository.product_repository import ProductRepository
from freshcart.domain.result import Failure, Result


class AddToCartHandler:

    def __init__(
        self,
        store: CartStore,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._store = store
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_ref: str) -> Result:
        """Add one unit of the product with this ID or name."""
        product = self._product_repo.get_by_id(product_ref)
        if product is None:
            product = self._product_repo.get_by_name(product_ref)
        if product is None:
            return Failure("not_found", f"Product not found: '{product_ref}'")

        if product.stock_status(self._low_stock_threshold) is StockStatus.OUT_OF_STOCK:
            return Failure("validation", f"'{product.name}' is out of stock")

        return self._store.add_line(product.to_cart_candidate(self._low_stock_threshold))
