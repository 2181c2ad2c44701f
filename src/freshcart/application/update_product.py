"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from freshcart.application.add_product import CATALOG_KEY
from freshcart.application.catalog_cache import TtlCache
from freshcart.domain.exceptions import EntityNotFoundError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money
from freshcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cache: TtlCache | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cache = cache

    def handle(
        self,
        product_id: str,
        price: str | None = None,
        stock_quantity: int | None = None,
        description: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Update the given fields of a product.

        Carts and existing orders keep the price they captured.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if price is not None:
            product.update_price(Money.of(price, product.price.currency))
        if stock_quantity is not None:
            product.set_stock(stock_quantity)
        if description is not None:
            product.description = description.strip()
        if category is not None:
            product.category = category.strip() or None
        if image_url is not None:
            product.image_url = image_url

        self._product_repo.save(product)
        if self._cache is not None:
            self._cache.invalidate(CATALOG_KEY)
        logger.info("Updated product #%s", product.id)
        return product
