"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from freshcart.application.catalog_cache import TtlCache
from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money
from freshcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

CATALOG_KEY = "products"


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cache: TtlCache | None = None,
        currency: str = "USD",
    ) -> None:
        self._product_repo = product_repo
        self._cache = cache
        self._currency = currency

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int = 0,
        description: str = "",
        category: str | None = None,
        unit: str | None = None,
        organic: bool = True,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        existing_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(existing_ids) + 1) if existing_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price, self._currency),
            stock_quantity=stock_quantity,
            description=description.strip(),
            category=(category or "").strip() or None,
            unit=(unit or "").strip() or None,
            organic=organic,
        )
        self._product_repo.save(product)
        if self._cache is not None:
            self._cache.invalidate(CATALOG_KEY)
        logger.info("Added product #%s '%s'", product.id, product.name)
        return product
