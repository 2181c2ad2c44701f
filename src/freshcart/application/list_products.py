"""Application service: product catalog queries.

Reads go through the catalog cache when one is configured; filtering is
applied to the cached list so every filter combination shares one fetch.
"""

from __future__ import annotations

from freshcart.application.add_product import CATALOG_KEY
from freshcart.application.catalog_cache import TtlCache
from freshcart.application.dto import ProductDTO
from freshcart.domain.exceptions import EntityNotFoundError
from freshcart.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product, StockStatus
from freshcart.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cache: TtlCache | None = None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._cache = cache
        self._low_stock_threshold = low_stock_threshold

    def handle(
        self,
        category: str | None = None,
        organic_only: bool = False,
        status: StockStatus | None = None,
        search: str | None = None,
    ) -> list[ProductDTO]:
        """Return products newest first, narrowed by the given filters."""
        products = self._all_products()
        if category:
            products = [p for p in products if (p.category or "").lower() == category.lower()]
        if organic_only:
            products = [p for p in products if p.organic]
        if status is not None:
            products = [
                p for p in products if p.stock_status(self._low_stock_threshold) is status
            ]
        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in p.name.lower() or needle in p.description.lower()
            ]
        return [ProductDTO.from_product(p, self._low_stock_threshold) for p in products]

    def _all_products(self) -> list[Product]:
        def load() -> list[Product]:
            return sorted(
                self._product_repo.list_all(), key=lambda p: p.created_at, reverse=True
            )

        if self._cache is None:
            return load()
        return self._cache.get_or_load(CATALOG_KEY, load)


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return ProductDTO.from_product(product, self._low_stock_threshold)
