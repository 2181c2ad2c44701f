"""Application service: Delete Product use case."""

from __future__ import annotations

from freshcart.application.add_product import CATALOG_KEY
from freshcart.application.catalog_cache import TtlCache
from freshcart.domain.exceptions import EntityNotFoundError
from freshcart.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cache: TtlCache | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cache = cache

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if self._cache is not None:
            self._cache.invalidate(CATALOG_KEY)
