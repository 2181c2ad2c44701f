"""Integration tests for the product use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from freshcart.application.add_product import AddProductHandler
from freshcart.application.catalog_cache import TtlCache
from freshcart.application.delete_product import DeleteProductHandler
from freshcart.application.list_products import ListProductsHandler, ShowProductHandler
from freshcart.application.update_product import UpdateProductHandler
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.product import Product, StockStatus
from freshcart.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _catalog() -> list[Product]:
    return [
        Product(id="1", name="Apples", price=Money.of("4.99"), stock_quantity=40,
                category="Fruit", created_at=T0),
        Product(id="2", name="Kale", price=Money.of("3.00"), stock_quantity=4,
                category="Vegetables", description="Curly green kale", created_at=T0 + timedelta(days=1)),
        Product(id="3", name="Bananas", price=Money.of("0.79"), stock_quantity=0,
                category="Fruit", organic=False, created_at=T0 + timedelta(days=2)),
    ]


class TestAddProduct:

    def test_assigns_next_id(self):
        repo = FakeProductRepository(_catalog())
        product = AddProductHandler(repo).handle("Leeks", "2.25", stock_quantity=12)
        assert product.id == "4"
        assert repo.get_by_id("4").price == Money.of("2.25")

    def test_first_product_gets_id_one(self):
        product = AddProductHandler(FakeProductRepository()).handle("Leeks", "2.25")
        assert product.id == "1"

    def test_duplicate_name_rejected(self):
        repo = FakeProductRepository(_catalog())
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo).handle("apples", "1.00")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle("  ", "1.00")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeProductRepository()).handle("Leeks", "-1")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeProductRepository()).handle("Leeks", "1", stock_quantity=-3)


class TestUpdateAndDeleteProduct:

    def test_update_price_and_stock(self):
        repo = FakeProductRepository(_catalog())
        UpdateProductHandler(repo).handle("1", price="5.49", stock_quantity=0)
        apples = repo.get_by_id("1")
        assert apples.price == Money.of("5.49")
        assert apples.stock_status() is StockStatus.OUT_OF_STOCK

    def test_update_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(FakeProductRepository()).handle("99", price="1")

    def test_delete(self):
        repo = FakeProductRepository(_catalog())
        DeleteProductHandler(repo).handle("2")
        assert repo.get_by_id("2") is None

    def test_delete_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(FakeProductRepository()).handle("2")


class TestListProducts:

    def test_newest_first(self):
        handler = ListProductsHandler(FakeProductRepository(_catalog()))
        assert [p.name for p in handler.handle()] == ["Bananas", "Kale", "Apples"]

    def test_filters(self):
        handler = ListProductsHandler(FakeProductRepository(_catalog()))
        assert [p.name for p in handler.handle(category="fruit")] == ["Bananas", "Apples"]
        assert [p.name for p in handler.handle(organic_only=True)] == ["Kale", "Apples"]
        assert [p.name for p in handler.handle(status=StockStatus.LOW_STOCK)] == ["Kale"]
        assert [p.name for p in handler.handle(search="green")] == ["Kale"]

    def test_stock_status_uses_configured_threshold(self):
        handler = ListProductsHandler(FakeProductRepository(_catalog()), low_stock_threshold=50)
        statuses = {p.name: p.stock_status for p in handler.handle()}
        assert statuses == {"Apples": "low-stock", "Kale": "low-stock", "Bananas": "out-of-stock"}

    def test_reads_through_cache(self):
        repo = FakeProductRepository(_catalog())
        handler = ListProductsHandler(repo, cache=TtlCache(ttl=300))
        handler.handle()
        handler.handle(category="Fruit")
        assert repo.list_calls == 1

    def test_mutation_invalidates_cache(self):
        repo = FakeProductRepository(_catalog())
        cache = TtlCache(ttl=300)
        listing = ListProductsHandler(repo, cache=cache)
        listing.handle()

        AddProductHandler(repo, cache=cache).handle("Leeks", "2.25")

        assert "Leeks" in [p.name for p in listing.handle()]

    def test_show_product(self):
        dto = ShowProductHandler(FakeProductRepository(_catalog())).handle("2")
        assert dto.name == "Kale"
        assert dto.price == "$3.00"
        assert dto.stock_status == "low-stock"
