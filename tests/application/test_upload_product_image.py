"""Tests for product image upload validation."""

import pytest

from freshcart.application.upload_product_image import (
    UploadProductImageHandler,
    storage_name,
)
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money
from tests.fakes import FakeFileStorage, FakeProductRepository

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _setup(max_bytes: int = 1024):
    storage = FakeFileStorage()
    repo = FakeProductRepository([Product(id="1", name="Apples", price=Money.of("4.99"))])
    handler = UploadProductImageHandler(
        storage, repo, max_bytes=max_bytes, clock_ms=lambda: 1700000000000
    )
    return handler, storage, repo


class TestStorageName:

    def test_strips_unsafe_characters(self):
        assert storage_name("my apple (1).png", 5) == "5-myapple1.png"


class TestUpload:

    def test_returns_public_url(self):
        handler, storage, _ = _setup()
        url = handler.handle("apple.png", PNG, "image/png")
        assert url == "https://cdn.example.test/products/1700000000000-apple.png"
        assert storage.files["1700000000000-apple.png"] == (PNG, "image/png")

    def test_attaches_to_product(self):
        handler, _, repo = _setup()
        url = handler.handle("apple.webp", PNG, "image/webp", product_id="1")
        assert repo.get_by_id("1").image_url == url

    def test_missing_file(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="No file provided"):
            handler.handle("apple.png", None, "image/png")

    def test_wrong_type(self):
        handler, storage, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid file type"):
            handler.handle("apple.gif", PNG, "image/gif")
        assert storage.files == {}

    def test_too_large(self):
        handler, _, _ = _setup(max_bytes=10)
        with pytest.raises(ValidationError, match="File size too large"):
            handler.handle("apple.png", PNG, "image/png")

    def test_unknown_product_stores_nothing(self):
        handler, storage, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("apple.png", PNG, "image/png", product_id="99")
        assert storage.files == {}
