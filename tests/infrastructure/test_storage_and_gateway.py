"""Tests for local file storage and the simulated checkout gateway."""

import asyncio
import random
from datetime import datetime, timezone

import pytest

from freshcart.application.receipt import build_receipt
from freshcart.domain.exceptions import CheckoutError, ValidationError
from freshcart.infrastructure.simulated_checkout import SimulatedCheckoutGateway
from freshcart.infrastructure.storage.local_file_storage import LocalFileStorage


def _receipt():
    return build_receipt([], order_number="000001", now=datetime(2024, 1, 1, tzinfo=timezone.utc))


class TestLocalFileStorage:

    def test_writes_file_and_returns_url(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "uploads", "https://img.example.test/products/")
        url = storage.upload("1-kale.png", b"data", "image/png")
        assert url == "https://img.example.test/products/1-kale.png"
        assert (tmp_path / "uploads" / "1-kale.png").read_bytes() == b"data"

    def test_refuses_to_overwrite(self, tmp_path):
        storage = LocalFileStorage(tmp_path, "https://img.example.test")
        storage.upload("a.png", b"1", "image/png")
        with pytest.raises(ValidationError, match="already exists"):
            storage.upload("a.png", b"2", "image/png")


class TestSimulatedCheckoutGateway:

    def test_succeeds_without_failure_rate(self):
        gateway = SimulatedCheckoutGateway(delay=0)
        asyncio.run(gateway.submit(_receipt()))

    def test_always_fails_at_rate_one(self):
        gateway = SimulatedCheckoutGateway(delay=0, failure_rate=1.0, rng=random.Random(1))
        with pytest.raises(CheckoutError, match="try again"):
            asyncio.run(gateway.submit(_receipt()))
