"""Tests for the TTL catalog cache."""

import pytest

from freshcart.application.catalog_cache import TtlCache


class FakeClock:

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestTtlCache:

    def test_hit_within_ttl(self):
        clock = FakeClock()
        cache = TtlCache(ttl=300, clock=clock)
        cache.put("products", ["kale"])
        clock.now += 299
        assert cache.get("products") == ["kale"]

    def test_expires_at_ttl(self):
        clock = FakeClock()
        cache = TtlCache(ttl=300, clock=clock)
        cache.put("products", ["kale"])
        clock.now += 300
        assert cache.get("products") is None

    def test_get_or_load_only_loads_on_miss(self):
        clock = FakeClock()
        cache = TtlCache(ttl=10, clock=clock)
        calls = []

        def loader():
            calls.append(1)
            return ["kale"]

        cache.get_or_load("products", loader)
        cache.get_or_load("products", loader)
        clock.now += 11
        cache.get_or_load("products", loader)
        assert len(calls) == 2

    def test_invalidate_one_key(self):
        cache = TtlCache(ttl=10, clock=FakeClock())
        cache.put("a", 1)
        cache.put("b", 2)
        cache.invalidate("a")
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_invalidate_all(self):
        cache = TtlCache(ttl=10, clock=FakeClock())
        cache.put("a", 1)
        cache.put("b", 2)
        cache.invalidate()
        assert cache.get("a") is None and cache.get("b") is None

    def test_instances_do_not_share_entries(self):
        first = TtlCache(ttl=10, clock=FakeClock())
        second = TtlCache(ttl=10, clock=FakeClock())
        first.put("products", ["kale"])
        assert second.get("products") is None

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError):
            TtlCache(ttl=-1)
