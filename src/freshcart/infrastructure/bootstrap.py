"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
One ``App`` is built per process; the cart store and catalog cache it hands
out are created once and shared by every command of that session.
"""

from __future__ import annotations

from freshcart.application.cart_store import CartStore
from freshcart.application.catalog_cache import TtlCache
from freshcart.application.notifications import LoggingNotifier, Notifier
from freshcart.infrastructure.config import Settings
from freshcart.infrastructure.persistence.json_cart_storage import JsonCartStorage
from freshcart.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from freshcart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from freshcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from freshcart.infrastructure.simulated_checkout import SimulatedCheckoutGateway
from freshcart.infrastructure.storage.local_file_storage import LocalFileStorage


class App:

    def __init__(self, settings: Settings, notifier: Notifier | None = None) -> None:
        self.settings = settings
        self._notifier = notifier or LoggingNotifier()
        self._cart_store: CartStore | None = None
        self.catalog_cache = TtlCache(ttl=settings.catalog_cache_ttl)

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.settings.data_dir / "products.json")

    def customer_repository(self) -> JsonCustomerRepository:
        return JsonCustomerRepository(self.settings.data_dir / "customers.json")

    def order_repository(self) -> JsonOrderRepository:
        return JsonOrderRepository(self.settings.data_dir / "orders.json")

    def file_storage(self) -> LocalFileStorage:
        return LocalFileStorage(self.settings.upload_dir, self.settings.public_base_url)

    def checkout_gateway(self) -> SimulatedCheckoutGateway:
        return SimulatedCheckoutGateway(
            delay=self.settings.checkout_delay,
            failure_rate=self.settings.checkout_failure_rate,
        )

    def cart_store(self) -> CartStore:
        if self._cart_store is None:
            storage = None
            if self.settings.persist_cart:
                storage = JsonCartStorage(self.settings.data_dir / "cart.json")
            self._cart_store = CartStore(
                notifier=self._notifier,
                storage=storage,
                currency=self.settings.currency,
            )
        return self._cart_store
