"""Application service: the Cart Store.

One CartStore is built per session at the composition root and handed to
everything that reads or changes the cart.  It wraps the Cart aggregate
with UI state (``is_open``, ``loading``, ``error``), turns cart events into
notifications and, when given a CartStorage, saves the snapshot after
every change.
"""

from __future__ import annotations

import logging

from freshcart.application.notifications import LoggingNotifier, Notification, Notifier
from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.cart import Cart, CartCandidate, CartEvent, CartLine, CartTotals
from freshcart.domain.repository.cart_storage import CartStorage
from freshcart.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(
        self,
        notifier: Notifier | None = None,
        storage: CartStorage | None = None,
        currency: str = "USD",
    ) -> None:
        self._notifier = notifier or LoggingNotifier()
        self._storage = storage
        self._cart = self._load(currency)
        self.is_open = False
        self.loading = False
        self.error: str | None = None

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return self._cart.lines

    @property
    def totals(self) -> CartTotals:
        return self._cart.totals

    @property
    def currency(self) -> str:
        return self._cart.currency

    def snapshot(self) -> list[CartLine]:
        return self._cart.snapshot()

    # --- Mutations ------------------------------------------------------------

    def add_line(self, candidate: CartCandidate) -> Result:
        try:
            event = self._cart.add_line(candidate)
        except ValidationError as exc:
            return Failure("validation", str(exc))
        if event is CartEvent.ADDED:
            self.is_open = True
            self._notify("Added to cart", f"{candidate.name} has been added to your cart")
        else:
            self._notify("Item already in cart", "Quantity has been increased")
        self._persist()
        return Success(event)

    def remove_line(self, line_id: str) -> Result:
        event = self._cart.remove_line(line_id)
        if event is not None:
            self._notify("Removed from cart")
            self._persist()
        return Success(event)

    def set_quantity(self, line_id: str, quantity: int) -> Result:
        if quantity < 1:
            return self.remove_line(line_id)
        event = self._cart.set_quantity(line_id, quantity)
        if event is not None:
            self._persist()
        return Success(event)

    def clear_cart(self) -> Result:
        event = self._cart.clear()
        self._notify("Cart cleared")
        self._persist()
        return Success(event)

    def settle(self, checked_out: list[CartLine]) -> Result:
        """Remove what was just checked out, keeping anything added since."""
        event = self._cart.settle(checked_out)
        if event is CartEvent.CLEARED:
            self._notify("Cart cleared")
        self._persist()
        return Success(event)

    # --- UI state -------------------------------------------------------------

    def set_open(self, is_open: bool) -> None:
        self.is_open = is_open

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, error: str | None) -> None:
        self.error = error

    def notify(self, notification: Notification) -> None:
        self._notifier.notify(notification)

    # --- Internal helpers -----------------------------------------------------

    def _notify(self, title: str, description: str = "") -> None:
        self._notifier.notify(Notification(title=title, description=description))

    def _load(self, currency: str) -> Cart:
        if self._storage is None:
            return Cart(currency=currency)
        cart = self._storage.load()
        if cart is None:
            return Cart(currency=currency)
        if cart.currency != currency:
            logger.warning(
                "Discarding saved %s cart with %d line(s); store currency is %s",
                cart.currency,
                len(cart),
                currency,
            )
            return Cart(currency=currency)
        logger.debug("Restored cart with %d line(s)", len(cart))
        return cart

    def _persist(self) -> None:
        if self._storage is not None:
            self._storage.save(self._cart)
