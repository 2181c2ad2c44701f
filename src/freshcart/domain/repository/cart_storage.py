"""Abstract storage for the cart snapshot between sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freshcart.domain.model.cart import Cart


class CartStorage(ABC):

    @abstractmethod
    def load(self) -> Cart | None:
        """Return the saved cart, or None when nothing was saved."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Replace the saved cart with *cart*."""
