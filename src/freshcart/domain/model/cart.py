"""Cart aggregate: the lines a shopper has picked and their totals.

The Cart owns an insertion-ordered mapping of line id to CartLine.
Lines only ever change through the mutations below, and totals are
always recomputed from the lines; nothing derived is stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.value_objects import Money


class CartEvent(Enum):
    ADDED = "ADDED"
    QUANTITY_INCREASED = "QUANTITY_INCREASED"
    QUANTITY_CHANGED = "QUANTITY_CHANGED"
    REMOVED = "REMOVED"
    CLEARED = "CLEARED"


@dataclass(frozen=True)
class CartCandidate:
    """What the catalog hands over when the shopper clicks "add"."""

    id: str
    name: str
    unit_price: Money
    status: str = ""
    image_url: str | None = None

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Cart line id is required")


@dataclass
class CartLine:
    """One distinct product in the cart.

    ``unit_price`` is copied from the candidate when the line is first
    added and is never refreshed from the catalog afterwards.
    """

    id: str
    name: str
    unit_price: Money
    quantity: int = 1
    status: str = ""
    image_url: str | None = None
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError(
                f"Cart line '{self.id}' quantity must be at least 1, got {self.quantity}"
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    @staticmethod
    def from_candidate(candidate: CartCandidate) -> CartLine:
        return CartLine(
            id=candidate.id,
            name=candidate.name,
            unit_price=candidate.unit_price,
            quantity=1,
            status=candidate.status,
            image_url=candidate.image_url,
        )


@dataclass(frozen=True)
class CartTotals:
    total_item_count: int
    subtotal: Money


def compute_totals(lines: Iterable[CartLine], currency: str = "USD") -> CartTotals:
    """Derive item count and subtotal from scratch."""
    count = 0
    subtotal = Money.zero(currency)
    for line in lines:
        count += line.quantity
        subtotal = subtotal + line.line_total
    return CartTotals(total_item_count=count, subtotal=subtotal)


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - no two lines share an id
    - every present line has ``quantity >= 1``
    """

    currency: str = "USD"
    _lines: dict[str, CartLine] = field(default_factory=dict, repr=False)

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        """Detached copies of the lines, in first-added-first-shown order."""
        return self.snapshot()

    def get(self, line_id: str) -> CartLine | None:
        line = self._lines.get(line_id)
        return None if line is None else replace(line)

    def __contains__(self, line_id: object) -> bool:
        return line_id in self._lines

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def totals(self) -> CartTotals:
        return compute_totals(self._lines.values(), self.currency)

    # --- Mutations ------------------------------------------------------------

    def add_line(self, candidate: CartCandidate) -> CartEvent:
        """Insert a new line at quantity 1, or bump an existing one by 1."""
        self._assert_currency(candidate.unit_price, candidate.id)
        existing = self._lines.get(candidate.id)
        if existing is not None:
            existing.quantity += 1
            return CartEvent.QUANTITY_INCREASED
        self._lines[candidate.id] = CartLine.from_candidate(candidate)
        return CartEvent.ADDED

    def remove_line(self, line_id: str) -> CartEvent | None:
        """Drop a line; returns None when there was nothing to drop."""
        if self._lines.pop(line_id, None) is None:
            return None
        return CartEvent.REMOVED

    def set_quantity(self, line_id: str, quantity: int) -> CartEvent | None:
        """Set an absolute quantity.  Anything below 1 removes the line."""
        if quantity < 1:
            return self.remove_line(line_id)
        line = self._lines.get(line_id)
        if line is None:
            return None
        line.quantity = quantity
        return CartEvent.QUANTITY_CHANGED

    def clear(self) -> CartEvent:
        self._lines.clear()
        return CartEvent.CLEARED

    def settle(self, checked_out: Iterable[CartLine]) -> CartEvent:
        """Take checked-out quantities off the cart.

        Lines added or increased after *checked_out* was taken keep the
        difference.  Returns CLEARED when nothing is left.
        """
        for sold in checked_out:
            line = self._lines.get(sold.id)
            if line is None:
                continue
            if line.quantity > sold.quantity:
                line.quantity -= sold.quantity
            else:
                del self._lines[sold.id]
        if not self._lines:
            return CartEvent.CLEARED
        return CartEvent.QUANTITY_CHANGED

    # --- Reconstitution -------------------------------------------------------

    @staticmethod
    def restore(lines: Iterable[CartLine], currency: str = "USD") -> Cart:
        """Rebuild a cart from persisted lines.

        Rejects duplicate ids and lines priced in another currency.
        """
        cart = Cart(currency=currency)
        for line in lines:
            if line.id in cart._lines:
                raise ValidationError(f"Duplicate cart line id '{line.id}'")
            cart._assert_currency(line.unit_price, line.id)
            cart._lines[line.id] = replace(line)
        return cart

    def snapshot(self) -> list[CartLine]:
        """Detached copies of every line, safe to hand to other components."""
        return [replace(line) for line in self._lines.values()]

    def _assert_currency(self, price: Money, line_id: str) -> None:
        if price.currency != self.currency:
            raise ValidationError(
                f"Cart line '{line_id}' is priced in {price.currency}, "
                f"cart is in {self.currency}"
            )
