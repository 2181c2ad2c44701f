"""Receipt building and plain-text rendering.

A receipt is a frozen copy of the cart taken at checkout.  Its total is
the cart subtotal at that moment; there is no tax or shipping.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from freshcart.domain.model.cart import CartLine, compute_totals
from freshcart.domain.model.value_objects import Money

RECEIPT_WIDTH = 40


@dataclass(frozen=True)
class ReceiptLine:
    line_id: str
    name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    order_number: str
    created_at: datetime
    lines: list[ReceiptLine]
    total_items: int
    subtotal: Money
    phone: str | None = None
    store_name: str = "FreshCart Organic Market"

    @property
    def total(self) -> Money:
        return self.subtotal


def new_order_number(rng: random.Random | None = None) -> str:
    """Six digits, zero padded."""
    rng = rng or random.Random()
    return f"{rng.randrange(1_000_000):06d}"


def build_receipt(
    lines: Iterable[CartLine],
    order_number: str,
    phone: str | None = None,
    now: datetime | None = None,
    currency: str = "USD",
    store_name: str = "FreshCart Organic Market",
) -> Receipt:
    lines = list(lines)
    totals = compute_totals(lines, currency)
    return Receipt(
        order_number=order_number,
        created_at=now or datetime.now(timezone.utc),
        lines=[
            ReceiptLine(
                line_id=line.id,
                name=line.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in lines
        ],
        total_items=totals.total_item_count,
        subtotal=totals.subtotal,
        phone=phone or None,
        store_name=store_name,
    )


def render_receipt(receipt: Receipt) -> str:
    rule = "-" * RECEIPT_WIDTH
    out = [
        receipt.store_name.upper().center(RECEIPT_WIDTH).rstrip(),
        _pair(f"Order #{receipt.order_number}", receipt.created_at.strftime("%Y-%m-%d %H:%M")),
    ]
    if receipt.phone:
        out.append(f"Customer: {receipt.phone}")
    out.append(rule)
    for line in receipt.lines:
        out.append(line.name[:RECEIPT_WIDTH])
        out.append(_pair(f"  {line.quantity} x {line.unit_price}", str(line.line_total)))
    out.append(rule)
    out.append(_pair("Total Items", str(receipt.total_items)))
    out.append(_pair("Subtotal", str(receipt.subtotal)))
    out.append(_pair("TOTAL", str(receipt.total)))
    out.append("")
    out.append("Thank you for your purchase!".center(RECEIPT_WIDTH).rstrip())
    out.append("Please visit again".center(RECEIPT_WIDTH).rstrip())
    return "\n".join(out)


def _pair(left: str, right: str) -> str:
    gap = max(1, RECEIPT_WIDTH - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"
