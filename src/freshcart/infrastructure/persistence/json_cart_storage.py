"""JSON-file-backed CartStorage.

The whole snapshot is rewritten on every save; lines are stored in
display order so a reload shows them in the order they were added.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from freshcart.domain.model.cart import Cart, CartLine
from freshcart.domain.model.value_objects import Money
from freshcart.domain.repository.cart_storage import CartStorage


class JsonCartStorage(CartStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Cart | None:
        if not self._file_path.exists():
            return None
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        currency = raw.get("currency", "USD")
        lines = [
            CartLine(
                id=item["id"],
                name=item["name"],
                unit_price=Money(Decimal(item["unit_price"]), currency),
                quantity=item["quantity"],
                status=item.get("status", ""),
                image_url=item.get("image_url"),
                added_at=datetime.fromisoformat(item["added_at"]),
            )
            for item in raw.get("lines", [])
        ]
        return Cart.restore(lines, currency)

    def save(self, cart: Cart) -> None:
        raw = {
            "currency": cart.currency,
            "lines": [
                {
                    "id": line.id,
                    "name": line.name,
                    "unit_price": str(line.unit_price.amount),
                    "quantity": line.quantity,
                    "status": line.status,
                    "image_url": line.image_url,
                    "added_at": line.added_at.isoformat(),
                }
                for line in cart.lines
            ],
        }
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
