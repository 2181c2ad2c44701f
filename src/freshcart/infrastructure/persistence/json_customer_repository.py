"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from freshcart.domain.model.customer import Customer
from freshcart.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._load().get(customer_id)

    def get_by_email(self, email: str) -> Customer | None:
        email = email.strip().lower()
        for customer in self._load().values():
            if customer.email == email:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return list(self._load().values())

    def save(self, customer: Customer) -> None:
        customers = self._load()
        customers[customer.id] = customer
        self._persist(customers)

    def delete(self, customer_id: str) -> bool:
        customers = self._load()
        if customers.pop(customer_id, None) is None:
            return False
        self._persist(customers)
        return True

    def _load(self) -> dict[str, Customer]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Customer(
                id=item["id"],
                email=item["email"],
                full_name=item.get("full_name"),
                phone=item.get("phone"),
                address=item.get("address"),
                created_at=datetime.fromisoformat(item["created_at"]),
            )
            for item in raw
        }

    def _persist(self, customers: dict[str, Customer]) -> None:
        raw = [
            {
                "id": c.id,
                "email": c.email,
                "full_name": c.full_name,
                "phone": c.phone,
                "address": c.address,
                "created_at": c.created_at.isoformat(),
            }
            for c in customers.values()
        ]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
