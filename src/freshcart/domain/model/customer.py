"""Customer aggregate."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from freshcart.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class Customer:

    id: str
    email: str
    full_name: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer_id: str,
        email: str,
        full_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        """Create a new customer, validating the contact details."""
        return Customer(
            id=customer_id,
            email=_clean_email(email),
            full_name=_clean(full_name),
            phone=_clean(phone),
            address=_clean(address),
        )

    def update_contact(
        self,
        full_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        email: str | None = None,
    ) -> None:
        """Replace only the fields that were given."""
        if email is not None:
            self.email = _clean_email(email)
        if full_name is not None:
            self.full_name = _clean(full_name)
        if phone is not None:
            self.phone = _clean(phone)
        if address is not None:
            self.address = _clean(address)

    @property
    def display_name(self) -> str:
        return self.full_name or self.email


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_email(email: str) -> str:
    email = (email or "").strip().lower()
    if not email:
        raise ValidationError("Customer email is required")
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"Invalid email address: '{email}'")
    return email
