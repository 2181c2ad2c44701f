"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freshcart.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by email address, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""

    @abstractmethod
    def delete(self, customer_id: str) -> bool:
        """Remove a customer; False when it did not exist."""
