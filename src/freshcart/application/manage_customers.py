"""Application services: customer updates, removal and queries."""

from __future__ import annotations

from freshcart.application.dto import CustomerDTO
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.customer import Customer
from freshcart.domain.repository.customer_repository import CustomerRepository


def _require(repo: CustomerRepository, customer_id: str) -> Customer:
    customer = repo.get_by_id(customer_id)
    if customer is None:
        raise EntityNotFoundError(f"Customer '{customer_id}' not found")
    return customer


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        email: str | None = None,
        full_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> CustomerDTO:
        customer = _require(self._customer_repo, customer_id)
        customer.update_contact(full_name=full_name, phone=phone, address=address, email=email)

        # The new email must not belong to someone else
        other = self._customer_repo.get_by_email(customer.email)
        if other is not None and other.id != customer.id:
            raise ValidationError(f"A customer with email '{customer.email}' already exists")

        self._customer_repo.save(customer)
        return CustomerDTO.from_customer(customer)


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> None:
        if not self._customer_repo.delete(customer_id):
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> CustomerDTO:
        return CustomerDTO.from_customer(_require(self._customer_repo, customer_id))


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, search: str | None = None) -> list[CustomerDTO]:
        """Newest first; *search* matches name, email or phone."""
        customers = sorted(
            self._customer_repo.list_all(), key=lambda c: c.created_at, reverse=True
        )
        if search:
            needle = search.lower()
            customers = [
                c for c in customers
                if needle in (c.full_name or "").lower()
                or needle in c.email
                or needle in (c.phone or "")
            ]
        return [CustomerDTO.from_customer(c) for c in customers]
