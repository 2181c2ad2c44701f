"""Application service: Add Customer use case."""

from __future__ import annotations

import uuid
from typing import Callable

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.customer import Customer
from freshcart.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def handle(
        self,
        email: str,
        full_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        customer = Customer.create(
            customer_id=self._id_factory(),
            email=email,
            full_name=full_name,
            phone=phone,
            address=address,
        )
        if self._customer_repo.get_by_email(customer.email) is not None:
            raise ValidationError(f"A customer with email '{customer.email}' already exists")
        self._customer_repo.save(customer)
        return customer
