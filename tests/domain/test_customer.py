"""Unit tests for the Customer aggregate."""

import pytest

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.customer import Customer


class TestCustomerCreation:

    def test_email_normalised(self):
        customer = Customer.create("c1", "  Ada@Example.COM ")
        assert customer.email == "ada@example.com"

    def test_blank_optional_fields_become_none(self):
        customer = Customer.create("c1", "ada@example.com", full_name="  ", phone="")
        assert customer.full_name is None
        assert customer.phone is None

    def test_missing_email_rejected(self):
        with pytest.raises(ValidationError, match="email is required"):
            Customer.create("c1", "")

    def test_malformed_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            Customer.create("c1", "not-an-email")


class TestCustomerUpdate:

    def test_only_given_fields_change(self):
        customer = Customer.create("c1", "ada@example.com", full_name="Ada", phone="555-0100")
        customer.update_contact(phone="555-0199")
        assert customer.full_name == "Ada"
        assert customer.phone == "555-0199"

    def test_display_name_falls_back_to_email(self):
        customer = Customer.create("c1", "ada@example.com")
        assert customer.display_name == "ada@example.com"
