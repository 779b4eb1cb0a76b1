"""Application service: Create Customer use case."""

from __future__ import annotations

import uuid

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class CreateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, email: str) -> Customer:
        """Register a new customer; emails are unique."""
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if not email or not email.strip():
            raise ValidationError("Customer email is required")

        email = email.strip().lower()
        if self._customer_repo.find_by_email(email) is not None:
            raise ValidationError("This email is already in use")

        customer = Customer(id=uuid.uuid4().hex, name=name.strip(), email=email)
        self._customer_repo.save(customer)
        return customer
