"""Application service: Add Customer use case."""

from __future__ import annotations

import uuid

import structlog

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.customer import Customer
from checkout.domain.repository.customer_repository import CustomerRepository

logger = structlog.get_logger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, email: str) -> Customer:
        """Register a new customer.  Email addresses are unique."""
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")

        email = email.strip().lower()
        if self._customer_repo.find_by_email(email) is not None:
            raise ValidationError("Email address already in use")

        customer = Customer(id=str(uuid.uuid4()), name=name.strip(), email=email)
        self._customer_repo.save(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer
