"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path

from checkout.domain.model.customer import Customer
from checkout.domain.repository.customer_repository import CustomerRepository
from checkout.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CustomerRepository interface -----------------------------------------

    def find_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.load():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def find_by_email(self, email: str) -> Customer | None:
        for raw in self._file.load():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def save(self, customer: Customer) -> None:
        records = [r for r in self._file.load() if r["id"] != customer.id]
        records.append(self._to_raw(customer))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {"id": customer.id, "name": customer.name, "email": customer.email}

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(id=raw["id"], name=raw["name"], email=raw["email"])
