"""
Customer Repository - In-memory data access for customers

Author: TM3
Date: 2026-10-19
"""
from typing import Optional
from uuid import UUID

from bugstore.common.result import PagedResult, Result
from bugstore.domain.customer import Customer
from bugstore.repositories.base import CustomerRepository
from bugstore.repositories.memory import InMemoryRepository


class InMemoryCustomerRepository(InMemoryRepository[Customer], CustomerRepository):
    """
    Customer repository over an EntityStore

    Email lookups are exact and case-sensitive; email uniqueness is left to
    callers.
    """

    entity_name = "Customer"

    async def add(self, customer: Customer) -> Result[Customer]:
        return self._add(customer)

    async def get_by_id(self, customer_id: UUID) -> Result[Customer]:
        return self._get_by_id(customer_id)

    async def get_by_email(self, email: str) -> Result[Customer]:
        return self._find_one(lambda: self._store.find_first(lambda c: c.email == email))

    async def get_paged(self, page_number: int = 1, page_size: Optional[int] = None) -> PagedResult[Customer]:
        """Customers ordered by name, case-insensitively; equal names keep store order"""
        return self._query_page(
            lambda: sorted(self._store.snapshot(), key=lambda c: (c.name.casefold(), c.name)),
            page_number,
            page_size
        )

    async def update(self, customer: Customer) -> Result[Customer]:
        return self._update(customer)

    async def delete(self, customer_id: UUID) -> Result[bool]:
        return self._delete(customer_id)
