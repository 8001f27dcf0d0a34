"""
Order Repository - In-memory data access for orders

Orders are append-only: they can be added, read by ID, and listed per
customer, most recent first.

Author: TM3
Date: 2026-10-19
"""
from typing import Optional
from uuid import UUID

from bugstore.common.result import PagedResult, Result
from bugstore.domain.order import Order
from bugstore.repositories.base import OrderRepository
from bugstore.repositories.memory import InMemoryRepository


class InMemoryOrderRepository(InMemoryRepository[Order], OrderRepository):
    """Order repository over an EntityStore"""

    entity_name = "Order"

    async def add(self, order: Order) -> Result[Order]:
        return self._add(order)

    async def get_by_id(self, order_id: UUID) -> Result[Order]:
        return self._get_by_id(order_id)

    async def get_paged_by_customer(
        self,
        customer_id: UUID,
        page_number: int = 1,
        page_size: Optional[int] = None
    ) -> PagedResult[Order]:
        """
        One page of a customer's orders, newest first

        Args:
            customer_id: Owning customer
            page_number: 1-based page number
            page_size: Orders per page

        Returns:
            PagedResult whose total_count covers only this customer's orders
        """
        def select():
            orders = self._store.filter(lambda o: o.customer_id == customer_id)
            return sorted(orders, key=lambda o: o.created_at, reverse=True)

        return self._query_page(select, page_number, page_size)
