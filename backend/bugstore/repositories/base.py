"""
Repository Interfaces

Abstract contracts for customer, product and order data access. Every
method is a coroutine and reports its outcome through a Result or
PagedResult; implementations must not raise to the caller.

Author: TM3
Date: 2026-10-19
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bugstore.common.result import PagedResult, Result
from bugstore.domain.customer import Customer
from bugstore.domain.order import Order
from bugstore.domain.product import Product


class CustomerRepository(ABC):
    """
    Abstract repository for customer persistence operations
    """

    @abstractmethod
    async def add(self, customer: Customer) -> Result[Customer]:
        """
        Store a new customer

        Args:
            customer: Customer to store

        Returns:
            The stored customer, or INVALID_ENTITY / DUPLICATE_ENTITY
        """

    @abstractmethod
    async def get_by_id(self, customer_id: UUID) -> Result[Customer]:
        """
        Find a customer by ID

        Returns:
            The customer, or NOT_FOUND
        """

    @abstractmethod
    async def get_by_email(self, email: str) -> Result[Customer]:
        """
        Find a customer by exact (case-sensitive) email

        Returns:
            The customer, or NOT_FOUND
        """

    @abstractmethod
    async def get_paged(self, page_number: int = 1, page_size: Optional[int] = None) -> PagedResult[Customer]:
        """
        Get one page of customers ordered by name

        Args:
            page_number: 1-based page number
            page_size: Maximum customers per page

        Returns:
            The page, or INVALID_PAGING
        """

    @abstractmethod
    async def update(self, customer: Customer) -> Result[Customer]:
        """
        Replace the stored customer sharing this customer's ID

        Returns:
            The new customer, or INVALID_ENTITY / NOT_FOUND
        """

    @abstractmethod
    async def delete(self, customer_id: UUID) -> Result[bool]:
        """
        Delete a customer

        Returns:
            True, or NOT_FOUND
        """


class ProductRepository(ABC):
    """
    Abstract repository for product persistence operations
    """

    @abstractmethod
    async def add(self, product: Product) -> Result[Product]:
        """Store a new product"""

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Result[Product]:
        """Find a product by ID"""

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Result[Product]:
        """Find a product by exact slug"""

    @abstractmethod
    async def get_paged(self, page_number: int = 1, page_size: Optional[int] = None) -> PagedResult[Product]:
        """Get one page of products ordered by name, then slug"""

    @abstractmethod
    async def update(self, product: Product) -> Result[Product]:
        """Replace the stored product sharing this product's ID"""

    @abstractmethod
    async def delete(self, product_id: UUID) -> Result[bool]:
        """Delete a product"""


class OrderRepository(ABC):
    """
    Abstract repository for order persistence operations

    Orders are append-only here: there is no update or delete.
    """

    @abstractmethod
    async def add(self, order: Order) -> Result[Order]:
        """Store a new order"""

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Result[Order]:
        """Find an order by ID"""

    @abstractmethod
    async def get_paged_by_customer(
        self,
        customer_id: UUID,
        page_number: int = 1,
        page_size: Optional[int] = None
    ) -> PagedResult[Order]:
        """
        Get one page of a customer's orders, most recent first

        total_count counts only this customer's orders.
        """
