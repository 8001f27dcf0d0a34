"""
Product Repository - In-memory data access for products

Products are addressable by ID and by slug. Pages are ordered by name, then
slug. Names compare case-insensitively, with the exact name breaking ties.

Author: TM3
Date: 2026-10-19
"""
from typing import Optional
from uuid import UUID

from bugstore.common.result import PagedResult, Result
from bugstore.domain.product import Product
from bugstore.repositories.base import ProductRepository
from bugstore.repositories.memory import InMemoryRepository


class InMemoryProductRepository(InMemoryRepository[Product], ProductRepository):
    """Product repository over an EntityStore"""

    entity_name = "Product"

    async def add(self, product: Product) -> Result[Product]:
        return self._add(product)

    async def get_by_id(self, product_id: UUID) -> Result[Product]:
        return self._get_by_id(product_id)

    async def get_by_slug(self, slug: str) -> Result[Product]:
        return self._find_one(lambda: self._store.find_first(lambda p: p.slug == slug))

    async def get_paged(self, page_number: int = 1, page_size: Optional[int] = None) -> PagedResult[Product]:
        return self._query_page(
            lambda: sorted(self._store.snapshot(), key=lambda p: (p.name.casefold(), p.name, p.slug)),
            page_number,
            page_size
        )

    async def update(self, product: Product) -> Result[Product]:
        return self._update(product)

    async def delete(self, product_id: UUID) -> Result[bool]:
        return self._delete(product_id)
