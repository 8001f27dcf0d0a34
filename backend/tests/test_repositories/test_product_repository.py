"""
Unit tests for InMemoryProductRepository

Author: TM3
Date: 2026-10-19
"""
import pytest
from decimal import Decimal
from uuid import uuid4

from bugstore.common.result import ErrorCode
from bugstore.domain import Product


class TestProductRepository:
    """Test InMemoryProductRepository methods"""

    @pytest.mark.asyncio
    async def test_add_valid_product(self, product_repository, product_store):
        product, _ = Product.create("Mouse", "Wireless mouse", Decimal("99.90"))

        result = await product_repository.add(product)

        assert result.success is True
        assert result.data.id == product.id
        assert product in product_store

    @pytest.mark.asyncio
    async def test_add_invalid_product_fails(self, product_repository, product_store):
        """Empty name and negative price -> INVALID_ENTITY"""
        product, _ = Product.create("", "", -1)

        result = await product_repository.add(product)

        assert result.success is False
        assert result.error_code is ErrorCode.INVALID_ENTITY
        assert product not in product_store
        assert len(product_store) == 0

    @pytest.mark.asyncio
    async def test_get_by_id_returns_product(self, product_repository, product_store):
        product, _ = Product.create("Keyboard", "Mechanical keyboard", Decimal("199.90"))
        product_store.add(product)

        result = await product_repository.get_by_id(product.id)

        assert result.success is True
        assert result.data.id == product.id

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, product_repository):
        result = await product_repository.get_by_id(uuid4())

        assert result.success is False
        assert result.data is None
        assert result.error == "NOT_FOUND: Product not found"

    @pytest.mark.asyncio
    async def test_get_by_slug_returns_product(self, product_repository, product_store):
        product, _ = Product.create("Monitor", "4K monitor", Decimal("999.90"))
        product_store.add(product)

        result = await product_repository.get_by_slug(product.slug)

        assert result.success is True
        assert result.data.slug == "monitor"

    @pytest.mark.asyncio
    async def test_get_by_slug_not_found(self, product_repository):
        result = await product_repository.get_by_slug("non-existent-slug")

        assert result.success is False
        assert result.data is None
        assert result.error_code is ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_paged_returns_correct_page(self, product_repository, product_store):
        """10 products, page 2 of size 3 -> 3 items, 4 pages"""
        for i in range(1, 11):
            product, _ = Product.create(f"Product {i}", "Test", Decimal(10) * i)
            product_store.add(product)

        result = await product_repository.get_paged(2, 3)

        assert result.success is True
        assert len(result.items) == 3
        assert result.total_count == 10
        assert result.total_pages == 4

    @pytest.mark.asyncio
    async def test_get_paged_orders_by_name_then_slug(self, product_repository, product_store):
        for name, slug in [("Tablet", "tablet-b"), ("Camera", "camera"), ("Tablet", "tablet-a")]:
            product_store.add(Product.create(name, "", 10, slug=slug)[0])

        result = await product_repository.get_paged(1, 10)

        assert [p.slug for p in result.items] == ["camera", "tablet-a", "tablet-b"]

    @pytest.mark.asyncio
    async def test_get_paged_orders_names_ignoring_case(self, product_repository, product_store):
        for name in ("Tablet", "camera", "Keyboard"):
            product_store.add(Product.create(name, "", 10)[0])

        result = await product_repository.get_paged(1, 10)

        assert [p.name for p in result.items] == ["camera", "Keyboard", "Tablet"]

    @pytest.mark.asyncio
    async def test_update_replaces_product(self, product_repository, product_store):
        original, _ = Product.create("Tablet", "Android tablet", Decimal("499.90"))
        product_store.add(original)
        updated = Product.create("Tablet Pro", "Updated tablet", Decimal("599.90"), original.slug)[0]
        updated = updated.with_id(original.id)

        result = await product_repository.update(updated)

        assert result.success is True
        assert original not in product_store
        assert updated in product_store
        assert (await product_repository.get_by_slug("tablet")).data.name == "Tablet Pro"

    @pytest.mark.asyncio
    async def test_update_invalid_product_fails(self, product_repository, product_store):
        original, _ = Product.create("Speaker", "Bluetooth speaker", Decimal("149.90"))
        product_store.add(original)
        invalid, _ = Product.create("", "", -10)

        result = await product_repository.update(invalid)

        assert result.success is False
        assert result.error_code is ErrorCode.INVALID_ENTITY
        assert original in product_store
        assert invalid not in product_store

    @pytest.mark.asyncio
    async def test_update_missing_product_not_found(self, product_repository, product_store):
        product, _ = Product.create("Speaker", "Bluetooth speaker", Decimal("149.90"))

        result = await product_repository.update(product)

        assert result.error_code is ErrorCode.NOT_FOUND
        assert len(product_store) == 0

    @pytest.mark.asyncio
    async def test_delete_removes_product(self, product_repository, product_store):
        product, _ = Product.create("Camera", "Digital camera", Decimal("299.90"))
        product_store.add(product)

        result = await product_repository.delete(product.id)

        assert result.success is True
        assert product not in product_store

    @pytest.mark.asyncio
    async def test_delete_not_found(self, product_repository):
        result = await product_repository.delete(uuid4())

        assert result.success is False
        assert result.error_code is ErrorCode.NOT_FOUND
