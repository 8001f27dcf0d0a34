"""
Pytest fixtures and configuration for BugStore tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-19
"""
import pytest
from datetime import date

from bugstore.core.config import Settings
from bugstore.domain import Customer
from bugstore.repositories import (
    EntityStore,
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)


@pytest.fixture
def birth_date():
    """Birth date shared by sample customers"""
    return date(1990, 1, 1)


@pytest.fixture
def test_settings():
    """
    Settings independent of any .env on the machine running the tests
    """
    return Settings(_env_file=None, DEFAULT_PAGE_SIZE=5, MAX_PAGE_SIZE=50)


@pytest.fixture
def customer_store():
    """Empty backing store for customers, owned by the test"""
    return EntityStore()


@pytest.fixture
def product_store():
    """Empty backing store for products, owned by the test"""
    return EntityStore()


@pytest.fixture
def order_store():
    """Empty backing store for orders, owned by the test"""
    return EntityStore()


@pytest.fixture
def customer_repository(customer_store, test_settings):
    return InMemoryCustomerRepository(customer_store, settings=test_settings)


@pytest.fixture
def product_repository(product_store, test_settings):
    return InMemoryProductRepository(product_store, settings=test_settings)


@pytest.fixture
def order_repository(order_store, test_settings):
    return InMemoryOrderRepository(order_store, settings=test_settings)


@pytest.fixture
def customer(birth_date):
    """
    A valid customer, not yet stored anywhere
    """
    customer, error = Customer.create("John Doe", "john.doe@email.com", birth_date)
    assert error is None
    return customer
