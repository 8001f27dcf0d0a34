"""
Repository Layer - Data Access

Abstract repository contracts plus in-memory implementations backed by an
EntityStore. Every repository method is a coroutine returning a Result or
PagedResult.

Author: TM3
Date: 2026-10-19
"""
from bugstore.repositories.base import CustomerRepository, OrderRepository, ProductRepository
from bugstore.repositories.store import DuplicateEntityError, EntityStore
from bugstore.repositories.customer_repository import InMemoryCustomerRepository
from bugstore.repositories.product_repository import InMemoryProductRepository
from bugstore.repositories.order_repository import InMemoryOrderRepository

__all__ = [
    'CustomerRepository',
    'ProductRepository',
    'OrderRepository',
    'EntityStore',
    'DuplicateEntityError',
    'InMemoryCustomerRepository',
    'InMemoryProductRepository',
    'InMemoryOrderRepository'
]
