"""
Domain Layer - Business Entities

Pydantic models for the entities the repositories persist. Each entity
exposes ``is_valid``, the gate every mutating repository call checks.

Author: TM3
Date: 2026-10-19
"""
from bugstore.domain.entity import Entity
from bugstore.domain.customer import Customer
from bugstore.domain.product import Product, slugify
from bugstore.domain.order import Order, OrderItem

__all__ = ['Entity', 'Customer', 'Product', 'Order', 'OrderItem', 'slugify']
