#!/usr/bin/env python3
"""
Seed Demo Data
Fills in-memory repositories with sample customers, products and orders and
prints the first page of each, to eyeball paging and ordering.

Usage:
    python seed_demo_data.py [--customers N] [--page-size N] [--log-level DEBUG]

Author: TM3
Date: 2026-10-19
"""
import argparse
import asyncio
import logging
from datetime import date, timedelta

from bugstore.core.logging_config import setup_logging
from bugstore.domain import Customer, Order, OrderItem, Product
from bugstore.repositories import (
    EntityStore,
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)

PRODUCTS = [
    ("Mouse", "Wireless mouse", "99.90"),
    ("Keyboard", "Mechanical keyboard", "199.90"),
    ("Monitor", "4K monitor", "999.90"),
    ("Camera", "Digital camera", "299.90"),
]


async def seed(customer_count: int, page_size: int) -> None:
    customers = InMemoryCustomerRepository(EntityStore())
    products = InMemoryProductRepository(EntityStore())
    orders = InMemoryOrderRepository(EntityStore())

    catalog = []
    for name, description, price in PRODUCTS:
        product, error = Product.create(name, description, price)
        result = await products.add(product)
        if not result.success:
            logger.error(f"❌ {name}: {result.error or error}")
            continue
        catalog.append(product)

    for i in range(1, customer_count + 1):
        customer, _ = Customer.create(f"Customer {i:02d}", f"c{i}@mail.com", date(1990, 1, 1))
        await customers.add(customer)

        for days_ago, product in enumerate(catalog[: i % len(catalog) + 1]):
            order, _ = Order.create(customer, [OrderItem.for_product(product, quantity=i)])
            await orders.add(order.with_created_at(order.created_at - timedelta(days=days_ago)))

    page = await customers.get_paged(1, page_size)
    logger.info(f"Customers: {page.total_count} total, {page.total_pages} pages")
    for customer in page.items:
        customer_orders = await orders.get_paged_by_customer(customer.id, 1, page_size)
        logger.info(f"  {customer.name} <{customer.email}>: {customer_orders.total_count} orders")

    page = await products.get_paged(1, page_size)
    for product in page.items:
        logger.info(f"  {product.slug}: {product.price}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Seed in-memory repositories with demo data')
    parser.add_argument('--customers', type=int, default=10, help='Number of customers to create')
    parser.add_argument('--page-size', type=int, default=5, help='Page size for the printed pages')
    parser.add_argument('--log-level', default=None, help='Overrides LOG_LEVEL')
    args = parser.parse_args()

    setup_logging(args.log_level)
    asyncio.run(seed(args.customers, args.page_size))
