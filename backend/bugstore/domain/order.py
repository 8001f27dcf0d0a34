"""
Order Domain Models

An order belongs to exactly one customer and carries zero or more line
items. Orders are created through ``Order.create``, which binds them to a
valid customer.

Author: TM3
Date: 2026-10-19
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bugstore.domain.customer import Customer
from bugstore.domain.entity import Entity
from bugstore.domain.product import Price, Product, to_decimal


class OrderItem(BaseModel):
    """
    Order Item domain model - a line item in an order

    Fields:
        product_id: Reference to the catalog product
        product_name: Product name at order time
        quantity: Number of units ordered
        unit_price: Price per unit at order time
    """

    product_id: UUID = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name at order time")
    quantity: int = Field(..., description="Quantity ordered")
    unit_price: Decimal = Field(..., description="Price per unit")

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def is_valid(self) -> bool:
        return self.quantity >= 1 and self.unit_price >= 0

    @classmethod
    def for_product(
        cls,
        product: Product,
        quantity: int = 1,
        unit_price: Optional[Price] = None
    ) -> "OrderItem":
        """
        Line item snapshotting the product's name and (by default) price

        Raises:
            ValueError: if unit_price is not a finite number
        """
        return cls(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=product.price if unit_price is None else to_decimal(unit_price)
        )


class Order(Entity):
    """
    Order domain model

    Fields:
        id: Unique identity
        customer_id: Owning customer
        items: Line items
        created_at: When the order was placed
    """

    customer_id: Optional[UUID] = Field(None, description="Owning customer ID")
    items: Tuple[OrderItem, ...] = Field((), description="Line items")

    @property
    def validation_errors(self) -> List[str]:
        errors = []
        if self.customer_id is None:
            errors.append("customer is required")
        for index, item in enumerate(self.items):
            if not item.is_valid:
                errors.append(f"item {index} is not valid")
        return errors

    @property
    def total(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal("0"))

    @classmethod
    def create(
        cls,
        customer: Customer,
        items: Sequence[OrderItem] = ()
    ) -> Tuple[Optional["Order"], Optional[str]]:
        """
        Place a new order for a customer

        Args:
            customer: Owning customer (must be valid)
            items: Line items

        Returns:
            Tuple of (order, error). No order is built for an invalid
            customer; otherwise the order is returned together with the
            broken rules of its items, if any.
        """
        if customer is None or not customer.is_valid:
            return None, "customer is not valid"

        order = cls(customer_id=customer.id, items=tuple(items))
        errors = order.validation_errors
        return order, ("; ".join(errors) if errors else None)

    def with_created_at(self, created_at: datetime) -> "Order":
        """Copy of this order with another placement timestamp"""
        return self.model_copy(update={"created_at": created_at})
