"""
Product Domain Model

Represents a product in the catalog. Besides its identity a product is
addressable by its slug, a human-readable unique key derived from the name.

Author: TM3
Date: 2026-10-19
"""
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Union

from pydantic import Field, ValidationError

from bugstore.domain.entity import Entity, describe_invalid_fields

Price = Union[Decimal, int, float, str]


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug

    "Wireless Mouse (2nd gen)" -> "wireless-mouse-2nd-gen"
    """
    slug = text.lower().strip()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    return slug.strip("-")


def to_decimal(value: Price) -> Decimal:
    """
    Convert a price to Decimal, going through str so floats keep their printed value

    Raises:
        ValueError: if the value is not a finite number
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Invalid price: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    return amount


class Product(Entity):
    """
    Product domain model

    Fields:
        id: Unique identity
        name: Product name
        description: Free-text description
        price: Sale price (must not be negative)
        slug: Unique human-readable key
        created_at: When the product was created
    """

    name: str = Field(..., description="Product name")
    description: str = Field("", description="Product description")
    price: Decimal = Field(..., description="Sale price")
    slug: str = Field(..., description="Unique human-readable key")

    @property
    def validation_errors(self) -> List[str]:
        errors = []
        if not self.name.strip():
            errors.append("name is required")
        if self.price < 0:
            errors.append("price must not be negative")
        if not self.slug.strip():
            errors.append("slug is required")
        return errors

    @classmethod
    def create(
        cls,
        name: Optional[str],
        description: Optional[str],
        price: Price,
        slug: Optional[str] = None
    ) -> Tuple[Optional["Product"], Optional[str]]:
        """
        Create a new product with a fresh identity

        Args:
            name: Product name
            description: Product description
            price: Sale price
            slug: Explicit slug (derived from name when omitted)

        Returns:
            Tuple of (product, error). A missing name or description counts
            as blank, so the product is still built and error lists the
            broken rules. A price that is not a number gives
            (None, "price is not a number").
        """
        name = name or ""
        try:
            amount = to_decimal(price)
        except ValueError:
            return None, "price is not a number"
        try:
            product = cls(
                name=name,
                description=description or "",
                price=amount,
                slug=slug if slug is not None else slugify(name)
            )
        except ValidationError as e:
            return None, describe_invalid_fields(e)
        errors = product.validation_errors
        return product, ("; ".join(errors) if errors else None)
