"""
Customer Domain Model

Represents a customer of the store.

Author: TM3
Date: 2026-10-19
"""
from datetime import date
from typing import List, Optional, Tuple

from pydantic import Field, ValidationError

from bugstore.domain.entity import Entity, describe_invalid_fields


class Customer(Entity):
    """
    Customer domain model

    Fields:
        id: Unique identity
        name: Full name
        email: Contact email, used as a lookup key
        birth_date: Date of birth
        created_at: When the customer was created
    """

    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    birth_date: date = Field(..., description="Date of birth")

    @property
    def validation_errors(self) -> List[str]:
        errors = []
        if not self.name.strip():
            errors.append("name is required")
        if not self.email.strip():
            errors.append("email is required")
        return errors

    @classmethod
    def create(
        cls,
        name: Optional[str],
        email: Optional[str],
        birth_date: date
    ) -> Tuple[Optional["Customer"], Optional[str]]:
        """
        Create a new customer with a fresh identity

        Args:
            name: Customer name
            email: Customer email
            birth_date: Date of birth

        Returns:
            Tuple of (customer, error). A missing name or email counts as
            blank, so the customer is still built and error lists the broken
            rules. Values that cannot be converted at all (e.g. a birth_date
            that is not a date) give (None, reason).
        """
        try:
            customer = cls(name=name or "", email=email or "", birth_date=birth_date)
        except ValidationError as e:
            return None, describe_invalid_fields(e)
        errors = customer.validation_errors
        return customer, ("; ".join(errors) if errors else None)
