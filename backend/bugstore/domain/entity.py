"""
Base Entity

Shared shape of every BugStore entity: a UUID identity, a UTC creation
timestamp, and a validity predicate that repositories check before any
mutation. Entities are immutable; changed copies are produced with
``with_id``/``model_copy`` instead of assigning attributes.

Author: TM3
Date: 2026-10-19
"""
from datetime import datetime, timezone
from typing import Any, List, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError

E = TypeVar("E", bound="Entity")


def describe_invalid_fields(exc: ValidationError) -> str:
    """Readable 'field: message' list for a pydantic ValidationError"""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """
    Base domain model for persisted entities

    Fields:
        id: Unique identity (generated on creation)
        created_at: When the entity was created
    """

    id: UUID = Field(default_factory=uuid4, description="Unique identity")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True
    )

    @property
    def validation_errors(self) -> List[str]:
        """Broken business rules, empty when the entity is valid"""
        return []

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    @classmethod
    def restore(cls: type[E], **fields: Any) -> E:
        """
        Rebuild an entity from explicit field values

        Used when rehydrating from storage and by test builders that need a
        fixed id or timestamp. Unlike ``create`` no identity is generated
        when ``id`` is given.
        """
        return cls.model_validate(fields)

    def with_id(self: E, entity_id: UUID) -> E:
        """Copy of this entity carrying another identity"""
        return self.model_copy(update={"id": entity_id})
