"""
In-memory backing store for repositories

EntityStore stands in for a database table: an insertion-ordered mapping of
id -> entity owned by whoever constructs it and injected into one or more
repositories. Every access takes the store's lock, so a single store may be
shared between repositories and threads.

Author: TM3
Date: 2026-10-19
"""
import threading
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar
from uuid import UUID

from bugstore.domain.entity import Entity

T = TypeVar("T", bound=Entity)


class DuplicateEntityError(ValueError):
    """Raised when inserting an entity whose id is already stored"""

    def __init__(self, entity_id: UUID):
        super().__init__(f"Entity {entity_id} already exists")
        self.entity_id = entity_id


class EntityStore(Generic[T]):
    """
    Insertion-ordered, id-indexed collection of entities

    Iteration order is insertion order. ``replace`` removes the old entry
    and appends the new one, so a replaced entity moves to the end.
    """

    def __init__(self, entities: Optional[Iterable[T]] = None):
        self._entities: Dict[UUID, T] = {}
        self._lock = threading.RLock()
        for entity in entities or ():
            self.add(entity)

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the store, for callers composing several operations"""
        return self._lock

    def add(self, entity: T) -> T:
        with self._lock:
            if entity.id in self._entities:
                raise DuplicateEntityError(entity.id)
            self._entities[entity.id] = entity
            return entity

    def get(self, entity_id: UUID) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First entity, in store order, matching the predicate"""
        with self._lock:
            return next((e for e in self._entities.values() if predicate(e)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            return [e for e in self._entities.values() if predicate(e)]

    def replace(self, entity: T) -> T:
        """
        Swap the stored entity sharing this entity's id

        Raises:
            KeyError: if no entity with that id is stored
        """
        with self._lock:
            del self._entities[entity.id]
            self._entities[entity.id] = entity
            return entity

    def remove(self, entity_id: UUID) -> T:
        """
        Remove and return the entity with this id

        Raises:
            KeyError: if no entity with that id is stored
        """
        with self._lock:
            return self._entities.pop(entity_id)

    def snapshot(self) -> List[T]:
        """Copy of all entities in store order"""
        with self._lock:
            return list(self._entities.values())

    def __contains__(self, item: object) -> bool:
        """True for a stored id, or for an entity equal to the one stored under its id"""
        with self._lock:
            if isinstance(item, UUID):
                return item in self._entities
            if isinstance(item, Entity):
                return self._entities.get(item.id) == item
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)
