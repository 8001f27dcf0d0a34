"""
In-Memory Repository Base

Behavior shared by the in-memory repositories: validation before mutation,
lookup over an EntityStore, skip/take paging, and conversion of every
outcome (including unexpected faults) into a Result or PagedResult.

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Callable, Generic, List, Optional, Sequence, TypeVar
from uuid import UUID

from bugstore.common.result import ErrorCode, PagedResult, Result
from bugstore.core.config import Settings, settings as default_settings
from bugstore.domain.entity import Entity
from bugstore.repositories.store import DuplicateEntityError, EntityStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


def paginate(items: Sequence[T], page_number: int, page_size: int) -> List[T]:
    """
    Take one 1-based page out of an ordered sequence

    Args:
        items: Ordered items
        page_number: 1-based page number (>= 1)
        page_size: Items per page (>= 1)

    Returns:
        At most page_size items; empty past the last page
    """
    start = (page_number - 1) * page_size
    return list(items[start:start + page_size])


class InMemoryRepository(Generic[T]):
    """
    Base class for repositories backed by an EntityStore

    Subclasses set ``entity_name`` and expose the public coroutines; the
    helpers here never raise.
    """

    entity_name = "Entity"

    def __init__(
        self,
        store: Optional[EntityStore[T]] = None,
        settings: Optional[Settings] = None
    ):
        """
        Args:
            store: Backing store, shared by reference (a new one when omitted)
            settings: Overrides the module-level settings
        """
        self._store: EntityStore[T] = store if store is not None else EntityStore()
        self._settings = settings or default_settings

    @property
    def store(self) -> EntityStore[T]:
        return self._store

    # =========================================================================
    # Messages
    # =========================================================================

    def _invalid(self, entity: T) -> Result[T]:
        logger.warning(
            f"Rejected invalid {self.entity_name.lower()} {entity.id}: "
            f"{'; '.join(entity.validation_errors)}"
        )
        return Result.fail_with(ErrorCode.INVALID_ENTITY, f"{self.entity_name} is not valid")

    def _not_found(self) -> Result:
        return Result.fail_with(ErrorCode.NOT_FOUND, f"{self.entity_name} not found")

    def _unexpected(self, action: str, exc: Exception, result_type=Result):
        logger.exception(f"Unexpected error while {action} {self.entity_name.lower()}")
        return result_type.fail_with(
            ErrorCode.GENERIC,
            f"Unexpected error while {action} {self.entity_name.lower()} - {exc}"
        )

    def _paging_error(self, page_number: int, page_size: int) -> Optional[str]:
        if page_number < 1:
            return f"page_number must be >= 1 (got {page_number})"
        if page_size < 1:
            return f"page_size must be >= 1 (got {page_size})"
        if page_size > self._settings.MAX_PAGE_SIZE:
            return f"page_size must be <= {self._settings.MAX_PAGE_SIZE} (got {page_size})"
        return None

    # =========================================================================
    # Operations
    # =========================================================================

    def _add(self, entity: T) -> Result[T]:
        try:
            if not entity.is_valid:
                return self._invalid(entity)

            self._store.add(entity)
            logger.info(f"Added {self.entity_name.lower()} {entity.id}")
            return Result.ok(entity)

        except DuplicateEntityError as e:
            logger.warning(f"Rejected duplicate {self.entity_name.lower()} {e.entity_id}")
            return Result.fail_with(ErrorCode.DUPLICATE_ENTITY, f"{self.entity_name} already exists")
        except Exception as e:
            return self._unexpected("adding", e)

    def _find_one(self, lookup: Callable[[], Optional[T]]) -> Result[T]:
        try:
            entity = lookup()
            if entity is None:
                logger.debug(f"{self.entity_name} not found")
                return self._not_found()
            return Result.ok(entity)

        except Exception as e:
            return self._unexpected("retrieving", e)

    def _get_by_id(self, entity_id: UUID) -> Result[T]:
        return self._find_one(lambda: self._store.get(entity_id))

    def _query_page(
        self,
        select: Callable[[], List[T]],
        page_number: int,
        page_size: Optional[int]
    ) -> PagedResult[T]:
        """
        Run a query and return one page of its ordered matches

        Args:
            select: Returns all matches, already ordered
            page_number: 1-based page number
            page_size: Items per page (settings.DEFAULT_PAGE_SIZE when None)
        """
        try:
            if page_size is None:
                page_size = self._settings.DEFAULT_PAGE_SIZE

            error = self._paging_error(page_number, page_size)
            if error:
                logger.debug(f"Rejected paging request: {error}")
                return PagedResult.fail_with(ErrorCode.INVALID_PAGING, error)

            matches = select()
            return PagedResult.ok(
                items=paginate(matches, page_number, page_size),
                total_count=len(matches),
                current_page=page_number,
                page_size=page_size
            )

        except Exception as e:
            return self._unexpected("paging", e, result_type=PagedResult)

    def _update(self, entity: T) -> Result[T]:
        try:
            if not entity.is_valid:
                return self._invalid(entity)

            # Existence check and swap happen under one lock
            with self._store.lock:
                if self._store.get(entity.id) is None:
                    return self._not_found()
                self._store.replace(entity)

            logger.info(f"Replaced {self.entity_name.lower()} {entity.id}")
            return Result.ok(entity)

        except Exception as e:
            return self._unexpected("updating", e)

    def _delete(self, entity_id: UUID) -> Result[bool]:
        try:
            with self._store.lock:
                if self._store.get(entity_id) is None:
                    return self._not_found()
                self._store.remove(entity_id)

            logger.info(f"Deleted {self.entity_name.lower()} {entity_id}")
            return Result.ok(True)

        except Exception as e:
            return self._unexpected("deleting", e)
