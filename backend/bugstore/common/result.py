"""
Result envelopes returned by every repository method

Repositories never raise to their callers. Each call returns a Result (or
PagedResult) whose ``success`` flag must be checked before ``data`` or
``items`` are used. Failure messages carry a category tag in front of the
description, e.g. ``"NOT_FOUND: Customer not found"``.

Author: TM3
Date: 2026-10-19
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Coarse failure categories embedded in failure messages"""
    NOT_FOUND = "NOT_FOUND"
    INVALID_ENTITY = "INVALID_ENTITY"
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"
    INVALID_PAGING = "INVALID_PAGING"
    GENERIC = "GENERIC"


def tagged(code: ErrorCode, message: str) -> str:
    """Build a failure message of the form ``"<CODE>: <message>"``"""
    return f"{code.value}: {message}"


def parse_error_code(error: Optional[str]) -> Optional[ErrorCode]:
    """
    Recover the category tag from a failure message

    Untagged messages are reported as GENERIC.
    """
    if not error:
        return None

    prefix, sep, _ = error.partition(":")
    if sep:
        try:
            return ErrorCode(prefix.strip())
        except ValueError:
            pass
    return ErrorCode.GENERIC


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success/failure wrapper for a single value

    Fields:
        success: Whether the operation succeeded
        data: Payload (set only on success)
        error: Tagged failure message (set only on failure)
    """
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """
        Successful result carrying value

        Raises:
            ValueError: if value is None; a success always has a payload
        """
        if value is None:
            raise ValueError("Result.ok requires a value; use Result.fail for a missing payload")
        return cls(success=True, data=value)

    @classmethod
    def fail(cls, message: str) -> "Result[T]":
        return cls(success=False, error=message)

    @classmethod
    def fail_with(cls, code: ErrorCode, message: str) -> "Result[T]":
        return cls.fail(tagged(code, message))

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return parse_error_code(self.error)

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """
    Result envelope for one page of a larger, ordered collection

    Fields:
        success: Whether the query succeeded
        items: Entities on the requested page (never more than page_size)
        total_count: Number of matching entities across all pages
        current_page: 1-based page number that was requested
        page_size: Maximum number of items per page
        error: Tagged failure message (set only on failure)
    """
    success: bool
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 0
    page_size: int = 0
    error: Optional[str] = None

    @classmethod
    def ok(
        cls,
        items: Sequence[T],
        total_count: int,
        current_page: int,
        page_size: int
    ) -> "PagedResult[T]":
        return cls(
            success=True,
            items=list(items),
            total_count=total_count,
            current_page=current_page,
            page_size=page_size
        )

    @classmethod
    def fail(cls, message: str) -> "PagedResult[T]":
        return cls(success=False, error=message)

    @classmethod
    def fail_with(cls, code: ErrorCode, message: str) -> "PagedResult[T]":
        return cls.fail(tagged(code, message))

    @property
    def total_pages(self) -> int:
        """ceil(total_count / page_size), 0 when there is no usable page size"""
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return parse_error_code(self.error)

    def __bool__(self) -> bool:
        return self.success
