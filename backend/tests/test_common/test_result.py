"""
Unit tests for the Result and PagedResult envelopes

Author: TM3
Date: 2026-10-19
"""
import pytest

from bugstore.common.result import ErrorCode, PagedResult, Result, parse_error_code


class TestResult:
    """Test Result construction"""

    def test_ok_carries_value_and_no_error(self):
        result = Result.ok(42)

        assert result.success is True
        assert result.data == 42
        assert result.error is None
        assert result.error_code is None
        assert result

    def test_fail_carries_error_and_no_value(self):
        result = Result.fail("NOT_FOUND: Customer not found")

        assert result.success is False
        assert result.data is None
        assert result.error_code is ErrorCode.NOT_FOUND
        assert not result

    def test_fail_with_builds_tagged_message(self):
        result = Result.fail_with(ErrorCode.INVALID_ENTITY, "Product is not valid")

        assert result.error == "INVALID_ENTITY: Product is not valid"
        assert result.error_code is ErrorCode.INVALID_ENTITY

    def test_ok_false_is_still_success(self):
        """A falsy payload does not make the result a failure"""
        result = Result.ok(False)

        assert result.success is True
        assert result.data is False

    def test_ok_without_value_is_rejected(self):
        """A success must carry a payload; missing values go through fail()"""
        with pytest.raises(ValueError, match="requires a value"):
            Result.ok(None)


class TestParseErrorCode:
    """Test recovering tags from failure messages"""

    @pytest.mark.parametrize("message, expected", [
        ("NOT_FOUND: x", ErrorCode.NOT_FOUND),
        ("DUPLICATE_ENTITY: x", ErrorCode.DUPLICATE_ENTITY),
        ("INVALID_PAGING: page_number must be >= 1", ErrorCode.INVALID_PAGING),
        ("GENERIC: boom - ZeroDivisionError", ErrorCode.GENERIC),
        ("Failed to add customer.", ErrorCode.GENERIC),
        ("SOMETHING_ELSE: x", ErrorCode.GENERIC),
        (None, None),
        ("", None),
    ])
    def test_parse(self, message, expected):
        assert parse_error_code(message) is expected


class TestPagedResult:
    """Test PagedResult construction and derived page counts"""

    def test_ok_computes_total_pages(self):
        """10 items in pages of 3 -> 4 pages"""
        page = PagedResult.ok(items=[4, 5, 6], total_count=10, current_page=2, page_size=3)

        assert page.success is True
        assert page.items == [4, 5, 6]
        assert page.total_count == 10
        assert page.current_page == 2
        assert page.page_size == 3
        assert page.total_pages == 4
        assert page.has_next is True
        assert page.has_previous is True

    @pytest.mark.parametrize("total_count, page_size, expected_pages", [
        (0, 5, 0),
        (1, 5, 1),
        (5, 5, 1),
        (6, 5, 2),
        (10, 1, 10),
    ])
    def test_total_pages_is_ceiling(self, total_count, page_size, expected_pages):
        page = PagedResult.ok(items=[], total_count=total_count, current_page=1, page_size=page_size)

        assert page.total_pages == expected_pages

    def test_ok_copies_items_into_a_list(self):
        page = PagedResult.ok(items=(1, 2), total_count=2, current_page=1, page_size=2)

        assert page.items == [1, 2]
        assert page.has_next is False
        assert page.has_previous is False

    def test_fail_has_no_items_and_no_pages(self):
        page = PagedResult.fail_with(ErrorCode.GENERIC, "Unexpected error")

        assert page.success is False
        assert page.items == []
        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.error == "GENERIC: Unexpected error"
        assert not page
