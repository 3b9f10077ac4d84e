"""Unit tests for PageRequest."""

import pytest

from finlink.domain.banking.value_objects import PageRequest
from finlink.domain.banking.value_objects.page_request import MAX_OFFSET


class TestSanitized:
    """Tests for silent clamping of raw pagination input."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(0, 1), (-5, 1), (500, 100), (1, 1), (100, 100), (37, 37)],
    )
    def test_page_size_is_clamped(self, raw, expected):
        assert PageRequest.sanitized(page_size=raw).page_size == expected

    @pytest.mark.parametrize(("raw", "expected"), [(0, 1), (-1, 1), (1, 1), (7, 7)])
    def test_page_is_clamped(self, raw, expected):
        assert PageRequest.sanitized(page=raw).page == expected

    def test_defaults(self):
        window = PageRequest.sanitized()

        assert window.page == 1
        assert window.page_size == 50

    @pytest.mark.parametrize("page_size", [1, 50, 100])
    def test_huge_page_keeps_offset_in_64_bit_range(self, page_size):
        window = PageRequest.sanitized(page=10**20, page_size=page_size)

        assert window.page > 1
        assert window.offset <= MAX_OFFSET
        assert not window.has_more(120)

    def test_custom_default_and_max(self):
        assert PageRequest.sanitized(default_page_size=20).page_size == 20
        assert PageRequest.sanitized(page_size=80, max_page_size=25).page_size == 25


class TestWindow:
    """Tests for offset and has_more."""

    def test_offset(self):
        assert PageRequest.sanitized(page=1, page_size=50).offset == 0
        assert PageRequest.sanitized(page=3, page_size=20).offset == 40

    def test_has_more_for_120_items(self):
        assert PageRequest.sanitized(page=1, page_size=50).has_more(120)
        assert PageRequest.sanitized(page=2, page_size=50).has_more(120)
        assert not PageRequest.sanitized(page=3, page_size=50).has_more(120)

    def test_exact_multiple_has_no_extra_page(self):
        assert not PageRequest.sanitized(page=2, page_size=50).has_more(100)

    def test_empty_collection(self):
        assert not PageRequest.sanitized().has_more(0)
