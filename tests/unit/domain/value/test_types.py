"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from board.domain.value import (
    MAX_PAGE_SIZE,
    Email,
    HomePage,
    PageRequest,
    SortField,
    UserName,
)


class TestPageRequestNormalize:
    """Paging input is clamped, never rejected."""

    def test_defaults(self):
        """No input gives page 1, 25 per page, newest first."""
        request = PageRequest.normalize()

        assert request.page == 1
        assert request.page_size == 25
        assert request.sort_by is SortField.CREATED_AT
        assert request.ascending is False

    def test_page_size_is_capped(self):
        """pageSize=500 becomes 100."""
        assert PageRequest.normalize(page_size=500).page_size == MAX_PAGE_SIZE

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_page_size_has_a_floor(self, page_size):
        """Sizes below 1 become 1."""
        assert PageRequest.normalize(page_size=page_size).page_size == 1

    @pytest.mark.parametrize("page", [0, -1])
    def test_page_has_a_floor(self, page):
        """page=0 and page=-1 both become 1."""
        assert PageRequest.normalize(page=page).page == 1

    def test_configured_limits(self):
        """Default and maximum page size come from the caller."""
        request = PageRequest.normalize(default_page_size=10, max_page_size=20)
        capped = PageRequest.normalize(page_size=50, max_page_size=20)

        assert request.page_size == 10
        assert capped.page_size == 20

    def test_offset(self):
        """offset skips whole pages."""
        assert PageRequest.normalize(page=3, page_size=10).offset == 20

    def test_is_immutable(self):
        """Normalized requests are frozen."""
        request = PageRequest.normalize()

        with pytest.raises(PydanticValidationError):
            request.page = 2


class TestSortFieldParse:
    """Sort field parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("createdAt", SortField.CREATED_AT),
            ("userName", SortField.USER_NAME),
            ("username", SortField.USER_NAME),
            ("user_name", SortField.USER_NAME),
            ("EMAIL", SortField.EMAIL),
        ],
    )
    def test_known_fields(self, raw, expected):
        """Known names match regardless of case and underscores."""
        assert SortField.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "bogus", "id"])
    def test_unknown_falls_back_to_created_at(self, raw):
        """Anything else sorts by creation time."""
        assert SortField.parse(raw) is SortField.CREATED_AT


class TestAuthorFields:
    """User name, email and home page validation."""

    def test_valid_user_name(self):
        assert UserName("Alice42").root == "Alice42"

    @pytest.mark.parametrize("value", ["", "has space", "dash-ed", "ünï", "a" * 101])
    def test_invalid_user_name(self, value):
        """Only 1-100 Latin letters and digits are accepted."""
        with pytest.raises(PydanticValidationError):
            UserName(value)

    @pytest.mark.parametrize("value", ["plain", "a@b", "a b@c.io", "@c.io"])
    def test_invalid_email(self, value):
        with pytest.raises(PydanticValidationError):
            Email(value)

    def test_valid_home_page(self):
        assert HomePage("https://example.com/me").root == "https://example.com/me"

    @pytest.mark.parametrize("value", ["example.com", "ftp://example.com", "http://"])
    def test_invalid_home_page(self, value):
        """Home pages must be absolute http(s) URLs."""
        with pytest.raises(PydanticValidationError):
            HomePage(value)
