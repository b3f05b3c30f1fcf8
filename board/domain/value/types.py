"""Domain value objects for the comment board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for author details and paging input.
"""

import re
from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject, ValueObject

_USER_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_HOME_PAGE_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)


class UserName(RootValueObject[str]):
    """Display name of a comment author.

    ASCII letters and digits only, 1-100 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        """Validate user name format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("User name must be 1-100 characters")
        if not _USER_NAME_PATTERN.match(v):
            raise ValueError("User name may contain only Latin letters and digits")
        return v


class Email(RootValueObject[str]):
    """Author email address. Used as the soft identity key for users."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and length."""
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Email must look like name@domain.tld")
        return v


class HomePage(RootValueObject[str]):
    """Optional author home page, an absolute http(s) URL."""

    @field_validator("root")
    @classmethod
    def validate_home_page(cls, v: str) -> str:
        """Validate home page URL."""
        if len(v) > 500:
            raise ValueError("Home page must be at most 500 characters")
        if not _HOME_PAGE_PATTERN.match(v):
            raise ValueError("Home page must start with http:// or https://")
        return v


class SortField(str, Enum):
    """Field that top-level comments are ordered by."""

    CREATED_AT = "createdAt"
    USER_NAME = "userName"
    EMAIL = "email"

    @classmethod
    def parse(cls, value: str | None) -> "SortField":
        """Parse a client-supplied sort field.

        Matching ignores case and underscores, so ``userName``,
        ``username`` and ``user_name`` are all accepted. Anything
        unrecognised falls back to ``createdAt``.
        """
        if not value:
            return cls.CREATED_AT
        wanted = value.replace("_", "").casefold()
        for field in cls:
            if field.value.casefold() == wanted:
                return field
        return cls.CREATED_AT


DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100


class PageRequest(ValueObject):
    """Normalized paging and ordering input for comment reads.

    Build instances with :meth:`normalize`; it never rejects input,
    it clamps it.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: SortField = SortField.CREATED_AT
    ascending: bool = False

    @classmethod
    def normalize(
        cls,
        page: int | None = None,
        page_size: int | None = None,
        sort_by: str | None = None,
        ascending: bool | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        """Clamp raw paging input into a valid request.

        Args:
            page: Requested page, values below 1 become 1
            page_size: Requested size, clamped to [1, max_page_size]
            sort_by: Sort field name, unknown values become createdAt
            ascending: Direction, defaults to newest first
            default_page_size: Size used when none was given
            max_page_size: Upper bound for page_size

        Returns:
            Normalized page request
        """
        size = default_page_size if page_size is None else page_size
        return cls(
            page=max(1, page if page is not None else 1),
            page_size=min(max(1, size), max_page_size),
            sort_by=SortField.parse(sort_by),
            ascending=bool(ascending) if ascending is not None else False,
        )

    @property
    def offset(self) -> int:
        """Number of top-level comments skipped before this page."""
        return (self.page - 1) * self.page_size
