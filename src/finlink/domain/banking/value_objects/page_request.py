"""Offset pagination window for transaction listings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
# Largest OFFSET a 64-bit SQL integer can hold
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """A sanitized (page, page_size) pair.

    Use ``sanitized`` to build one from raw client input. Out-of-range values
    are clamped silently, never rejected.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def sanitized(
        cls,
        page: int | None = None,
        page_size: int | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> PageRequest:
        """Clamp raw values into a valid window.

        Parameters
        ----------
        page
            Requested 1-based page, ``None`` means the first page
        page_size
            Requested page size, ``None`` means ``default_page_size``
        default_page_size
            Size used when none is requested
        max_page_size
            Upper bound for the page size

        Returns
        -------
        PageRequest with ``page >= 1`` and ``1 <= page_size <= max_page_size``.
        ``page`` is also capped so that ``offset`` never exceeds ``MAX_OFFSET``;
        such a page is simply empty.
        """
        if page_size is None:
            page_size = default_page_size
        page_size = min(max(page_size, 1), max(max_page_size, 1))
        page = max(page if page is not None else DEFAULT_PAGE, 1)
        page = min(page, MAX_OFFSET // page_size + 1)
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def has_more(self, total: int) -> bool:
        """Whether items exist beyond this window."""
        return self.offset + self.page_size < total
