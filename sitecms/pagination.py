"""Page/limit normalisation shared by every list read."""
from typing import NamedTuple

from sitecms.config import settings
from sitecms.exceptions import InvalidPagination


class Pagination(NamedTuple):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        """SQL OFFSET for this page."""
        return (self.page - 1) * self.limit


def normalize(page: int | None = None, limit: int | None = None) -> Pagination:
    """
    Fill in defaults and check bounds.

    Out-of-range values are rejected rather than clamped: the HTTP layer
    validates the same bounds, so anything reaching here out of range is
    a programming error.
    """
    page = 1 if page is None else page
    limit = settings.DEFAULT_PAGE_SIZE if limit is None else limit

    if page < 1:
        raise InvalidPagination(f"page must be >= 1, got {page}")
    if not 1 <= limit <= settings.MAX_PAGE_SIZE:
        raise InvalidPagination(
            f"limit must be between 1 and {settings.MAX_PAGE_SIZE}, got {limit}"
        )
    return Pagination(page, limit)
