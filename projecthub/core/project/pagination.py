"""Pagination helper for list queries.

Turns raw ``page``/``limit``/``sort_by``/``sort_dir`` request values into
a ``PageRequest`` the stores can apply directly. Out-of-range or unknown
values are replaced with defaults rather than rejected.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..constants import (
    DEFAULT_PAGE,
    DEFAULT_PROJECT_SORT_FIELD,
    DEFAULT_SORT_DIR,
    MAX_QUERY_OFFSET,
    PROJECT_SORT_FIELDS,
    SORT_ASC,
    SORT_DESC,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRequest:
    """A normalized, 1-based page window with ordering."""

    page: int
    limit: int
    sort_by: str
    sort_dir: str

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def descending(self) -> bool:
        return self.sort_dir == SORT_DESC


class PaginationHelper:
    """Normalizes pagination and sort inputs."""

    def __init__(
        self,
        sortable_fields: Sequence[str] = PROJECT_SORT_FIELDS,
        default_sort_field: str = DEFAULT_PROJECT_SORT_FIELD,
        default_sort_dir: str = DEFAULT_SORT_DIR,
    ):
        if default_sort_field not in sortable_fields:
            raise ValueError(f"Default sort field '{default_sort_field}' is not sortable")
        self.sortable_fields = tuple(sortable_fields)
        self.default_sort_field = default_sort_field
        self.default_sort_dir = default_sort_dir

    def normalize_page(self, page: Optional[int]) -> int:
        if page is None or page < DEFAULT_PAGE:
            return DEFAULT_PAGE
        return page

    def normalize_limit(self, limit: Optional[int], default: int, maximum: int) -> int:
        if limit is None or limit < 1:
            return default
        return min(limit, maximum)

    def normalize_sort_field(self, sort_by: Optional[str]) -> str:
        if sort_by and sort_by in self.sortable_fields:
            return sort_by
        if sort_by:
            logger.debug(f"Unknown sort field '{sort_by}', using '{self.default_sort_field}'")
        return self.default_sort_field

    def normalize_sort_dir(self, sort_dir: Optional[str]) -> str:
        direction = (sort_dir or "").strip().lower()
        if direction in (SORT_ASC, SORT_DESC):
            return direction
        return self.default_sort_dir

    def build_page_request(
        self,
        page: int,
        limit: int,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
    ) -> PageRequest:
        # Pages past the last representable offset are empty anyway
        last_page = MAX_QUERY_OFFSET // limit + 1
        if page > last_page:
            logger.debug(f"Page {page} is beyond the last addressable page, using {last_page}")
            page = last_page
        return PageRequest(
            page=page,
            limit=limit,
            sort_by=self.normalize_sort_field(sort_by),
            sort_dir=self.normalize_sort_dir(sort_dir),
        )
