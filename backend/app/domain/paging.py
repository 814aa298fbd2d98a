"""
Paging value objects and the navigation decision returned by the listing engine.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

# Listings always show five rows per page
PAGE_SIZE = 5


@dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters."""

    page_number: int = 1
    page_size: int = PAGE_SIZE

    def __post_init__(self):
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of a filtered, ordered result set.

    ``total_matching`` counts the whole filtered set, not only ``items``.
    """

    items: Tuple[T, ...]
    total_matching: int
    page_number: int
    page_size: int = PAGE_SIZE

    @classmethod
    def expected_length(cls, total_matching: int, page_number: int, page_size: int) -> int:
        return min(page_size, max(0, total_matching - page_size * (page_number - 1)))

    @property
    def total_pages(self) -> int:
        if self.total_matching <= 0:
            return 0
        return (self.total_matching + self.page_size - 1) // self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Redirect:
    """Exactly one entity matched: go straight to its detail view."""

    entity_id: int


@dataclass(frozen=True)
class ShowListing(Generic[T]):
    """Render the listing page.

    ``preserved_params`` holds the active filters as (name, value) pairs in a
    stable order; every pagination link is built from them.
    """

    page_result: PageResult[T]
    preserved_params: Tuple[Tuple[str, str], ...] = ()
    not_found: bool = False

    @property
    def params(self) -> Dict[str, str]:
        return dict(self.preserved_params)

    def params_for_page(self, page_number: int) -> Dict[str, str]:
        """Query parameters of a link to ``page_number`` keeping every active filter."""
        params = self.params
        params["page"] = str(page_number)
        return params

    def params_without(self, name: str) -> Dict[str, str]:
        """Query parameters with one filter cleared; the cleared key is omitted."""
        return {k: v for k, v in self.preserved_params if k != name}

    @property
    def page_numbers(self) -> Sequence[int]:
        return range(1, self.page_result.total_pages + 1)

    @property
    def previous_page(self) -> Optional[int]:
        return self.page_result.page_number - 1 if self.page_result.has_previous else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page_result.page_number + 1 if self.page_result.has_next else None

    @property
    def last_page(self) -> int:
        return max(self.page_result.total_pages, 1)


NavigationDecision = Union[Redirect, ShowListing]
