"""Counts matches, then fetches the requested page of a filtered collection."""

import logging
from typing import Generic, TypeVar

from app.domain.interfaces import IEntityCollection
from app.domain.paging import PageRequest, PageResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatedQueryExecutor(Generic[T]):
    """Runs a predicate against an entity collection and returns one page.

    The collection owns the ordering; the executor only asks for the global
    match count and the requested slice.
    """

    def __init__(self, collection: IEntityCollection[T]):
        self.collection = collection

    def execute(self, predicate, page_request: PageRequest) -> PageResult[T]:
        total = self.collection.count(predicate)
        expected = PageResult.expected_length(
            total, page_request.page_number, page_request.page_size
        )

        if expected == 0:
            # Nothing to fetch on an empty set or a page past the end
            items = ()
        else:
            items = tuple(
                self.collection.page(
                    predicate, page_request.page_number, page_request.page_size
                )
            )[:expected]

        logger.debug(
            "Query executed",
            extra={
                "context": {
                    "predicate": repr(predicate),
                    "page": page_request.page_number,
                    "total": total,
                    "returned": len(items),
                }
            },
        )
        return PageResult(
            items=items,
            total_matching=total,
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        )
