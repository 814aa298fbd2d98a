"""
Navigation resolution: redirect on a singleton match, otherwise show the listing.
"""

import logging
from typing import Callable, Iterable, Mapping, Optional, Tuple, Union

from app.domain.paging import NavigationDecision, PageResult, Redirect, ShowListing

logger = logging.getLogger(__name__)

ParamSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _freeze_params(params: Optional[ParamSource]) -> Tuple[Tuple[str, str], ...]:
    if params is None:
        return ()
    pairs = params.items() if isinstance(params, Mapping) else params
    # Cleared filters are omitted, never sent as an empty value
    return tuple((str(k), str(v)) for k, v in pairs if k != "page" and v not in (None, ""))


def resolve_navigation(
    page_result: PageResult,
    preserved_params: Optional[ParamSource] = None,
    fetch_first: Optional[Callable[[], PageResult]] = None,
) -> NavigationDecision:
    """Decide between a redirect and the listing page.

    Args:
        page_result: The requested page and the global match count.
        preserved_params: Active filters to carry into every pagination link.
        fetch_first: Loads page 1 when a single match exists but the requested
            page is past it, so the redirect target is still known.

    Returns:
        Redirect when exactly one entity matches across the whole filtered
        set, ShowListing otherwise (flagged ``not_found`` when nothing matched).
    """
    params = _freeze_params(preserved_params)

    if page_result.total_matching == 1:
        source = page_result
        if source.is_empty:
            if fetch_first is None:
                raise ValueError("single match is off-page and no first-page loader was given")
            source = fetch_first()
        entity_id = source.items[0].id
        logger.info(
            "Single match, redirecting to detail view",
            extra={"context": {"entity_id": entity_id, "filters": dict(params)}},
        )
        return Redirect(entity_id)

    if page_result.total_matching == 0:
        logger.info("No matches", extra={"context": {"filters": dict(params)}})
        return ShowListing(page_result=page_result, preserved_params=params, not_found=True)

    logger.debug(
        "Showing listing",
        extra={
            "context": {
                "page": page_result.page_number,
                "total": page_result.total_matching,
                "filters": dict(params),
            }
        },
    )
    return ShowListing(page_result=page_result, preserved_params=params)
