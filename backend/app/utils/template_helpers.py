"""Template helper functions for consistent UI rendering.

This module provides Jinja2 template functions for:
- Date formatting
- Pagination links that keep the active filters
- Specialty labels for the vet directory
"""

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Union
from urllib.parse import urlencode

from flask import url_for

logger = logging.getLogger(__name__)


def format_date(value: Union[date, datetime, str, None], fmt: str = "%Y-%m-%d") -> str:
    """Format a date for display.

    Args:
        value: date/datetime object, ISO string or None
        fmt: strftime format

    Returns:
        Formatted date, or an empty string when the value is missing

    Examples:
        format_date(date(2013, 1, 1))  # "2013-01-01"
        format_date(None)              # ""
    """
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            logger.warning(
                "Unparseable date passed to format_date",
                extra={"context": {"value": value}},
            )
            return value
    return value.strftime(fmt)


def page_url(endpoint: str, listing, page_number: Optional[int] = None, **values) -> str:
    """URL of a listing page carrying every active filter.

    ``listing`` is the ShowListing being rendered. With ``page_number`` the
    link targets that page; without it the link keeps the filters only.
    """
    params = listing.params_for_page(page_number) if page_number else listing.params
    base = url_for(endpoint, **values)
    if not params:
        return base
    return f"{base}?{urlencode(params)}"


def specialty_label(specialties: Iterable[str], empty: str = "none") -> str:
    """Space separated specialty names, or ``empty`` for a vet without any."""
    names = list(specialties or ())
    return " ".join(names) if names else empty
