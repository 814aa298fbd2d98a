"""Upcoming visits: the look-ahead window and its listing."""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, List, Optional, Tuple

from app.core import config
from app.domain.entities import UpcomingVisit
from app.domain.interfaces import IVisitReader

logger = logging.getLogger(__name__)


def coerce_days(value: Any, default: Optional[int] = None) -> int:
    """Parse the look-ahead window; non-numeric falls back to the default, negative to 0."""
    fallback = config.UPCOMING_VISITS_DEFAULT_DAYS if default is None else default
    if value is None or str(value).strip() == "":
        return fallback
    try:
        days = int(str(value).strip())
    except (TypeError, ValueError):
        return fallback
    return max(days, 0)


def _today() -> date:
    return datetime.now(config.APP_TZ).date()


class UpcomingVisitService:
    """Lists visits scheduled between today and today + N days, inclusive."""

    def __init__(self, visit_reader: IVisitReader, today: Optional[Callable[[], date]] = None):
        self.visit_reader = visit_reader
        self.today = today or _today

    def upcoming(self, days_param: Any = None) -> Tuple[int, List[UpcomingVisit]]:
        days = coerce_days(days_param)
        start = self.today()
        # A window reaching past date.max ends there
        end = start + timedelta(days=min(days, (date.max - start).days))
        visits = self.visit_reader.get_between(start, end)
        logger.info(
            "Upcoming visits listed",
            extra={
                "context": {
                    "start": start.isoformat(),
                    "end": end.isoformat(),
                    "count": len(visits),
                }
            },
        )
        return days, visits
