"""
Query parameter validation for the owner and vet directories.

Validators take the raw ``request.args`` mapping and return a criteria value
object, or raise ValidationError before anything is queried. Page numbers are
never a validation failure: bad input falls back to page 1.
"""

import logging
from typing import Any, Mapping, Optional

from app.core.exceptions import ValidationError
from app.domain.criteria import (
    NO_SPECIALTY_TOKEN,
    OwnerCriteria,
    SpecialtyFilter,
    VetCriteria,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ValidationError",
    "BaseValidator",
    "OwnerCriteriaValidator",
    "VetCriteriaValidator",
    "coerce_page_number",
]


def coerce_page_number(value: Any) -> int:
    """Parse a page parameter; non-numeric or < 1 becomes 1."""
    if value is None or isinstance(value, bool):
        return 1
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        logger.debug("Non-numeric page parameter coerced to 1", extra={"context": {"page": value}})
        return 1
    return page if page >= 1 else 1


class BaseValidator:
    """Base validator with common field helpers."""

    def validate(self, args: Mapping[str, Any]):  # pragma: no cover - interface definition
        """Build criteria from raw query parameters."""
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def text_filter(args: Mapping[str, Any], name: str) -> Optional[str]:
        """Free-text filter: any value is valid, blank means no filter."""
        value = args.get(name)
        if value is None:
            return None
        value = str(value).strip()
        return value or None


class OwnerCriteriaValidator(BaseValidator):
    """Validates ``lastName``, ``telephone`` and ``city`` of the owner search."""

    def validate(self, args: Mapping[str, Any]) -> OwnerCriteria:
        try:
            return OwnerCriteria(
                last_name=self.text_filter(args, "lastName"),
                telephone=self.text_filter(args, "telephone"),
                city=self.text_filter(args, "city"),
            )
        except ValidationError as e:
            logger.warning(
                f"Validation error: {e.field}: {e.reason}",
                extra={"context": {"field": e.field, "value": args.get(e.field)}},
            )
            raise


class VetCriteriaValidator(BaseValidator):
    """Validates ``lastName`` and ``specialty`` of the vet directory.

    Specialty values are not checked against the known names here; a name no
    vet holds is a filter that matches nothing, not malformed input.
    """

    def validate(self, args: Mapping[str, Any]) -> VetCriteria:
        return VetCriteria(
            last_name=self.text_filter(args, "lastName"),
            specialty=self.specialty_filter(args),
        )

    def specialty_filter(self, args: Mapping[str, Any]) -> SpecialtyFilter:
        value = self.text_filter(args, "specialty")
        if value is None:
            return SpecialtyFilter.any()
        if value.lower() == NO_SPECIALTY_TOKEN:
            return SpecialtyFilter.no_specialty()
        return SpecialtyFilter.named(value)
