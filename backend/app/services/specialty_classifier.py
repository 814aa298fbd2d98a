"""Specialty classification for the vet directory."""

import logging
from typing import Iterable

from app.domain.criteria import SpecialtyFilter, SpecialtyFilterKind

logger = logging.getLogger(__name__)


def classify_specialty(specialty_filter: SpecialtyFilter, known_names: Iterable[str]) -> SpecialtyFilter:
    """Refine a NAMED filter against the specialties the clinic knows.

    A name matching a known specialty (case-insensitive) becomes NAMED with
    the stored spelling; any other name becomes UNKNOWN. ANY, NO_SPECIALTY
    and UNKNOWN pass through unchanged.
    """
    if specialty_filter.kind is not SpecialtyFilterKind.NAMED:
        return specialty_filter

    wanted = specialty_filter.name.lower()
    for name in known_names:
        if name.lower() == wanted:
            return SpecialtyFilter.named(name)

    logger.info(
        "Unknown specialty filter, no vet can match",
        extra={"context": {"specialty": specialty_filter.name}},
    )
    return SpecialtyFilter.unknown(specialty_filter.name)


def specialty_predicate(specialty_filter: SpecialtyFilter):
    """Predicate for one classified specialty filter."""
    from app.services.predicates import Always, HasNoSpecialties, HasSpecialty, Never

    kind = specialty_filter.kind
    if kind is SpecialtyFilterKind.ANY:
        return Always()
    if kind is SpecialtyFilterKind.NO_SPECIALTY:
        return HasNoSpecialties()
    if kind is SpecialtyFilterKind.NAMED:
        return HasSpecialty(specialty_filter.name)
    return Never()
