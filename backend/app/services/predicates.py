"""Composable filter predicates for the directory listings.

A predicate is evaluated in two ways that must agree:

- called on a domain entity (``predicate(owner) -> bool``) for in-memory
  collections;
- translated into a SQLAlchemy clause by ``to_clause(columns)`` so the
  repositories can count and page in the database.

``columns`` is supplied by the repository and maps entity attribute names to
mapped columns (see ``app.repositories.base.ColumnMap``).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

from sqlalchemy import and_, false, func, true

from app.core import config
from app.domain.criteria import OwnerCriteria, VetCriteria
from app.services.specialty_classifier import classify_specialty, specialty_predicate


class Predicate(ABC):
    """Boolean function over an entity."""

    @abstractmethod
    def __call__(self, entity: Any) -> bool:
        pass

    @abstractmethod
    def to_clause(self, columns):
        """Return the equivalent SQLAlchemy boolean expression."""
        pass

    def __and__(self, other: "Predicate") -> "Predicate":
        return all_of([self, other])


def _text(entity: Any, field: str) -> str:
    return getattr(entity, field, None) or ""


@dataclass(frozen=True)
class Always(Predicate):
    """Identity predicate used when no criterion is active."""

    def __call__(self, entity: Any) -> bool:
        return True

    def to_clause(self, columns):
        return true()


@dataclass(frozen=True)
class Never(Predicate):
    def __call__(self, entity: Any) -> bool:
        return False

    def to_clause(self, columns):
        return false()


@dataclass(frozen=True)
class Contains(Predicate):
    """Substring containment, anchored nowhere."""

    field: str
    value: str
    case_sensitive: bool = False

    def __call__(self, entity: Any) -> bool:
        if self.case_sensitive:
            return self.value in _text(entity, self.field)
        return self.value.lower() in _text(entity, self.field).lower()

    def to_clause(self, columns):
        column = columns.column(self.field)
        if self.case_sensitive:
            return column.contains(self.value, autoescape=True)
        return func.lower(column).contains(self.value.lower(), autoescape=True)


@dataclass(frozen=True)
class StartsWith(Predicate):
    field: str
    value: str
    case_sensitive: bool = False

    def __call__(self, entity: Any) -> bool:
        if self.case_sensitive:
            return _text(entity, self.field).startswith(self.value)
        return _text(entity, self.field).lower().startswith(self.value.lower())

    def to_clause(self, columns):
        column = columns.column(self.field)
        if self.case_sensitive:
            return column.startswith(self.value, autoescape=True)
        return func.lower(column).startswith(self.value.lower(), autoescape=True)


@dataclass(frozen=True)
class Equals(Predicate):
    """Full equality with the stored value."""

    field: str
    value: str
    case_sensitive: bool = True

    def __call__(self, entity: Any) -> bool:
        if self.case_sensitive:
            return _text(entity, self.field) == self.value
        return _text(entity, self.field).lower() == self.value.lower()

    def to_clause(self, columns):
        column = columns.column(self.field)
        if self.case_sensitive:
            return column == self.value
        return func.lower(column) == self.value.lower()


@dataclass(frozen=True)
class HasSpecialty(Predicate):
    """Vet holds a specialty with this name (case-insensitive)."""

    name: str

    def __call__(self, entity: Any) -> bool:
        return entity.has_specialty(self.name)

    def to_clause(self, columns):
        return columns.specialties().any(
            func.lower(columns.specialty_name()) == self.name.lower()
        )


@dataclass(frozen=True)
class HasNoSpecialties(Predicate):
    def __call__(self, entity: Any) -> bool:
        return entity.nr_of_specialties == 0

    def to_clause(self, columns):
        return ~columns.specialties().any()


@dataclass(frozen=True)
class AllOf(Predicate):
    """Strict conjunction of its parts."""

    parts: Tuple[Predicate, ...]

    def __call__(self, entity: Any) -> bool:
        return all(part(entity) for part in self.parts)

    def to_clause(self, columns):
        return and_(*(part.to_clause(columns) for part in self.parts))


def all_of(parts: Iterable[Predicate]) -> Predicate:
    """AND the given predicates, dropping no-ops.

    Returns Always for no active part and Never as soon as one part is Never.
    """
    flat = []
    for part in parts:
        if isinstance(part, Always):
            continue
        if isinstance(part, Never):
            return Never()
        if isinstance(part, AllOf):
            flat.extend(part.parts)
        else:
            flat.append(part)
    if not flat:
        return Always()
    if len(flat) == 1:
        return flat[0]
    return AllOf(tuple(flat))


def _case_sensitive(value: Optional[bool]) -> bool:
    return config.SEARCH_CASE_SENSITIVE if value is None else value


def build_owner_predicate(
    criteria: OwnerCriteria, case_sensitive: Optional[bool] = None
) -> Predicate:
    """Owner filter: last name substring AND telephone exact AND city exact."""
    sensitive = _case_sensitive(case_sensitive)
    parts = []
    if criteria.last_name is not None:
        parts.append(Contains("last_name", criteria.last_name, sensitive))
    if criteria.telephone is not None:
        parts.append(Equals("telephone", criteria.telephone))
    if criteria.city is not None:
        parts.append(Equals("city", criteria.city, sensitive))
    return all_of(parts)


def build_vet_predicate(
    criteria: VetCriteria,
    known_specialties: Sequence[str],
    case_sensitive: Optional[bool] = None,
) -> Predicate:
    """Vet filter: last name prefix AND specialty membership."""
    sensitive = _case_sensitive(case_sensitive)
    parts = []
    if criteria.last_name is not None:
        parts.append(StartsWith("last_name", criteria.last_name, sensitive))
    parts.append(specialty_predicate(classify_specialty(criteria.specialty, known_specialties)))
    return all_of(parts)
