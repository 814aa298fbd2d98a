"""
Domain entities - Pure business logic, no framework dependencies.

These are the read-side representations handed to the listing engine and the
templates. Repositories convert SQLAlchemy rows into them.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Tuple


@dataclass
class Visit:
    """A single visit of a pet to the clinic."""

    id: Optional[int] = None
    visit_date: Optional[date] = None
    description: str = ""


@dataclass
class Pet:
    """Domain entity for a pet owned by an Owner."""

    id: Optional[int] = None
    name: str = ""
    birth_date: Optional[date] = None
    type_name: str = ""
    visits: List[Visit] = field(default_factory=list)


@dataclass
class Owner:
    """Domain entity representing a pet owner."""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: List[Pet] = field(default_factory=list)

    def __post_init__(self):
        """Validate domain rules."""
        if not self.last_name:
            raise ValueError("Last name is required")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


def _normalize_specialties(names: Iterable[str]) -> Tuple[str, ...]:
    # Set semantics: one entry per name regardless of letter case
    unique = {}
    for name in names:
        if name and name.lower() not in unique:
            unique[name.lower()] = name
    return tuple(sorted(unique.values(), key=str.lower))


@dataclass
class Vet:
    """Domain entity for a veterinarian and the specialties they practice."""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    specialties: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate domain rules."""
        if not self.last_name:
            raise ValueError("Last name is required")
        self.specialties = _normalize_specialties(self.specialties)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def has_specialty(self, name: str) -> bool:
        """Case-insensitive membership test."""
        wanted = name.lower()
        return any(s.lower() == wanted for s in self.specialties)


@dataclass
class UpcomingVisit:
    """Flattened visit row for the upcoming visits page."""

    visit_id: int
    visit_date: date
    description: str
    pet_name: str
    owner_id: int
    owner_name: str
