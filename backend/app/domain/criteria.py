"""
Filter criteria value objects for the owner and vet listings.

A criteria object is built only from validated input: construction either
succeeds with every field valid or raises ValidationError. Absent filters are
stored as None and never as an empty string.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from app.core.exceptions import ValidationError

TELEPHONE_PATTERN = re.compile(r"^[0-9]+$")
TELEPHONE_REASON = "must contain only numeric characters"

# Wire value of the "vet has no specialties" filter
NO_SPECIALTY_TOKEN = "none"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class OwnerCriteria:
    """Validated filters of the owner directory."""

    last_name: Optional[str] = None
    telephone: Optional[str] = None
    city: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "last_name", _blank_to_none(self.last_name))
        object.__setattr__(self, "telephone", _blank_to_none(self.telephone))
        object.__setattr__(self, "city", _blank_to_none(self.city))
        if self.telephone is not None and not TELEPHONE_PATTERN.match(self.telephone):
            raise ValidationError("telephone", TELEPHONE_REASON)

    @property
    def is_empty(self) -> bool:
        return self.last_name is None and self.telephone is None and self.city is None

    def to_query_params(self) -> Dict[str, str]:
        """Active filters keyed by their query parameter names."""
        params = {}
        if self.last_name is not None:
            params["lastName"] = self.last_name
        if self.telephone is not None:
            params["telephone"] = self.telephone
        if self.city is not None:
            params["city"] = self.city
        return params


class SpecialtyFilterKind(Enum):
    ANY = "any"
    NAMED = "named"
    NO_SPECIALTY = "no_specialty"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SpecialtyFilter:
    """Tagged specialty filter.

    ANY matches every vet, NAMED matches vets holding ``name``, NO_SPECIALTY
    matches vets without specialties and UNKNOWN (a name no vet can hold)
    matches nothing. ``name`` is set for NAMED and UNKNOWN only.
    """

    kind: SpecialtyFilterKind = SpecialtyFilterKind.ANY
    name: Optional[str] = None

    @classmethod
    def any(cls) -> "SpecialtyFilter":
        return cls(SpecialtyFilterKind.ANY)

    @classmethod
    def named(cls, name: str) -> "SpecialtyFilter":
        return cls(SpecialtyFilterKind.NAMED, name)

    @classmethod
    def no_specialty(cls) -> "SpecialtyFilter":
        return cls(SpecialtyFilterKind.NO_SPECIALTY)

    @classmethod
    def unknown(cls, name: str) -> "SpecialtyFilter":
        return cls(SpecialtyFilterKind.UNKNOWN, name)

    @property
    def is_active(self) -> bool:
        return self.kind is not SpecialtyFilterKind.ANY

    def to_query_value(self) -> Optional[str]:
        if self.kind is SpecialtyFilterKind.ANY:
            return None
        if self.kind is SpecialtyFilterKind.NO_SPECIALTY:
            return NO_SPECIALTY_TOKEN
        return self.name


@dataclass(frozen=True)
class VetCriteria:
    """Validated filters of the vet directory."""

    last_name: Optional[str] = None
    specialty: SpecialtyFilter = field(default_factory=SpecialtyFilter.any)

    def __post_init__(self):
        object.__setattr__(self, "last_name", _blank_to_none(self.last_name))

    @property
    def is_empty(self) -> bool:
        return self.last_name is None and not self.specialty.is_active

    def to_query_params(self) -> Dict[str, str]:
        params = {}
        if self.last_name is not None:
            params["lastName"] = self.last_name
        specialty = self.specialty.to_query_value()
        if specialty is not None:
            params["specialty"] = specialty
        return params
