"""
Data Transfer Objects (DTOs) for the JSON endpoints.

Each DTO builds itself from a domain entity and serializes to the camelCase
keys machine clients expect.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SpecialtyResponse:
    """DTO for one specialty of a vet."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass
class VetResponse:
    """DTO for vet API responses."""

    id: int
    first_name: str
    last_name: str
    specialties: List[SpecialtyResponse] = field(default_factory=list)

    @classmethod
    def from_domain(cls, vet) -> "VetResponse":
        """Create response from domain entity."""
        return cls(
            id=vet.id,
            first_name=vet.first_name,
            last_name=vet.last_name,
            specialties=[SpecialtyResponse(name) for name in vet.specialties],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "specialties": [s.to_dict() for s in self.specialties],
            "nrOfSpecialties": len(self.specialties),
        }


@dataclass
class VetListResponse:
    """DTO for the vet resource listing."""

    vets: List[VetResponse]

    @classmethod
    def from_domain(cls, vets) -> "VetListResponse":
        return cls(vets=[VetResponse.from_domain(v) for v in vets])

    def to_dict(self) -> Dict[str, Any]:
        return {"vetList": [v.to_dict() for v in self.vets]}


@dataclass
class ErrorResponse:
    """DTO for error responses."""

    error: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            data["details"] = self.details
        return data
