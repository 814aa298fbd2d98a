"""
Schemas package - Data Transfer Objects.

This package contains DTOs that define the JSON contracts of the API.
"""

from .dtos import ErrorResponse, SpecialtyResponse, VetListResponse, VetResponse

__all__ = [
    # Vet DTOs
    "SpecialtyResponse",
    "VetResponse",
    "VetListResponse",
    # Common DTOs
    "ErrorResponse",
]
