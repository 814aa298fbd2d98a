"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Owner, Pet, Visit and Vet read models
- criteria.py: Validated filter value objects for the directory listings
- paging.py: Page request/result and the navigation decision
- interfaces.py: Repository contracts
"""

from .criteria import OwnerCriteria, SpecialtyFilter, SpecialtyFilterKind, VetCriteria
from .entities import Owner, Pet, UpcomingVisit, Vet, Visit
from .interfaces import IEntityCollection, IOwnerReader, IVetReader, IVisitReader
from .paging import PAGE_SIZE, PageRequest, PageResult, Redirect, ShowListing

__all__ = [
    # Domain entities
    "Owner",
    "Pet",
    "Visit",
    "Vet",
    "UpcomingVisit",
    # Criteria and paging
    "OwnerCriteria",
    "VetCriteria",
    "SpecialtyFilter",
    "SpecialtyFilterKind",
    "PAGE_SIZE",
    "PageRequest",
    "PageResult",
    "Redirect",
    "ShowListing",
    # Repository interfaces
    "IEntityCollection",
    "IOwnerReader",
    "IVetReader",
    "IVisitReader",
]
