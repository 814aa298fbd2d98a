"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details, so the
listing engine runs the same against an in-memory list or the database.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Generic, List, Optional, Sequence, TypeVar

from .entities import Owner, UpcomingVisit, Vet

T = TypeVar("T")


class IEntityCollection(ABC, Generic[T]):
    """Read-only collection the paginated query executor runs against.

    ``predicate`` is an ``app.services.predicates.Predicate``. Implementations
    must apply one stable ordering so page boundaries are reproducible.
    """

    @abstractmethod
    def count(self, predicate) -> int:
        """Count every entity satisfying the predicate."""
        pass

    @abstractmethod
    def page(self, predicate, page_number: int, page_size: int) -> Sequence[T]:
        """Return the ordered slice [(page_number-1)*page_size, page_number*page_size)."""
        pass


class IOwnerReader(IEntityCollection[Owner]):
    """Interface for owner read operations."""

    @abstractmethod
    def get_by_id(self, owner_id: int) -> Optional[Owner]:
        """Get owner by ID, pets and visits included."""
        pass


class IVetReader(IEntityCollection[Vet]):
    """Interface for vet read operations."""

    @abstractmethod
    def get_by_id(self, vet_id: int) -> Optional[Vet]:
        """Get vet by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[Vet]:
        """Get every vet, ordered."""
        pass

    @abstractmethod
    def list_specialty_names(self, predicate=None) -> List[str]:
        """Sorted specialty names.

        Without a predicate every specialty known to the clinic is returned;
        with one, only the names held by the vets it matches.
        """
        pass


class IVisitReader(ABC):
    """Interface for visit read operations."""

    @abstractmethod
    def get_between(self, start: date, end: date) -> List[UpcomingVisit]:
        """Visits dated within [start, end], ordered by date ascending."""
        pass
