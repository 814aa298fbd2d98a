"""In-memory entity collections.

Evaluate predicates directly on domain entities. Used by the unit tests and
usable wherever the data is already loaded.
"""

from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from app.domain.entities import Owner, UpcomingVisit, Vet
from app.domain.interfaces import IEntityCollection, IOwnerReader, IVetReader, IVisitReader

T = TypeVar("T")


def person_sort_key(entity):
    return (entity.last_name, entity.first_name, entity.id or 0)


class InMemoryEntityCollection(IEntityCollection[T]):
    def __init__(self, entities: Iterable[T], sort_key: Callable = person_sort_key):
        self.entities: List[T] = sorted(entities, key=sort_key)

    def matching(self, predicate) -> List[T]:
        return [e for e in self.entities if predicate(e)]

    def count(self, predicate) -> int:
        return sum(1 for e in self.entities if predicate(e))

    def page(self, predicate, page_number: int, page_size: int) -> Sequence[T]:
        start = (page_number - 1) * page_size
        return self.matching(predicate)[start : start + page_size]

    def _find(self, entity_id: int) -> Optional[T]:
        return next((e for e in self.entities if e.id == entity_id), None)


class InMemoryOwnerReader(InMemoryEntityCollection[Owner], IOwnerReader):
    def get_by_id(self, owner_id: int) -> Optional[Owner]:
        return self._find(owner_id)


class InMemoryVetReader(InMemoryEntityCollection[Vet], IVetReader):
    def __init__(self, vets: Iterable[Vet], specialty_names: Optional[Iterable[str]] = None):
        super().__init__(vets)
        if specialty_names is None:
            specialty_names = {name for vet in self.entities for name in vet.specialties}
        self.specialty_names = sorted(specialty_names, key=str.lower)

    def get_by_id(self, vet_id: int) -> Optional[Vet]:
        return self._find(vet_id)

    def get_all(self) -> List[Vet]:
        return list(self.entities)

    def list_specialty_names(self, predicate=None) -> List[str]:
        if predicate is None:
            return list(self.specialty_names)
        names = {name for vet in self.matching(predicate) for name in vet.specialties}
        return sorted(names, key=str.lower)


class InMemoryVisitReader(IVisitReader):
    def __init__(self, visits: Iterable[UpcomingVisit]):
        self.visits = sorted(visits, key=lambda v: (v.visit_date, v.visit_id))

    def get_between(self, start: date, end: date) -> List[UpcomingVisit]:
        return [v for v in self.visits if start <= v.visit_date <= end]
