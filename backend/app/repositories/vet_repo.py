"""SQLAlchemy-backed vet directory."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.base import Specialty as DbSpecialty
from app.db.base import Vet as DbVet
from app.domain.entities import Vet as DomainVet
from app.domain.interfaces import IVetReader
from app.repositories.base import ColumnMap, SqlAlchemyEntityCollection


class VetRepository(SqlAlchemyEntityCollection[DomainVet], IVetReader):
    """Repository for vet read operations."""

    model = DbVet
    column_map = ColumnMap(
        {"first_name": DbVet.first_name, "last_name": DbVet.last_name},
        specialties=DbVet.specialties,
        specialty_name=DbSpecialty.name,
    )
    ordering = (DbVet.last_name, DbVet.first_name, DbVet.id)

    def _load_options(self) -> List:
        return [selectinload(DbVet.specialties)]

    def get_by_id(self, vet_id: int) -> Optional[DomainVet]:
        db_vet = self.db.get(DbVet, vet_id, options=self._load_options())
        return self._to_domain(db_vet) if db_vet else None

    def get_all(self) -> List[DomainVet]:
        stmt = select(DbVet).order_by(*self.ordering).options(*self._load_options())
        return [self._to_domain(v) for v in self.db.scalars(stmt).all()]

    def list_specialty_names(self, predicate=None) -> List[str]:
        if predicate is None:
            return list(self.db.scalars(select(DbSpecialty.name).order_by(DbSpecialty.name)).all())
        names = {name for vet in self.matching(predicate) for name in vet.specialties}
        return sorted(names, key=str.lower)

    def _to_domain(self, db_vet: DbVet) -> DomainVet:
        return DomainVet(
            id=db_vet.id,
            first_name=db_vet.first_name,
            last_name=db_vet.last_name,
            specialties=tuple(s.name for s in db_vet.specialties),
        )
