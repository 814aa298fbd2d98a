"""Owner repository implementation.

Counts and pages owners in the database using the same predicate objects the
in-memory collection evaluates directly.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from app.db.base import Owner as DbOwner
from app.db.base import Pet as DbPet
from app.domain.entities import Owner as DomainOwner
from app.domain.entities import Pet as DomainPet
from app.domain.entities import Visit as DomainVisit
from app.domain.interfaces import IOwnerReader
from app.repositories.base import ColumnMap, SqlAlchemyEntityCollection


class OwnerRepository(SqlAlchemyEntityCollection[DomainOwner], IOwnerReader):
    """Repository for owner read operations."""

    model = DbOwner
    column_map = ColumnMap(
        {
            "first_name": DbOwner.first_name,
            "last_name": DbOwner.last_name,
            "city": DbOwner.city,
            "telephone": DbOwner.telephone,
            "address": DbOwner.address,
        }
    )
    ordering = (DbOwner.last_name, DbOwner.first_name, DbOwner.id)

    def _load_options(self) -> List:
        return [
            selectinload(DbOwner.pets).selectinload(DbPet.type),
            selectinload(DbOwner.pets).selectinload(DbPet.visits),
        ]

    def get_by_id(self, owner_id: int) -> Optional[DomainOwner]:
        db_owner = self.db.get(DbOwner, owner_id, options=self._load_options())
        return self._to_domain(db_owner) if db_owner else None

    def _to_domain(self, db_owner: DbOwner) -> DomainOwner:
        """Convert database model to domain entity."""
        return DomainOwner(
            id=db_owner.id,
            first_name=db_owner.first_name,
            last_name=db_owner.last_name,
            address=db_owner.address,
            city=db_owner.city,
            telephone=db_owner.telephone,
            pets=[
                DomainPet(
                    id=pet.id,
                    name=pet.name,
                    birth_date=pet.birth_date,
                    type_name=pet.type.name if pet.type else "",
                    visits=[
                        DomainVisit(
                            id=visit.id,
                            visit_date=visit.visit_date,
                            description=visit.description,
                        )
                        for visit in pet.visits
                    ],
                )
                for pet in db_owner.pets
            ],
        )
