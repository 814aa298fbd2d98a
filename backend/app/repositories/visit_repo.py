"""Upcoming visits read from the visits table."""

from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import contains_eager

from app.db.base import Owner as DbOwner
from app.db.base import Pet as DbPet
from app.db.base import Visit as DbVisit
from app.domain.entities import UpcomingVisit
from app.domain.interfaces import IVisitReader


class VisitRepository(IVisitReader):
    """Repository for visit read operations."""

    def __init__(self, db_session) -> None:
        self.db = db_session

    def get_between(self, start: date, end: date) -> List[UpcomingVisit]:
        stmt = (
            select(DbVisit)
            .join(DbVisit.pet)
            .join(DbPet.owner)
            .where(DbVisit.visit_date >= start, DbVisit.visit_date <= end)
            .order_by(DbVisit.visit_date, DbVisit.id)
            .options(contains_eager(DbVisit.pet).contains_eager(DbPet.owner))
        )
        return [self._to_domain(v) for v in self.db.scalars(stmt).all()]

    def _to_domain(self, db_visit: DbVisit) -> UpcomingVisit:
        owner: DbOwner = db_visit.pet.owner
        return UpcomingVisit(
            visit_id=db_visit.id,
            visit_date=db_visit.visit_date,
            description=db_visit.description,
            pet_name=db_visit.pet.name,
            owner_id=owner.id,
            owner_name=f"{owner.first_name} {owner.last_name}",
        )
