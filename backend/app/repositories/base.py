"""Shared plumbing for the SQLAlchemy-backed entity collections."""

from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from sqlalchemy import func, select

T = TypeVar("T")


class ColumnMap:
    """Resolves predicate field names to mapped columns of one model."""

    def __init__(self, columns: Dict[str, Any], specialties=None, specialty_name=None):
        self._columns = columns
        self._specialties = specialties
        self._specialty_name = specialty_name

    def column(self, field: str):
        try:
            return self._columns[field]
        except KeyError:
            raise ValueError(f"Field '{field}' cannot be filtered") from None

    def specialties(self):
        if self._specialties is None:
            raise ValueError("Entity has no specialty relation")
        return self._specialties

    def specialty_name(self):
        return self._specialty_name


class SqlAlchemyEntityCollection(Generic[T]):
    """count/page over one mapped model with a fixed ordering.

    Subclasses set ``model``, ``column_map`` and ``ordering`` and implement
    ``_to_domain``; ``_load_options`` controls eager loading of the page.
    """

    model: Any = None
    column_map: Optional[ColumnMap] = None
    ordering: Sequence[Any] = ()

    def __init__(self, db_session) -> None:
        self.db = db_session

    def _load_options(self) -> List[Any]:
        return []

    def _to_domain(self, row) -> T:  # pragma: no cover - interface definition
        raise NotImplementedError

    def _where(self, predicate):
        return predicate.to_clause(self.column_map)

    def count(self, predicate) -> int:
        stmt = select(func.count()).select_from(self.model).where(self._where(predicate))
        return self.db.scalar(stmt) or 0

    def page(self, predicate, page_number: int, page_size: int) -> List[T]:
        stmt = (
            select(self.model)
            .where(self._where(predicate))
            .order_by(*self.ordering)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
            .options(*self._load_options())
        )
        return [self._to_domain(row) for row in self.db.scalars(stmt).all()]

    def matching(self, predicate) -> List[T]:
        """Every entity satisfying the predicate, ordered."""
        stmt = (
            select(self.model)
            .where(self._where(predicate))
            .order_by(*self.ordering)
            .options(*self._load_options())
        )
        return [self._to_domain(row) for row in self.db.scalars(stmt).all()]
