"""
Shared SQLAlchemy implementation of the CRUD repository contract
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from qanyare.domain.entities.base import CamelModel, utc_now
from qanyare.domain.repositories.crud_repository import CrudRepository
from qanyare.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyCrudRepository(CrudRepository):
    """
    Maps one ORM model onto one record schema.

    Subclasses set ``model`` and ``record_type``; ``timestamped`` entities get
    ``created_at`` on insert and ``newest_first`` entities are listed by
    ``created_at`` descending instead of by id.
    """

    model: Type[Any]
    record_type: Type[CamelModel]
    timestamped: bool = False
    newest_first: bool = False

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self._logger = logging.getLogger(self.__class__.__name__)

    async def list(self) -> List[Any]:
        """Return every record in listing order"""
        return self._select()

    async def get(self, record_id: int) -> Optional[Any]:
        """Find record by ID"""
        with managed_session(self._session_factory) as session:
            row = session.get(self.model, record_id)
            if row is None:
                return None
            return self._to_record(row)

    async def create(self, data: CamelModel) -> Any:
        """Insert a record and return it with its assigned id"""
        values = self._to_row_values(data.model_dump())
        if self.timestamped:
            values["created_at"] = utc_now()

        with managed_session(self._session_factory) as session:
            row = self.model(**values)
            session.add(row)
            session.flush()
            session.refresh(row)
            record = self._to_record(row)

        self._logger.info("Created %s %s", self.model.__tablename__, record.id)
        return record

    async def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[Any]:
        """Merge the given fields into an existing record"""
        with managed_session(self._session_factory) as session:
            row = session.get(self.model, record_id)
            if row is None:
                return None

            for field_name, value in self._to_row_values(changes).items():
                setattr(row, field_name, value)
            session.flush()
            session.refresh(row)
            return self._to_record(row)

    async def delete(self, record_id: int) -> bool:
        """Delete record by ID"""
        with managed_session(self._session_factory) as session:
            row = session.get(self.model, record_id)
            if row is None:
                return False

            session.delete(row)

        self._logger.info("Deleted %s %s", self.model.__tablename__, record_id)
        return True

    async def count(self) -> int:
        with managed_session(self._session_factory) as session:
            return session.query(func.count(self.model.id)).scalar() or 0

    def _select(self, *criteria: Any) -> List[Any]:
        """Run a filtered listing query in the collection's order"""
        with managed_session(self._session_factory) as session:
            query = session.query(self.model)
            if criteria:
                query = query.filter(*criteria)
            rows = self._ordered(query).all()
            return [self._to_record(row) for row in rows]

    def _ordered(self, query: Query) -> Query:
        if self.newest_first:
            return query.order_by(self.model.created_at.desc(), self.model.id.desc())
        return query.order_by(self.model.id)

    def _to_row_values(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Convert schema values to column values"""
        return dict(values)

    def _to_record(self, row: Any) -> Any:
        """Map an ORM row to its record schema"""
        return self.record_type.model_validate(row)
