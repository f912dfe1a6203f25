"""SQLAlchemy Author Store — AuthorStore implementation over the authors table.

Invariants:
    - Sort criteria applied in the order given, one ORDER BY term each
    - Unknown sort fields or directions rejected before any SQL is sent
    - SQLAlchemy failures surface as DatabaseError, never as raw driver errors
    - Rows leave the store as frozen AuthorRecord projections

Design Decisions:
    - Whitelist of sortable columns from the mapper: request-controlled strings
      never reach the SQL text
    - Store wraps an AsyncSession it does not own: the caller (get_db) manages
      the session lifecycle and rollback
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import SortCriterion, SortDirection
from catalog.core.errors import DataAccessFailure, DatabaseError
from catalog.models.author import Author
from catalog.schemas.author import AuthorRecord

logger = logging.getLogger(__name__)

_SORTABLE_COLUMNS = {
    "first_name": Author.first_name,
    "family_name": Author.family_name,
    "date_of_birth": Author.date_of_birth,
    "date_of_death": Author.date_of_death,
}


def _order_by_clauses(sort: Sequence[SortCriterion]) -> list:
    clauses = []
    for field, direction in sort:
        column = _SORTABLE_COLUMNS.get(field)
        if column is None:
            raise DataAccessFailure(f"Unknown sort field '{field}'")
        try:
            direction = SortDirection(direction)
        except ValueError as e:
            raise DataAccessFailure(f"Unknown sort direction '{direction}'") from e
        clauses.append(
            column.asc() if direction == SortDirection.ASCENDING else column.desc(),
        )
    return clauses


class SqlAlchemyAuthorStore:
    """Reads authors through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(
        self, sort: Sequence[SortCriterion] | None = None,
    ) -> list[AuthorRecord]:
        stmt = select(Author)
        if sort:
            stmt = stmt.order_by(*_order_by_clauses(sort))
        try:
            result = await self._db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Author query failed: {e}", extra={"operation": "query"})
            raise DatabaseError("Author query failed", "query") from e
        return [
            AuthorRecord.model_validate(row) for row in result.scalars().all()
        ]
