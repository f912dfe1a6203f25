"""Author ORM — persists one catalog author.

Invariants:
    - id is UUID primary key (client-side default)
    - Name columns are nullable: the formatting layer decides how absent names render
    - Date columns are NOT NULL: every stored row can be formatted, so one
      incomplete row never empties the author list

Design Decisions:
    - Date columns over strings: the store returns real dates, the formatter
      still tolerates strings from other sources
    - family_name indexed: the author list is always ordered by it
"""

import uuid
from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Uuid

from catalog.db.base import Base


class Author(Base):
    """A person credited as an author in the catalog."""
    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    family_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True,
    )
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_death: Mapped[date] = mapped_column(Date, nullable=False)
