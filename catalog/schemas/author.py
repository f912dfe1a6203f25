"""Author Schemas — read-only projection of stored authors.

Invariants:
    - AuthorRecord is frozen: the service layer only reads records
    - Date fields are required and keep whatever type the source produced
      (date, str or int year); names may be absent

Design Decisions:
    - from_attributes=True: built straight from ORM rows with model_validate,
      so no ORM object leaves the session that loaded it
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class AuthorRecord(BaseModel):
    """Author as seen by the formatting layer."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    first_name: str | None = None
    family_name: str | None = None
    date_of_birth: date | str | int
    date_of_death: date | str | int
