"""Author Formatting — pure projection of author records into display strings.

Invariants:
    - No IO, no async, no DB — records come in, strings come out
    - "Family, First" only when both names are present and non-empty;
      otherwise the first name alone ("" when it is empty or absent)
    - Years are exactly 4 digits; anything not convertible raises MalformedRecordError
    - Output order == input order (no reordering)

Design Decisions:
    - getattr with None default: absent attributes behave like null ones, so ORM rows,
      pydantic projections and plain objects format identically
    - Regex on the leading 4 digits for strings: accepts "1775", "1775-12-16" and
      full ISO timestamps without guessing a date format
"""

import re
from collections.abc import Iterable
from datetime import date
from typing import Any

from catalog.core.domain_types import DisplayString
from catalog.core.errors import MalformedRecordError
from catalog.core.repository_protocols import AuthorRecordLike

_YEAR_PREFIX = re.compile(r"\s*(\d{4})(?!\d)")


def format_full_name(first_name: str | None, family_name: str | None) -> str:
    """Render the name part of a display string."""
    if family_name and first_name:
        return f"{family_name}, {first_name}"
    return first_name or ""


def extract_year(value: Any, field: str = "date") -> str:
    """Return the 4-digit year of a date-like value.

    Accepts ``date``/``datetime`` objects, strings starting with a 4-digit
    year and integer years in 0..9999.
    """
    if isinstance(value, date):
        return f"{value.year:04d}"
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 9999:
            return f"{value:04d}"
        raise MalformedRecordError(f"{field} year out of range: {value}", field)
    if isinstance(value, str):
        m = _YEAR_PREFIX.match(value)
        if m:
            return m.group(1)
        raise MalformedRecordError(f"{field} has no 4-digit year: {value!r}", field)
    raise MalformedRecordError(
        f"{field} is not date-like: {type(value).__name__}", field,
    )


def format_lifespan(date_of_birth: Any, date_of_death: Any) -> str:
    birth = extract_year(date_of_birth, "date_of_birth")
    death = extract_year(date_of_death, "date_of_death")
    return f"{birth} - {death}"


def format_author_line(record: AuthorRecordLike) -> DisplayString:
    """Format one record as ``"<full name> : <birth year> - <death year>"``."""
    full_name = format_full_name(
        getattr(record, "first_name", None),
        getattr(record, "family_name", None),
    )
    lifespan = format_lifespan(
        getattr(record, "date_of_birth", None),
        getattr(record, "date_of_death", None),
    )
    return DisplayString(f"{full_name} : {lifespan}")


def format_author_lines(records: Iterable[AuthorRecordLike]) -> list[DisplayString]:
    """Format every record, preserving order. Raises on the first malformed record."""
    return [format_author_line(r) for r in records]
