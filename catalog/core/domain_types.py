"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Sort directions encoded as an Enum — no raw string matching
    - AUTHOR_LIST_SORT holds exactly one ascending criterion on family_name

Design Decisions:
    - str Enums: compare equal to their wire value ("ascending"), so callers and
      fakes can pass plain strings (ADR: store protocol stays primitive-friendly)
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

DisplayString = NewType("DisplayString", str)


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Sort order accepted by record stores."""
    ASCENDING = "ascending"
    DESCENDING = "descending"


SortCriterion = tuple[str, SortDirection]


# ─── Queries ─────────────────────────────────────────────────────

AUTHOR_LIST_SORT: list[SortCriterion] = [
    ("family_name", SortDirection.ASCENDING),
]
