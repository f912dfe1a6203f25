"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: find_all is async because implementations do IO,
      but the formatting functions that consume its records are never async —
      the shell orchestrates the async call around the pure logic
"""

from collections.abc import Sequence
from typing import Any, Protocol

from catalog.core.domain_types import SortCriterion


class AuthorRecordLike(Protocol):
    """Structural contract for author records returned by a store.

    ORM rows, pydantic projections and test doubles all satisfy it. Any
    attribute may hold None; date fields may be dates, strings or years.
    """
    first_name: str | None
    family_name: str | None
    date_of_birth: Any
    date_of_death: Any


class AuthorStore(Protocol):
    """Contract for author reads — implemented by shell."""
    async def find_all(
        self, sort: Sequence[SortCriterion] | None = None,
    ) -> Sequence[AuthorRecordLike]: ...


class ResponseSink(Protocol):
    """Contract for the transport side of a route handler."""
    def send(self, payload: str | list[str]) -> None: ...
