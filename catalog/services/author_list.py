"""Author List — fetch-and-format builder plus the handler that sends its result.

Invariants:
    - get_author_list queries the store exactly once, sorted by family_name ascending
    - get_author_list never raises: any failure (sync raise, failed await,
      malformed record) yields [] — never a partial list
    - show_all_authors sends exactly one payload and never raises
    - Empty list (zero records or absorbed failure) sends NO_AUTHORS_MESSAGE

Design Decisions:
    - Two layers of fallback: builder absorbs store/format errors, handler absorbs
      anything escaping the builder (ADR: transport layer never sees an exception)
    - Handler resolves get_author_list at call time through the module namespace,
      so it can be swapped in tests with monkeypatch
    - List materialized inside the try block: formatting errors abort the whole result
"""

import logging

from catalog.core.author_format import format_author_lines
from catalog.core.domain_types import AUTHOR_LIST_SORT, DisplayString
from catalog.core.errors import DataAccessFailure, LibraryError
from catalog.core.repository_protocols import AuthorStore, ResponseSink

logger = logging.getLogger(__name__)

NO_AUTHORS_MESSAGE = "No authors found"


async def load_author_lines(store: AuthorStore) -> list[DisplayString]:
    """Query and format authors. Raises DataAccessFailure on any failure."""
    try:
        records = await store.find_all(sort=list(AUTHOR_LIST_SORT))
        return format_author_lines(records)
    except DataAccessFailure:
        raise
    except Exception as e:
        raise DataAccessFailure(f"Author query failed: {e}") from e


async def get_author_list(store: AuthorStore) -> list[DisplayString]:
    """Return formatted authors, or [] when anything goes wrong."""
    try:
        authors = await load_author_lines(store)
    except LibraryError as e:
        logger.warning(
            f"Author list unavailable: {e.message}",
            extra={"error_code": e.code},
        )
        return []
    logger.debug(
        "Author list built", extra={"author_count": len(authors)},
    )
    return authors


async def show_all_authors(response: ResponseSink, store: AuthorStore) -> None:
    """Send the author list, or NO_AUTHORS_MESSAGE when it is empty."""
    try:
        authors = await get_author_list(store)
    except Exception as e:
        logger.error(f"Author list builder failed: {e}", exc_info=True)
        authors = []

    if not authors:
        response.send(NO_AUTHORS_MESSAGE)
        return
    response.send(authors)
