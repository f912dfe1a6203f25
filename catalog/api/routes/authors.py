"""Author Routes — read-only listing of catalog authors.

Invariants:
    - GET /api/v1/authors always answers 200: a JSON array of display strings,
      or the plain-text fallback when no authors can be listed
    - Route holds no formatting or fallback logic (delegates to services.author_list)

Design Decisions:
    - Store built per request from the request's AsyncSession (Depends chain),
      so tests override get_db and the store follows
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.response_sink import BufferedResponse
from catalog.core.repository_protocols import AuthorStore
from catalog.infrastructure.author_store import SqlAlchemyAuthorStore
from catalog.infrastructure.database import get_db
from catalog.services import author_list

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/authors", tags=["authors"])


def get_author_store(db: AsyncSession = Depends(get_db)) -> AuthorStore:
    """FastAPI dependency for the author store."""
    return SqlAlchemyAuthorStore(db)


@router.get("")
async def list_authors(store: AuthorStore = Depends(get_author_store)):
    """List all authors ordered by family name."""
    response = BufferedResponse()
    await author_list.show_all_authors(response, store)
    return response.to_response()
