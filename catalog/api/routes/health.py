"""Health Routes — liveness and readiness for the catalog service.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready answers 503 until the database answers SELECT 1

Design Decisions:
    - db_manager looked up on the module at request time: it only exists after
      the lifespan has called init_db
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from catalog.infrastructure import database

SERVICE_NAME = "library-catalog-api"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    """Report whether the author store can be reached."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
