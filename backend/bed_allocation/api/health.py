"""
Health check endpoints.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session
from datetime import datetime

from bed_allocation.config import settings
from bed_allocation.core.database import get_session, check_database_health

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "System healthy"},
        503: {"description": "System unavailable"}
    }
)


@router.get(
    "",
    summary="General health check",
    description="Reports that the application is running",
    response_model=None
)
async def health_check() -> JSONResponse:
    """
    Basic health check.
    Returns 200 while the process is up.
    """
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV
        }
    )


@router.get(
    "/readiness",
    summary="Readiness probe",
    description="Checks that the application can serve traffic",
    response_model=None
)
def readiness_probe(session: Session = Depends(get_session)) -> JSONResponse:
    """
    Readiness probe.

    Returns 503 when the database does not answer.
    """
    db_health = check_database_health(session)
    is_ready = db_health.get("status") == "healthy"

    return JSONResponse(
        status_code=status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if is_ready else "not_ready",
            "timestamp": datetime.now().isoformat(),
            "components": {
                "database": db_health
            }
        }
    )
