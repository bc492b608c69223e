"""
Health check router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.connections import MongoConnectionProvider
from app.dependencies.database import get_mongo_provider
from app.schemas.health import HealthResponse
from app.services.health_service import HealthService

router = APIRouter(tags=["Health"])


def get_health_service(
    provider: Annotated[MongoConnectionProvider, Depends(get_mongo_provider)],
) -> HealthService:
    return HealthService(provider)


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Database health check",
)
async def health_check(
    service: Annotated[HealthService, Depends(get_health_service)],
):
    """
    Ping the database and report its state.

    Always returns 200; a failed ping is reported as
    ``{"status": "degraded", "database": "down"}`` in the body.
    """
    return await service.check()
