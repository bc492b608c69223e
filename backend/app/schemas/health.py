"""
Health check response schema.
"""
from pydantic import BaseModel, Field

from app.models.health import DatabaseState, ServiceStatus


class HealthResponse(BaseModel):
    """Result of a single database liveness probe."""
    status: ServiceStatus = Field(..., description="ok or degraded")
    database: DatabaseState = Field(..., description="up or down")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")
