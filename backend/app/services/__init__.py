"""
Service layer.
"""
from app.services.health_service import HealthService, ProbeResult

__all__ = ["HealthService", "ProbeResult"]
