"""
Domain values.
"""
from app.models.health import DatabaseState, ServiceStatus

__all__ = ["DatabaseState", "ServiceStatus"]
