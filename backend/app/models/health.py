"""
Health status values.
"""
from enum import Enum


class ServiceStatus(str, Enum):
    """Overall service status."""
    OK = "ok"
    DEGRADED = "degraded"


class DatabaseState(str, Enum):
    """Database reachability."""
    UP = "up"
    DOWN = "down"
