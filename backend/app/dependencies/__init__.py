"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.database import get_mongo_provider

__all__ = ["get_mongo_provider"]
