"""
Database dependencies for routes.
"""
from fastapi import Request

from app.database.connections import MongoConnectionProvider


def get_mongo_provider(request: Request) -> MongoConnectionProvider:
    """Connection provider created in the application lifespan."""
    return request.app.state.mongo
