"""
Database module - MongoDB connection provider and collection registry.
"""
from app.database.connections import MongoConnectionProvider
from app.database.databases import listings_db, scrape_db
from app.database.registry import (
    UnknownCollectionError,
    create_source_indexes,
    resolve_collection,
    warmup_source_indexes,
)

__all__ = [
    "MongoConnectionProvider",
    "UnknownCollectionError",
    "create_source_indexes",
    "resolve_collection",
    "warmup_source_indexes",
    "listings_db",
    "scrape_db",
]
