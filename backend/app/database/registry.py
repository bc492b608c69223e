"""
Collection registry and source index management.

Resolves (domain, role) pairs to collection handles and creates the
indexes the listing sources rely on.
"""
import asyncio
import logging
from typing import Callable

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

from app.database.connections import MongoConnectionProvider
from app.database.databases import listings_db, scrape_db

logger = logging.getLogger(__name__)

PRIMARY = "primary"
SECONDARY = "secondary"

CollectionAccessor = Callable[[AsyncIOMotorDatabase], AsyncIOMotorCollection]

# domain -> role -> accessor
COLLECTION_REGISTRY: dict[str, dict[str, CollectionAccessor]] = {
    scrape_db.DOMAIN: {
        PRIMARY: scrape_db.get_haraj_scrape_collection,
        SECONDARY: scrape_db.get_cars_haraj_collection,
    },
    listings_db.DOMAIN: {
        PRIMARY: listings_db.get_yalla_motor_collection,
        SECONDARY: listings_db.get_yalla_used_collection,
        "new_cars": listings_db.get_yalla_new_cars_collection,
        "syarah": listings_db.get_syarah_collection,
    },
}

# collection name -> index definitions
SOURCE_INDEXES = {
    scrape_db.Collections.HARAJ_SCRAPE: scrape_db.Collections.INDEXES,
    scrape_db.Collections.CARS_HARAJ: scrape_db.Collections.INDEXES,
    listings_db.Collections.YALLA_MOTOR_LEGACY: listings_db.Collections.YALLA_INDEXES,
    listings_db.Collections.YALLA_USED: listings_db.Collections.YALLA_INDEXES,
    listings_db.Collections.YALLA_NEW_CARS: listings_db.Collections.YALLA_INDEXES,
    listings_db.Collections.SYARAH: listings_db.Collections.SYARAH_INDEXES,
}

# IndexOptionsConflict, IndexKeySpecsConflict, DuplicateKey
IGNORED_INDEX_ERROR_CODES = {85, 86, 11000}


class UnknownCollectionError(KeyError):
    """No collection is registered for the requested domain and role."""


def resolve_collection(
    domain: str,
    db: AsyncIOMotorDatabase,
    role: str = PRIMARY,
) -> AsyncIOMotorCollection:
    """
    Resolve a collection handle by domain and role.

    Pure lookup: nothing is cached and no collection is created.

    Args:
        domain: "scrape" or "listings"
        db: Database handle the collection belongs to
        role: "primary", "secondary" or an extra listings role

    Returns:
        Collection handle bound to the registered name
    """
    try:
        accessor = COLLECTION_REGISTRY[domain][role]
    except KeyError:
        raise UnknownCollectionError(f"No collection registered for {domain}/{role}") from None
    return accessor(db)


async def create_indexes_safely(collection: AsyncIOMotorCollection, indexes: list[dict]) -> None:
    """Create named indexes, skipping ones that conflict with existing indexes."""
    for index_def in indexes:
        try:
            await collection.create_index(index_def["keys"], name=index_def["name"])
        except OperationFailure as e:
            if e.code in IGNORED_INDEX_ERROR_CODES:
                continue
            raise


async def create_source_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for all source collections."""
    await asyncio.gather(*(
        create_indexes_safely(db[name], indexes)
        for name, indexes in SOURCE_INDEXES.items()
    ))


async def warmup_source_indexes(provider: MongoConnectionProvider) -> None:
    """Create source indexes in the background. Failures are logged, not raised."""
    try:
        db = await provider.get_database()
        await create_source_indexes(db)
        logger.info("Source indexes ready")
    except Exception:
        logger.exception("Source index warmup failed")
