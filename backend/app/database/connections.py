"""
MongoDB connection provider.

A single provider is created per application and passed explicitly to the
code that needs a database handle (see ``app.dependencies.database``).
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import Settings
from app.core.errors import ConfigurationError


class MongoConnectionProvider:
    """Lazily connects to the scraping database described by ``settings``."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[AsyncIOMotorClient] = None

    async def get_client(self) -> AsyncIOMotorClient:
        """Get or create the MongoDB client."""
        if not self.settings.mongo_url_scrapping:
            raise ConfigurationError("Missing MONGO_URL_SCRAPPING environment variable.")
        if self._client is None:
            self._client = AsyncIOMotorClient(self.settings.mongo_url_scrapping)
        return self._client

    async def get_database(self) -> AsyncIOMotorDatabase:
        """Get the configured scraping database."""
        db_name = self.settings.mongo_dbname_scrapping
        if not db_name:
            raise ConfigurationError("Missing MONGO_DBNAME_SCRAPPING environment variable.")
        client = await self.get_client()
        return client[db_name]

    async def close(self) -> None:
        """Close the client if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
