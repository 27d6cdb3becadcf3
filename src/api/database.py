"""
Database Configuration and Connection
"""
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
import structlog

from .config import settings

logger = structlog.get_logger()


class MongoConnection:
    """Process-wide MongoDB client, opened on startup and closed on shutdown."""

    def __init__(self):
        self._client: Optional[AsyncMongoClient] = None
        self._database_name: Optional[str] = None

    async def connect(self, url: str, database: str) -> None:
        if self._client is not None:
            return
        self._client = AsyncMongoClient(url)
        self._database_name = database
        # Fail at startup rather than on the first request
        await self._client.admin.command("ping")

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None

    @property
    def database(self) -> AsyncDatabase:
        if self._client is None:
            raise RuntimeError("Database connection is not initialized")
        return self._client[self._database_name]


mongo = MongoConnection()


async def init_database():
    """Initialize database connection"""
    logger.info("Initializing database connection",
                url=settings.MONGODB_URL.split('@')[-1],
                database=settings.MONGODB_DATABASE)

    await mongo.connect(settings.MONGODB_URL, settings.MONGODB_DATABASE)

    logger.info("MongoDB connected")


async def close_database():
    """Close database connection"""
    logger.info("Closing database connection")
    await mongo.close()


def get_db() -> AsyncDatabase:
    """Dependency for getting the database handle"""
    return mongo.database
