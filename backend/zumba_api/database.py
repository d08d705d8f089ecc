"""
MongoDB connection handling.

One motor client is created per process at startup and shared by every
request through the ``get_db`` dependency.
"""
import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from zumba_api.models import CardData, ContactInquiry, Image, Offer, VideoReview

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "zumba"

INDEXES = [
    (Offer.collection, [("key", ASCENDING)], {"unique": True}),
    (Image.collection, [("cardNum", ASCENDING), ("slot", ASCENDING)], {}),
    (CardData.collection, [("branch", ASCENDING)], {}),
    (ContactInquiry.collection, [("createdAt", DESCENDING)], {}),
    (VideoReview.collection, [("uploadedAt", DESCENDING)], {}),
]


class MongoConnection:
    """Owns the motor client and the selected database."""

    def __init__(self, uri: str, db_name: str = ""):
        self._client: Optional[AsyncIOMotorClient] = AsyncIOMotorClient(uri, tz_aware=True)
        if db_name:
            self._db = self._client[db_name]
        else:
            self._db = self._client.get_default_database(DEFAULT_DB_NAME)
        self._connected = False

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._client is None:
            raise RuntimeError("MongoDB connection is closed")
        return self._db

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def check(self) -> bool:
        """
        Ping the server and make sure indexes exist.

        Failures are logged only; the driver keeps retrying server selection
        on later operations.
        """
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB connection failed: {e}")
            self._connected = False
            return False

        self._connected = True
        logger.info(f"MongoDB connected (database: {self._db.name})")
        await init_db(self._db)
        return True

    def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None
            self._connected = False


async def init_db(db: AsyncIOMotorDatabase):
    """Create the indexes the API queries rely on."""
    for collection, keys, options in INDEXES:
        try:
            await db[collection].create_index(keys, **options)
        except PyMongoError as e:
            logger.warning(f"Could not create index on {collection}: {e}")


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Dependency returning the process-wide database handle."""
    return request.app.state.mongo.db
