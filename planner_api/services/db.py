# async mongodb client for the planner api
# uses motor for non-blocking operations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from planner_api.config import settings

logger = logging.getLogger(__name__)


class Database:
    """async mongodb connection manager"""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """establish connection to mongodb and make sure query indexes exist"""
        if self.client is not None:
            return

        logger.info(f"Connecting to MongoDB database: {settings.MONGODB_DATABASE}")
        # tz_aware so stored instants come back as utc-aware datetimes
        self.client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)
        self.db = self.client[settings.MONGODB_DATABASE]

        # verify connection
        await self.client.admin.command("ping")
        logger.info("MongoDB connection established")

        await self.ensure_indexes()

    async def close(self):
        """close mongodb connection"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("MongoDB connection closed")

    async def ensure_indexes(self):
        await self.mood_entries.create_index([("owner_id", ASCENDING), ("recorded_at", DESCENDING)])
        await self.pomodoro_sessions.create_index([("owner_id", ASCENDING), ("started_at", DESCENDING)])
        await self.tasks.create_index([("owner_id", ASCENDING), ("scheduled_date", ASCENDING)])
        await self.tasks.create_index("sub_tasks.id")
        logger.info("Indexes ensured on planner collections")

    async def next_sequence(self, name: str) -> int:
        """atomically allocate the next numeric id for a record kind"""
        doc = await self.counters.find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return doc["seq"]

    # collection accessors

    @property
    def mood_entries(self):
        return self.db["mood_entries"]

    @property
    def pomodoro_sessions(self):
        return self.db["pomodoro_sessions"]

    @property
    def tasks(self):
        return self.db["tasks"]

    @property
    def counters(self):
        return self.db["counters"]


# singleton instance
db = Database()


async def get_db() -> Database:
    """dependency injection for database access"""
    return db
