# persistence for per-user timestamped records (mood entries, pomodoro sessions)
# every query carries the owner id, so another user's rows are never visible

from datetime import datetime
from typing import Optional

from pymongo import DESCENDING


class OwnedRecordRepository:
    """owner-scoped crud over one collection, ordered newest first on time_field"""

    def __init__(self, collection, time_field: str):
        self.collection = collection
        self.time_field = time_field

    async def find_by_owner(self, owner_id: str) -> list[dict]:
        cursor = self.collection.find({"owner_id": owner_id}).sort(self.time_field, DESCENDING)
        return [doc async for doc in cursor]

    async def find_by_owner_between(self, owner_id: str, start: datetime, end: datetime) -> list[dict]:
        """both bounds inclusive"""
        query = {"owner_id": owner_id, self.time_field: {"$gte": start, "$lte": end}}
        cursor = self.collection.find(query).sort(self.time_field, DESCENDING)
        return [doc async for doc in cursor]

    async def find_by_id_and_owner(self, record_id: int, owner_id: str) -> Optional[dict]:
        return await self.collection.find_one({"_id": record_id, "owner_id": owner_id})

    async def insert(self, doc: dict) -> dict:
        await self.collection.insert_one(doc)
        return doc

    async def save(self, doc: dict) -> dict:
        await self.collection.replace_one({"_id": doc["_id"], "owner_id": doc["owner_id"]}, doc)
        return doc

    async def delete(self, record_id: int, owner_id: str) -> bool:
        result = await self.collection.delete_one({"_id": record_id, "owner_id": owner_id})
        return result.deleted_count > 0


class MoodEntryRepository(OwnedRecordRepository):
    def __init__(self, db):
        super().__init__(db.mood_entries, "recorded_at")


class PomodoroSessionRepository(OwnedRecordRepository):
    def __init__(self, db):
        super().__init__(db.pomodoro_sessions, "started_at")
