# mood entry service — business rules for a user's mood log
# every operation resolves the owner from the auth context first

import logging
from datetime import datetime
from typing import Optional

from planner_api.auth_context import AuthContext
from planner_api.errors import NotFoundError
from planner_api.mappers import mood as mapper
from planner_api.mappers.common import ensure_utc
from planner_api.models.mood import MoodEntryRequest, MoodEntryResponse
from planner_api.repositories.owned import MoodEntryRepository

logger = logging.getLogger(__name__)

SEQUENCE = "mood_entries"


class MoodEntryService:
    def __init__(self, db, auth: AuthContext):
        self.db = db
        self.auth = auth
        self.repository = MoodEntryRepository(db)

    async def _get_owned(self, entry_id: int, owner_id: str) -> dict:
        doc = await self.repository.find_by_id_and_owner(entry_id, owner_id)
        if doc is None:
            raise NotFoundError("MoodEntry", entry_id)
        return doc

    async def create(self, body: MoodEntryRequest) -> MoodEntryResponse:
        owner_id = self.auth.current_user_id()
        entry_id = await self.db.next_sequence(SEQUENCE)
        doc = await self.repository.insert(mapper.to_document(body, owner_id, entry_id))
        logger.info(f"Mood entry created: {entry_id} for user {owner_id}")
        return mapper.to_response(doc)

    async def list_all(self) -> list[MoodEntryResponse]:
        owner_id = self.auth.current_user_id()
        return mapper.to_response_list(await self.repository.find_by_owner(owner_id))

    async def list_by_range(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> list[MoodEntryResponse]:
        """entries in [start, end], newest first. a half-open range is ignored and
        the full list is returned"""
        if start is None or end is None:
            return await self.list_all()
        owner_id = self.auth.current_user_id()
        docs = await self.repository.find_by_owner_between(owner_id, ensure_utc(start), ensure_utc(end))
        return mapper.to_response_list(docs)

    async def get_by_id(self, entry_id: int) -> MoodEntryResponse:
        owner_id = self.auth.current_user_id()
        return mapper.to_response(await self._get_owned(entry_id, owner_id))

    async def update(self, entry_id: int, body: MoodEntryRequest) -> MoodEntryResponse:
        owner_id = self.auth.current_user_id()
        doc = await self._get_owned(entry_id, owner_id)
        mapper.apply_request(doc, body)
        await self.repository.save(doc)
        logger.info(f"Mood entry updated: {entry_id} for user {owner_id}")
        return mapper.to_response(doc)

    async def delete(self, entry_id: int) -> None:
        owner_id = self.auth.current_user_id()
        await self._get_owned(entry_id, owner_id)
        await self.repository.delete(entry_id, owner_id)
        logger.info(f"Mood entry deleted: {entry_id} for user {owner_id}")
