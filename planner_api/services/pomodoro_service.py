# pomodoro session service — focus/work session records scoped to the caller

import logging
from datetime import datetime
from typing import Optional

from planner_api.auth_context import AuthContext
from planner_api.errors import NotFoundError
from planner_api.mappers import pomodoro as mapper
from planner_api.mappers.common import ensure_utc
from planner_api.models.pomodoro import PomodoroSessionRequest, PomodoroSessionResponse
from planner_api.repositories.owned import PomodoroSessionRepository

logger = logging.getLogger(__name__)

SEQUENCE = "pomodoro_sessions"


class PomodoroSessionService:
    def __init__(self, db, auth: AuthContext):
        self.db = db
        self.auth = auth
        self.repository = PomodoroSessionRepository(db)

    async def _get_owned(self, session_id: int, owner_id: str) -> dict:
        doc = await self.repository.find_by_id_and_owner(session_id, owner_id)
        if doc is None:
            raise NotFoundError("PomodoroSession", session_id)
        return doc

    async def create(self, body: PomodoroSessionRequest) -> PomodoroSessionResponse:
        owner_id = self.auth.current_user_id()
        session_id = await self.db.next_sequence(SEQUENCE)
        doc = await self.repository.insert(mapper.to_document(body, owner_id, session_id))
        logger.info(f"Pomodoro session created: {session_id} for user {owner_id}")
        return mapper.to_response(doc)

    async def list_all(self) -> list[PomodoroSessionResponse]:
        owner_id = self.auth.current_user_id()
        return mapper.to_response_list(await self.repository.find_by_owner(owner_id))

    async def list_by_range(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> list[PomodoroSessionResponse]:
        # same partial-range behavior as mood entries
        if start is None or end is None:
            return await self.list_all()
        owner_id = self.auth.current_user_id()
        docs = await self.repository.find_by_owner_between(owner_id, ensure_utc(start), ensure_utc(end))
        return mapper.to_response_list(docs)

    async def get_by_id(self, session_id: int) -> PomodoroSessionResponse:
        owner_id = self.auth.current_user_id()
        return mapper.to_response(await self._get_owned(session_id, owner_id))

    async def update(self, session_id: int, body: PomodoroSessionRequest) -> PomodoroSessionResponse:
        owner_id = self.auth.current_user_id()
        doc = await self._get_owned(session_id, owner_id)
        mapper.apply_request(doc, body)
        await self.repository.save(doc)
        logger.info(f"Pomodoro session updated: {session_id} for user {owner_id}")
        return mapper.to_response(doc)

    async def delete(self, session_id: int) -> None:
        owner_id = self.auth.current_user_id()
        await self._get_owned(session_id, owner_id)
        await self.repository.delete(session_id, owner_id)
        logger.info(f"Pomodoro session deleted: {session_id} for user {owner_id}")
