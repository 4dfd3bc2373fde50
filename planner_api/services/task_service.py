# task planner service — tasks with nested subtasks
# subtasks are values embedded in their parent task document. each change is one
# targeted update on that document, never a read followed by a whole-document write

import logging
from datetime import date
from typing import Optional

from planner_api.auth_context import AuthContext
from planner_api.errors import NotFoundError
from planner_api.mappers import task as mapper
from planner_api.models.task import SubTaskSchema, TaskRequest, TaskResponse
from planner_api.repositories.task import TaskRepository

logger = logging.getLogger(__name__)

TASK_SEQUENCE = "tasks"
SUBTASK_SEQUENCE = "sub_tasks"


class TaskPlannerService:
    def __init__(self, db, auth: AuthContext):
        self.db = db
        self.auth = auth
        self.repository = TaskRepository(db)

    async def _get_owned(self, task_id: int, owner_id: str) -> dict:
        doc = await self.repository.find_by_id(task_id, owner_id)
        if doc is None:
            raise NotFoundError("Task", task_id)
        return doc

    async def _build_subtasks(self, items: Optional[list[SubTaskSchema]]) -> list[dict]:
        """fresh subtask values with newly issued ids, client ids are ignored"""
        sub_tasks = []
        for item in items or []:
            subtask_id = await self.db.next_sequence(SUBTASK_SEQUENCE)
            sub_tasks.append(mapper.to_subtask_document(item, subtask_id))
        return sub_tasks

    # tasks

    async def list_all(self) -> list[TaskResponse]:
        owner_id = self.auth.current_user_id()
        return mapper.to_response_list(await self.repository.find_by_owner(owner_id))

    async def get_by_id(self, task_id: int) -> TaskResponse:
        owner_id = self.auth.current_user_id()
        return mapper.to_response(await self._get_owned(task_id, owner_id))

    async def list_by_date(self, day: date) -> list[TaskResponse]:
        owner_id = self.auth.current_user_id()
        docs = await self.repository.find_by_date(owner_id, mapper.date_key(day))
        return mapper.to_response_list(docs)

    async def list_by_date_range(self, start: date, end: date) -> list[TaskResponse]:
        """tasks scheduled within [start, end], both days inclusive"""
        owner_id = self.auth.current_user_id()
        docs = await self.repository.find_by_date_between(
            owner_id, mapper.date_key(start), mapper.date_key(end)
        )
        return mapper.to_response_list(docs)

    async def create(self, body: TaskRequest) -> TaskResponse:
        owner_id = self.auth.current_user_id()
        task_id = await self.db.next_sequence(TASK_SEQUENCE)
        sub_tasks = await self._build_subtasks(body.sub_tasks)
        doc = await self.repository.insert(mapper.to_document(body, owner_id, task_id, sub_tasks))
        logger.info(f"Task created: {task_id} with {len(sub_tasks)} subtask(s) for user {owner_id}")
        return mapper.to_response(doc)

    async def update(self, task_id: int, body: TaskRequest) -> TaskResponse:
        """replace the task fields and swap its subtasks for the ones in the body"""
        owner_id = self.auth.current_user_id()
        await self._get_owned(task_id, owner_id)
        sub_tasks = await self._build_subtasks(body.sub_tasks)
        doc = await self.repository.replace_fields(task_id, owner_id, mapper.to_fields(body, sub_tasks))
        if doc is None:
            raise NotFoundError("Task", task_id)
        logger.info(f"Task updated: {task_id} for user {owner_id}")
        return mapper.to_response(doc)

    async def delete(self, task_id: int) -> None:
        """no error when the task does not exist"""
        owner_id = self.auth.current_user_id()
        if await self.repository.delete(task_id, owner_id):
            logger.info(f"Task deleted: {task_id} for user {owner_id}")

    async def set_completion(self, task_id: int, completed: bool) -> TaskResponse:
        owner_id = self.auth.current_user_id()
        doc = await self.repository.set_completed(task_id, owner_id, completed)
        if doc is None:
            raise NotFoundError("Task", task_id)
        return mapper.to_response(doc)

    # subtasks

    async def list_subtasks(self, task_id: int) -> list[SubTaskSchema]:
        owner_id = self.auth.current_user_id()
        doc = await self.repository.find_by_id(task_id, owner_id)
        if doc is None:
            return []
        return [mapper.to_subtask_response(s) for s in doc.get("sub_tasks", [])]

    async def add_subtask(self, task_id: int, body: SubTaskSchema) -> SubTaskSchema:
        owner_id = self.auth.current_user_id()
        subtask_id = await self.db.next_sequence(SUBTASK_SEQUENCE)
        sub = mapper.to_subtask_document(body, subtask_id)
        if await self.repository.push_subtask(task_id, owner_id, sub) is None:
            raise NotFoundError("Task", task_id)
        logger.info(f"Subtask {subtask_id} added to task {task_id}")
        return mapper.to_subtask_response(sub)

    async def set_subtask_completion(self, subtask_id: int, completed: bool) -> SubTaskSchema:
        owner_id = self.auth.current_user_id()
        doc = await self.repository.set_subtask_completed(subtask_id, owner_id, completed)
        sub = mapper.find_subtask(doc, subtask_id) if doc else None
        if sub is None:
            raise NotFoundError("SubTask", subtask_id)
        return mapper.to_subtask_response(sub)

    async def delete_subtask(self, subtask_id: int) -> None:
        """detach the subtask from its parent. no-op when it does not exist"""
        owner_id = self.auth.current_user_id()
        if await self.repository.pull_subtask(subtask_id, owner_id):
            logger.info(f"Subtask {subtask_id} removed for user {owner_id}")
