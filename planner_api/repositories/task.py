# persistence for tasks and their embedded subtasks
# every write is a single targeted update on one document, so concurrent
# subtask changes on the same task never overwrite each other

from typing import Optional

from pymongo import ASCENDING, ReturnDocument


class TaskRepository:
    def __init__(self, db):
        self.collection = db.tasks

    async def _find(self, query: dict) -> list[dict]:
        cursor = self.collection.find(query).sort("_id", ASCENDING)
        return [doc async for doc in cursor]

    async def _update(self, query: dict, update: dict) -> Optional[dict]:
        return await self.collection.find_one_and_update(
            query, update, return_document=ReturnDocument.AFTER
        )

    async def find_by_owner(self, owner_id: str) -> list[dict]:
        return await self._find({"owner_id": owner_id})

    async def find_by_date(self, owner_id: str, day: str) -> list[dict]:
        return await self._find({"owner_id": owner_id, "scheduled_date": day})

    async def find_by_date_between(self, owner_id: str, start: str, end: str) -> list[dict]:
        return await self._find({"owner_id": owner_id, "scheduled_date": {"$gte": start, "$lte": end}})

    async def find_by_id(self, task_id: int, owner_id: str) -> Optional[dict]:
        return await self.collection.find_one({"_id": task_id, "owner_id": owner_id})

    async def insert(self, doc: dict) -> dict:
        await self.collection.insert_one(doc)
        return doc

    async def replace_fields(self, task_id: int, owner_id: str, fields: dict) -> Optional[dict]:
        """overwrite the task fields (subtask list included), returns the updated task"""
        return await self._update({"_id": task_id, "owner_id": owner_id}, {"$set": fields})

    async def set_completed(self, task_id: int, owner_id: str, completed: bool) -> Optional[dict]:
        return await self._update({"_id": task_id, "owner_id": owner_id}, {"$set": {"completed": completed}})

    async def delete(self, task_id: int, owner_id: str) -> bool:
        result = await self.collection.delete_one({"_id": task_id, "owner_id": owner_id})
        return result.deleted_count > 0

    # subtasks

    async def push_subtask(self, task_id: int, owner_id: str, sub: dict) -> Optional[dict]:
        """append to the parent's list, none when the parent does not exist"""
        return await self._update({"_id": task_id, "owner_id": owner_id}, {"$push": {"sub_tasks": sub}})

    async def set_subtask_completed(self, subtask_id: int, owner_id: str, completed: bool) -> Optional[dict]:
        """flip one subtask in place, returns the parent task"""
        return await self._update(
            {"owner_id": owner_id, "sub_tasks.id": subtask_id},
            {"$set": {"sub_tasks.$.completed": completed}},
        )

    async def pull_subtask(self, subtask_id: int, owner_id: str) -> bool:
        result = await self.collection.update_one(
            {"owner_id": owner_id, "sub_tasks.id": subtask_id},
            {"$pull": {"sub_tasks": {"id": subtask_id}}},
        )
        return result.modified_count > 0
