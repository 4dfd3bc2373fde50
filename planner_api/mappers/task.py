# task mapping — tasks are stored as one document with an embedded subtask list
# dates and times are kept as iso strings so range queries compare lexically

from datetime import date, time
from typing import Optional

from planner_api.models.task import SubTaskSchema, TaskRequest, TaskResponse


def to_subtask_document(body: SubTaskSchema, subtask_id: int) -> dict:
    return {"id": subtask_id, "title": body.title, "completed": body.completed}


def to_fields(body: TaskRequest, sub_tasks: list[dict]) -> dict:
    """every mutable task field, the subtask list replaced wholesale"""
    return {
        "title": body.title,
        "description": body.description,
        "scheduled_date": body.scheduled_date.isoformat(),
        "start_time": body.start_time.isoformat() if body.start_time else None,
        "completed": body.completed,
        "sub_tasks": sub_tasks,
    }


def to_document(body: TaskRequest, owner_id: str, task_id: int, sub_tasks: list[dict]) -> dict:
    return {"_id": task_id, "owner_id": owner_id, **to_fields(body, sub_tasks)}


def date_key(value: date) -> str:
    return value.isoformat()


def _parse_time(value: Optional[str]) -> Optional[time]:
    return time.fromisoformat(value) if value else None


def find_subtask(doc: dict, subtask_id: int) -> Optional[dict]:
    for sub in doc.get("sub_tasks", []):
        if sub["id"] == subtask_id:
            return sub
    return None


def to_subtask_response(sub: dict) -> SubTaskSchema:
    return SubTaskSchema(id=sub["id"], title=sub.get("title", ""), completed=sub.get("completed", False))


def to_response(doc: dict) -> TaskResponse:
    return TaskResponse(
        id=doc["_id"],
        title=doc.get("title", ""),
        description=doc.get("description"),
        scheduled_date=date.fromisoformat(doc["scheduled_date"]),
        start_time=_parse_time(doc.get("start_time")),
        completed=doc.get("completed", False),
        sub_tasks=[to_subtask_response(s) for s in doc.get("sub_tasks", [])],
    )


def to_response_list(docs: list[dict]) -> list[TaskResponse]:
    return [to_response(d) for d in docs]
