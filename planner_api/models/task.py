# task planner models — tasks with nested subtasks
# the same shape is used for requests and responses, ids are ignored on input

from datetime import date, time
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class SubTaskSchema(BaseModel):
    id: Optional[int] = None
    title: str
    completed: bool = False


class TaskRequest(BaseModel):
    """payload for creating or replacing a task, subtasks are rebuilt from this list"""
    title: str = Field(..., description="task title, must not be blank")
    description: Optional[str] = None
    scheduled_date: date = Field(..., alias="date", description="day the task is planned for (yyyy-mm-dd)")
    start_time: Optional[time] = Field(None, alias="startTime")
    completed: bool = False
    sub_tasks: Optional[list[SubTaskSchema]] = Field(None, alias="subTasks")

    model_config = {"populate_by_name": True}

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    scheduled_date: date = Field(..., alias="date")
    start_time: Optional[time] = Field(None, alias="startTime")
    completed: bool = False
    sub_tasks: list[SubTaskSchema] = Field(default_factory=list, alias="subTasks")

    model_config = {"populate_by_name": True}
