# tasks router — weekly planner tasks and their subtasks
# static paths (/week, /date, /subtasks) are declared before /{task_id}

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from planner_api.dependencies import get_task_service
from planner_api.models.task import SubTaskSchema, TaskRequest, TaskResponse
from planner_api.services.task_service import TaskPlannerService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(service: TaskPlannerService = Depends(get_task_service)):
    return await service.list_all()


@router.get("/week", response_model=list[TaskResponse])
async def list_tasks_for_week(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: TaskPlannerService = Depends(get_task_service),
):
    """tasks scheduled between startDate and endDate inclusive"""
    return await service.list_by_date_range(start_date, end_date)


@router.get("/date/{day}", response_model=list[TaskResponse])
async def list_tasks_by_date(
    day: date,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.list_by_date(day)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskRequest,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.create(body)


# subtasks addressed by their own id


@router.patch("/subtasks/{subtask_id}/complete", response_model=SubTaskSchema)
async def set_subtask_completion(
    subtask_id: int,
    completed: bool = Query(...),
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.set_subtask_completion(subtask_id, completed)


@router.delete("/subtasks/{subtask_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subtask(
    subtask_id: int,
    service: TaskPlannerService = Depends(get_task_service),
):
    await service.delete_subtask(subtask_id)


# single task


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.get_by_id(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    body: TaskRequest,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.update(task_id, body)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    service: TaskPlannerService = Depends(get_task_service),
):
    await service.delete(task_id)


@router.patch("/{task_id}/complete", response_model=TaskResponse)
async def set_task_completion(
    task_id: int,
    completed: bool = Query(...),
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.set_completion(task_id, completed)


@router.get("/{task_id}/subtasks", response_model=list[SubTaskSchema])
async def list_subtasks(
    task_id: int,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.list_subtasks(task_id)


@router.post("/{task_id}/subtasks", response_model=SubTaskSchema, status_code=status.HTTP_201_CREATED)
async def add_subtask(
    task_id: int,
    body: SubTaskSchema,
    service: TaskPlannerService = Depends(get_task_service),
):
    return await service.add_subtask(task_id, body)
