# pomodoro router — crud and date-range listing for focus sessions

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from planner_api.dependencies import get_pomodoro_service
from planner_api.models.pomodoro import PomodoroSessionRequest, PomodoroSessionResponse
from planner_api.services.pomodoro_service import PomodoroSessionService

router = APIRouter(prefix="/api/pomodoro", tags=["pomodoro"])


@router.post("", response_model=PomodoroSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_pomodoro_session(
    body: PomodoroSessionRequest,
    service: PomodoroSessionService = Depends(get_pomodoro_service),
):
    return await service.create(body)


@router.get("", response_model=list[PomodoroSessionResponse])
async def list_pomodoro_sessions(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    service: PomodoroSessionService = Depends(get_pomodoro_service),
):
    sessions = await service.list_by_range(start_date, end_date)
    if not sessions:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return sessions


@router.get("/{session_id}", response_model=PomodoroSessionResponse)
async def get_pomodoro_session(
    session_id: int,
    service: PomodoroSessionService = Depends(get_pomodoro_service),
):
    return await service.get_by_id(session_id)


@router.put("/{session_id}", response_model=PomodoroSessionResponse)
async def update_pomodoro_session(
    session_id: int,
    body: PomodoroSessionRequest,
    service: PomodoroSessionService = Depends(get_pomodoro_service),
):
    return await service.update(session_id, body)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pomodoro_session(
    session_id: int,
    service: PomodoroSessionService = Depends(get_pomodoro_service),
):
    await service.delete(session_id)
