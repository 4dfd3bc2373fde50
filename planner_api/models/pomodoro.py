# pomodoro session models — focus/work session request and response schemas

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class PomodoroSessionRequest(BaseModel):
    """payload for creating or replacing a focus session"""
    started_at: datetime = Field(..., alias="startTime", description="session start, utc")
    ended_at: Optional[datetime] = Field(None, alias="endTime", description="session end, null while still running")
    duration_minutes: int = Field(..., alias="duration", ge=0, description="length of the session in minutes")
    productivity_score: Optional[int] = Field(None, alias="score", ge=1, le=5, description="self-rated score 1-5")
    notes: Optional[str] = None

    model_config = {"populate_by_name": True}


class PomodoroSessionResponse(BaseModel):
    id: int
    started_at: datetime = Field(..., alias="startTime")
    ended_at: Optional[datetime] = Field(None, alias="endTime")
    duration_minutes: int = Field(..., alias="duration")
    productivity_score: Optional[int] = Field(None, alias="score")
    notes: Optional[str] = None

    model_config = {"populate_by_name": True}
