# mood entry models — request and response schemas
# owner id is never part of either shape

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class MoodEntryRequest(BaseModel):
    """payload for creating or replacing a mood entry"""
    mood_score: int = Field(..., alias="moodScore", ge=1, le=5, description="mood score 1 (very bad) to 5 (very good)")
    recorded_at: datetime = Field(..., alias="dateTime", description="when the mood was recorded, utc")
    factors: Optional[list[str]] = Field(None, description="labels contributing to the mood, e.g. sleep, work")
    notes: Optional[str] = None

    model_config = {"populate_by_name": True}


class MoodEntryResponse(BaseModel):
    id: int
    mood_score: int = Field(..., alias="moodScore")
    recorded_at: datetime = Field(..., alias="dateTime")
    factors: list[str] = Field(default_factory=list)
    notes: Optional[str] = None

    model_config = {"populate_by_name": True}
