# mood router — crud and date-range listing for the caller's mood entries

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from planner_api.dependencies import get_mood_service
from planner_api.models.mood import MoodEntryRequest, MoodEntryResponse
from planner_api.services.mood_service import MoodEntryService

router = APIRouter(prefix="/api/mood", tags=["mood"])


@router.post("", response_model=MoodEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_mood_entry(
    body: MoodEntryRequest,
    service: MoodEntryService = Depends(get_mood_service),
):
    return await service.create(body)


@router.get("", response_model=list[MoodEntryResponse])
async def list_mood_entries(
    start_date: Optional[datetime] = Query(None, alias="startDate", description="iso-8601 instant, inclusive"),
    end_date: Optional[datetime] = Query(None, alias="endDate", description="iso-8601 instant, inclusive"),
    service: MoodEntryService = Depends(get_mood_service),
):
    """list the caller's entries newest first. 204 when there is nothing to return"""
    entries = await service.list_by_range(start_date, end_date)
    if not entries:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return entries


@router.get("/{entry_id}", response_model=MoodEntryResponse)
async def get_mood_entry(
    entry_id: int,
    service: MoodEntryService = Depends(get_mood_service),
):
    return await service.get_by_id(entry_id)


@router.put("/{entry_id}", response_model=MoodEntryResponse)
async def update_mood_entry(
    entry_id: int,
    body: MoodEntryRequest,
    service: MoodEntryService = Depends(get_mood_service),
):
    return await service.update(entry_id, body)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_mood_entry(
    entry_id: int,
    service: MoodEntryService = Depends(get_mood_service),
):
    await service.delete(entry_id)
