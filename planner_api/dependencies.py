# fastapi dependency injection
# resolves the caller's identity from the bearer token and wires services per request

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from planner_api.auth_context import AuthContext
from planner_api.services.auth_service import decode_token
from planner_api.services.db import Database, get_db
from planner_api.services.mood_service import MoodEntryService
from planner_api.services.pomodoro_service import PomodoroSessionService
from planner_api.services.task_service import TaskPlannerService

logger = logging.getLogger(__name__)

# auto_error off so a missing header is a 401 rather than fastapi's default
security = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """extract and validate the caller's claims from the jwt bearer token"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing subject",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return payload


async def get_auth_context(claims: dict = Depends(get_current_claims)) -> AuthContext:
    return AuthContext(claims)


# service providers


async def get_mood_service(
    db: Database = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MoodEntryService:
    return MoodEntryService(db, auth)


async def get_pomodoro_service(
    db: Database = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> PomodoroSessionService:
    return PomodoroSessionService(db, auth)


async def get_task_service(
    db: Database = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> TaskPlannerService:
    return TaskPlannerService(db, auth)
