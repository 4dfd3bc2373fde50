# mental planner backend api
# fastapi app with async mongodb, jwks-verified bearer auth, and three crud slices

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from planner_api.config import settings
from planner_api.errors import PlannerError
from planner_api.services.auth_service import jwks_client
from planner_api.services.db import db
from planner_api.routers import mood, pomodoro, tasks

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: connect to mongodb and load signing keys. shutdown: close connection."""
    logger.info("Starting mental planner backend...")
    await db.connect()
    await jwks_client.load()
    logger.info("Mental planner backend ready")
    yield
    logger.info("Shutting down mental planner backend...")
    await db.close()


app = FastAPI(
    title="Mental Planner API",
    description="Backend API for the mental planner — mood tracking, pomodoro sessions, weekly task planning",
    version="0.1.0",
    lifespan=lifespan,
)

# cors — only the configured frontend origins, with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# error mapping


@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError):
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """malformed params and failed field constraints are a 400 with per-field messages"""
    errors = []
    for err in exc.errors():
        # loc is e.g. ("body", "moodScore") or ("query", "startDate")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({"field": ".".join(loc) or "request", "message": err.get("msg", "invalid value")})
    logger.info(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


# register routers
app.include_router(mood.router)
app.include_router(pomodoro.router)
app.include_router(tasks.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "mental-planner-api"}
