# pomodoro session mapping — request model <-> mongodb document <-> response model

from planner_api.mappers.common import ensure_utc
from planner_api.models.pomodoro import PomodoroSessionRequest, PomodoroSessionResponse


def to_document(body: PomodoroSessionRequest, owner_id: str, session_id: int) -> dict:
    doc = {"_id": session_id, "owner_id": owner_id}
    return apply_request(doc, body)


def apply_request(doc: dict, body: PomodoroSessionRequest) -> dict:
    doc["started_at"] = ensure_utc(body.started_at)
    doc["ended_at"] = ensure_utc(body.ended_at)
    doc["duration_minutes"] = body.duration_minutes
    doc["productivity_score"] = body.productivity_score
    doc["notes"] = body.notes
    return doc


def to_response(doc: dict) -> PomodoroSessionResponse:
    return PomodoroSessionResponse(
        id=doc["_id"],
        started_at=ensure_utc(doc["started_at"]),
        ended_at=ensure_utc(doc.get("ended_at")),
        duration_minutes=doc.get("duration_minutes", 0),
        productivity_score=doc.get("productivity_score"),
        notes=doc.get("notes"),
    )


def to_response_list(docs: list[dict]) -> list[PomodoroSessionResponse]:
    return [to_response(d) for d in docs]
