# mood entry mapping — request model <-> mongodb document <-> response model
# owner_id and _id are handled by the service, never copied from or to the client

from planner_api.mappers.common import ensure_utc
from planner_api.models.mood import MoodEntryRequest, MoodEntryResponse


def to_document(body: MoodEntryRequest, owner_id: str, entry_id: int) -> dict:
    doc = {"_id": entry_id, "owner_id": owner_id}
    return apply_request(doc, body)


def apply_request(doc: dict, body: MoodEntryRequest) -> dict:
    """overwrite every mutable field in place, id and owner stay untouched"""
    doc["mood_score"] = body.mood_score
    doc["recorded_at"] = ensure_utc(body.recorded_at)
    doc["factors"] = list(body.factors or [])
    doc["notes"] = body.notes
    return doc


def to_response(doc: dict) -> MoodEntryResponse:
    return MoodEntryResponse(
        id=doc["_id"],
        mood_score=doc["mood_score"],
        recorded_at=ensure_utc(doc["recorded_at"]),
        factors=list(doc.get("factors") or []),
        notes=doc.get("notes"),
    )


def to_response_list(docs: list[dict]) -> list[MoodEntryResponse]:
    return [to_response(d) for d in docs]
