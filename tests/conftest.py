# shared fixtures for planner api tests
# provides an in-memory motor-like db, test identities, and httpx test clients

import asyncio
import copy
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from unittest.mock import MagicMock
from pymongo import ReturnDocument

from httpx import AsyncClient, ASGITransport

from planner_api.main import app
from planner_api.services.db import Database, get_db
from planner_api.dependencies import get_current_claims


# test identities

TEST_USER_ID = "user_integration_test_123"
OTHER_USER_ID = "user_someone_else_456"
TEST_CLAIMS = {"sub": TEST_USER_ID, "email": "test@example.com"}

# fixed instant for deterministic range tests
FIXED_NOW = datetime(2025, 12, 1, 0, 0, 0, tzinfo=timezone.utc)


# document builders (as they'd appear in mongodb)


def mood_doc(entry_id, recorded_at, score=3, notes="", factors=None, owner_id=TEST_USER_ID):
    return {
        "_id": entry_id,
        "owner_id": owner_id,
        "mood_score": score,
        "recorded_at": recorded_at,
        "factors": factors if factors is not None else ["Integration"],
        "notes": notes,
    }


def session_doc(session_id, started_at, duration=25, score=4, notes="", ended_at=None, owner_id=TEST_USER_ID):
    return {
        "_id": session_id,
        "owner_id": owner_id,
        "started_at": started_at,
        "ended_at": ended_at,
        "duration_minutes": duration,
        "productivity_score": score,
        "notes": notes,
    }


def task_doc(task_id, scheduled_date, title="Task", sub_tasks=None, completed=False, owner_id=TEST_USER_ID):
    return {
        "_id": task_id,
        "owner_id": owner_id,
        "title": title,
        "description": None,
        "scheduled_date": scheduled_date,
        "start_time": None,
        "completed": completed,
        "sub_tasks": sub_tasks or [],
    }


# async cursor mock

class AsyncCursorMock:
    """mock for motor's async cursor — supports async for and sort"""

    def __init__(self, data=None):
        self._data = data or []
        self._index = 0

    def sort(self, key, direction=1):
        # missing values sort first ascending, like mongodb
        self._data = sorted(
            self._data,
            key=lambda d: (d.get(key) is not None, d.get(key)),
            reverse=direction < 0,
        )
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item


class MockCollection:
    """mock for a motor collection with async methods.
    documents are copied in and out, and every call yields to the event loop
    once, like a real driver round trip"""

    def __init__(self, data=None):
        self._data = data or []

    def find(self, query=None, projection=None):
        results = [copy.deepcopy(d) for d in self._data if self._matches(d, query or {})]
        return AsyncCursorMock(results)

    async def find_one(self, query=None, projection=None):
        await asyncio.sleep(0)
        for doc in self._data:
            if self._matches(doc, query or {}):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc):
        await asyncio.sleep(0)
        self._data.append(copy.deepcopy(doc))
        result = MagicMock()
        result.inserted_id = doc["_id"]
        return result

    async def replace_one(self, query, replacement, upsert=False):
        await asyncio.sleep(0)
        result = MagicMock()
        result.matched_count = 0
        for i, doc in enumerate(self._data):
            if self._matches(doc, query):
                self._data[i] = copy.deepcopy(replacement)
                result.matched_count = 1
                break
        return result

    async def update_one(self, query, update, upsert=False):
        await asyncio.sleep(0)
        result = MagicMock()
        result.modified_count = 0
        for doc in self._data:
            if self._matches(doc, query):
                self._apply_update(doc, update, query)
                result.modified_count = 1
                break
        return result

    async def find_one_and_update(self, query, update, upsert=False, return_document=ReturnDocument.BEFORE):
        await asyncio.sleep(0)
        for doc in self._data:
            if self._matches(doc, query):
                before = copy.deepcopy(doc)
                self._apply_update(doc, update, query)
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before
        if not upsert:
            return None
        doc = {k: v for k, v in query.items() if not isinstance(v, dict)}
        self._apply_update(doc, update, query)
        self._data.append(doc)
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else None

    async def delete_one(self, query):
        await asyncio.sleep(0)
        result = MagicMock()
        result.deleted_count = 0
        for i, doc in enumerate(self._data):
            if self._matches(doc, query):
                del self._data[i]
                result.deleted_count = 1
                break
        return result

    async def create_index(self, *args, **kwargs):
        return "mock_index"

    def _apply_update(self, doc, update, query):
        for key, val in update.get("$set", {}).items():
            if ".$." in key:
                array, field = key.split(".$.")
                self._positional(doc, array, query)[field] = copy.deepcopy(val)
            else:
                doc[key] = copy.deepcopy(val)
        for key, val in update.get("$inc", {}).items():
            doc[key] = doc.get(key, 0) + val
        for key, val in update.get("$push", {}).items():
            doc.setdefault(key, []).append(copy.deepcopy(val))
        for key, cond in update.get("$pull", {}).items():
            doc[key] = [item for item in doc.get(key, []) if not self._matches(item, cond)]

    def _positional(self, doc, array, query):
        """the first array element matched by the query, what `$` refers to"""
        prefix = array + "."
        conds = {k[len(prefix):]: v for k, v in query.items() if k.startswith(prefix)}
        for item in doc.get(array, []):
            if self._matches(item, conds):
                return item
        raise AssertionError(f"positional update matched no element of {array}")

    @staticmethod
    def _values(doc, path):
        """resolve a dotted path, fanning out over embedded lists"""
        values = [doc]
        for part in path.split("."):
            resolved = []
            for v in values:
                if isinstance(v, list):
                    resolved.extend(item.get(part) for item in v if isinstance(item, dict))
                elif isinstance(v, dict):
                    resolved.append(v.get(part))
            values = resolved
        return values

    def _matches(self, doc, query):
        """basic mongodb query matching for tests"""
        for key, value in query.items():
            values = self._values(doc, key)
            if isinstance(value, dict):
                if not any(self._matches_ops(v, value) for v in values):
                    return False
            elif value not in values:
                return False
        return True

    @staticmethod
    def _matches_ops(doc_val, ops):
        for op, arg in ops.items():
            if doc_val is None:
                return False
            if op == "$gte" and doc_val < arg:
                return False
            if op == "$gt" and doc_val <= arg:
                return False
            if op == "$lte" and doc_val > arg:
                return False
            if op == "$lt" and doc_val >= arg:
                return False
        return True


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self):
        self.mood_entries = MockCollection([])
        self.pomodoro_sessions = MockCollection([])
        self.tasks = MockCollection([])
        self.counters = MockCollection([])

    # same sequence logic as the real connection manager
    next_sequence = Database.next_sequence
    ensure_indexes = Database.ensure_indexes

    async def connect(self):
        pass

    async def close(self):
        pass


@pytest.fixture
def mock_db():
    """create a fresh mock database for each test"""
    return MockDatabase()


@pytest_asyncio.fixture
async def client(mock_db):
    """httpx async test client with the db mocked but real token checking"""

    async def override_get_db():
        return mock_db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_client(mock_db):
    """client authenticated as the test user"""

    async def override_get_db():
        return mock_db

    async def override_get_current_claims():
        return dict(TEST_CLAIMS)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_claims] = override_get_current_claims

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def other_client(mock_db):
    """client authenticated as a second user sharing the same db"""

    async def override_get_db():
        return mock_db

    async def override_get_current_claims():
        return {"sub": OTHER_USER_ID}

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_claims] = override_get_current_claims

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
