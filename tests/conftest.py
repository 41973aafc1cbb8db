"""
HRMS Backend - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_collection: AsyncMock collection for service unit tests
    ├── employee_collection: In-memory stand-in for the employees collection
    ├── mock_mongo: Handle exposing employee_collection, ping() → True
    └── test_client: HTTPX AsyncClient wired to an app built around mock_mongo
"""

import os
from copy import deepcopy
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# Must be set before hrms.config is imported anywhere
os.environ["MONGO_URI"] = "mongodb://localhost:27017/hrms_test"
os.environ["MONGO_DATABASE"] = "hrms_test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo import ReturnDocument


class _Cursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])


class InMemoryCollection:
    """
    Dict-backed double covering the collection calls EmployeeService makes.

    Every call name is appended to `calls` so tests can assert whether the
    store was contacted. Setting `fail_with` makes every call raise it.
    """

    def __init__(self):
        self.documents = {}
        self.calls = []
        self.fail_with = None

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, query):
        self._record("find")
        return _Cursor([deepcopy(doc) for doc in self.documents.values()])

    async def insert_one(self, document):
        self._record("insert_one")
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents[stored["_id"]] = stored
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one(self, query):
        self._record("find_one")
        doc = self.documents.get(query["_id"])
        return deepcopy(doc) if doc is not None else None

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self._record("find_one_and_update")
        doc = self.documents.get(query["_id"])
        if doc is None:
            return None
        before = deepcopy(doc)
        doc.update(update["$set"])
        return deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    async def delete_one(self, query):
        self._record("delete_one")
        removed = self.documents.pop(query["_id"], None)
        return SimpleNamespace(deleted_count=1 if removed is not None else 0)


@pytest.fixture
def mock_collection():
    """
    Provides an AsyncMock employees collection.

    `find` is synchronous in the driver (it returns a cursor), so it is a
    MagicMock whose cursor has an async `to_list`.

    Usage:
        mock_collection.find.return_value.to_list.return_value = [doc]
    """
    collection = MagicMock()
    collection.find = MagicMock()
    collection.find.return_value.to_list = AsyncMock(return_value=[])
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def employee_collection():
    return InMemoryCollection()


@pytest.fixture
def mock_mongo(employee_collection):
    """A MongoInstance stand-in whose employees collection lives in memory."""
    mongo = MagicMock()
    mongo.employees = employee_collection
    mongo.ping = AsyncMock(return_value=True)
    mongo.close = AsyncMock()
    return mongo


@pytest.fixture
def sample_employee():
    return {"name": "Ada Lovelace", "salary": 125000.0, "age": 36}


@pytest_asyncio.fixture
async def test_client(mock_mongo):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the injected handle is used
    directly and no real MongoDB is contacted.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/employee")
            assert response.status_code == 200
    """
    from hrms.main import create_app

    app = create_app(mongo=mock_mongo)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
