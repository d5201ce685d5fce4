from datetime import UTC, datetime
from types import SimpleNamespace

import pytest
from bson import DBRef, ObjectId
from pymongo import DESCENDING

from event_seed.config import Settings

FIXED_NOW = datetime(2024, 11, 1, 9, 0, 0, tzinfo=UTC)


def _lookup(doc, path):
    """Resolve a dotted path the way Mongo does, including DBRef's $ref/$id."""
    value = doc
    for part in path.split("."):
        if isinstance(value, DBRef):
            value = {"$ref": value.collection, "$id": value.id}.get(part)
        elif isinstance(value, dict):
            value = value.get(part)
        else:
            return None
    return value


def _matches(doc, query):
    return all(_lookup(doc, key) == expected for key, expected in (query or {}).items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction == DESCENDING)
        return self

    async def to_list(self, length=None):
        return [dict(d) for d in self._docs[:length]]


class FakeCollection:
    """Just enough of AsyncIOMotorCollection for the seeder."""

    def __init__(self, name):
        self.name = name
        self.docs = []

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs, ordered=True):
        ids = []
        for doc in docs:
            result = await self.insert_one(doc)
            ids.append(result.inserted_id)
        return SimpleNamespace(inserted_ids=ids)

    async def delete_many(self, query):
        kept = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(kept)
        self.docs = kept
        return SimpleNamespace(deleted_count=deleted)

    async def count_documents(self, query):
        return sum(1 for d in self.docs if _matches(d, query))

    async def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if _matches(d, query)])


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection(name))


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        MONGODB_URI="mongodb://test:27017",
        DATABASE_NAME="bustracker_test",
        ORGANIZATION_ID="ORG001",
    )


@pytest.fixture
def unrelated_event():
    """An event document that was not written by the seeder."""
    return {
        "_id": ObjectId(),
        "name": "Spring Commuter Challenge",
        "description": "Not part of the fixture",
        "startDate": datetime(2025, 3, 1, tzinfo=UTC),
        "endDate": datetime(2025, 3, 31, tzinfo=UTC),
        "isActive": False,
        "organizationId": "ORG777",
        "createdAt": FIXED_NOW,
        "updatedAt": FIXED_NOW,
    }
