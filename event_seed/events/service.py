"""Reads and writes against the event collections.

Every function takes the database handle explicitly. Children reference their
event with a DBRef stored in ``eventId``; the driver never follows it for us.
resolve_ref() does the lookup (find the id in the named collection), and
children of an event are matched on ``eventId.$id``.
"""

import logging
from typing import Optional

from bson import DBRef, ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import BulkWriteError, PyMongoError

from event_seed.database import EVENT_COLLECTIONS, EVENT_MISSIONS, EVENT_REWARDS, EVENTS
from event_seed.errors import InsertError
from event_seed.events.models import Event, EventMission, EventReward

logger = logging.getLogger(__name__)


def _children_query(event_id: ObjectId) -> dict:
    return {"eventId.$id": event_id}


async def count_documents(db: AsyncIOMotorDatabase) -> dict[str, int]:
    """Document count per event collection, in reset order."""
    return {name: await db[name].count_documents({}) for name in EVENT_COLLECTIONS}


async def clear_collections(db: AsyncIOMotorDatabase) -> dict[str, int]:
    """Delete every document in the event collections. No filter: unrelated data goes too."""
    deleted = {}
    for name in EVENT_COLLECTIONS:
        try:
            result = await db[name].delete_many({})  # destructive: wipes the whole collection
        except PyMongoError as exc:
            raise InsertError(f"reset of '{name}'", str(exc)) from exc
        deleted[name] = result.deleted_count
        logger.info("Cleared %d document(s) from '%s'", result.deleted_count, name)
    return deleted


async def insert_event(db: AsyncIOMotorDatabase, event: Event) -> ObjectId:
    try:
        result = await db[EVENTS].insert_one(event.to_document())
    except PyMongoError as exc:
        raise InsertError("event insert", str(exc)) from exc
    return result.inserted_id


async def _insert_many(
    db: AsyncIOMotorDatabase, collection: str, documents: list[dict], step: str
) -> list[ObjectId]:
    # ordered=True: the first failing document stops the batch, so nInserted
    # is exactly the prefix that made it in.
    try:
        result = await db[collection].insert_many(documents, ordered=True)
    except BulkWriteError as exc:
        raise InsertError(step, str(exc), inserted_count=exc.details.get("nInserted", 0)) from exc
    except PyMongoError as exc:
        raise InsertError(step, str(exc)) from exc
    return list(result.inserted_ids)


async def insert_missions(db: AsyncIOMotorDatabase, missions: list[EventMission]) -> list[ObjectId]:
    return await _insert_many(
        db, EVENT_MISSIONS, [m.to_document() for m in missions], "mission insert"
    )


async def insert_rewards(db: AsyncIOMotorDatabase, rewards: list[EventReward]) -> list[ObjectId]:
    return await _insert_many(
        db, EVENT_REWARDS, [r.to_document() for r in rewards], "reward insert"
    )


async def resolve_ref(db: AsyncIOMotorDatabase, ref: DBRef) -> Optional[dict]:
    """Follow a weak reference: look ``ref.id`` up in ``ref.collection``."""
    return await db[ref.collection].find_one({"_id": ref.id})


async def get_event(db: AsyncIOMotorDatabase, event_id: ObjectId) -> Optional[Event]:
    doc = await resolve_ref(db, DBRef(EVENTS, event_id))
    if not doc:
        return None
    return Event.model_validate(doc)


async def list_missions(db: AsyncIOMotorDatabase, event_id: ObjectId) -> list[EventMission]:
    """Missions of an event in display order."""
    cursor = db[EVENT_MISSIONS].find(_children_query(event_id)).sort("order", ASCENDING)
    docs = await cursor.to_list(length=None)
    return [EventMission.model_validate(doc) for doc in docs]


async def list_rewards(db: AsyncIOMotorDatabase, event_id: ObjectId) -> list[EventReward]:
    """Rewards of an event, rarest grade first."""
    cursor = db[EVENT_REWARDS].find(_children_query(event_id)).sort("rewardGrade", ASCENDING)
    docs = await cursor.to_list(length=None)
    return [EventReward.model_validate(doc) for doc in docs]
