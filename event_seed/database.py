"""MongoDB connection handling for the seeder.

Unlike a long-running service there is no module-level client: the entry
point calls connect_db() once and passes the client (or the database handle
from get_database()) explicitly to everything that touches the store.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from event_seed.config import Settings
from event_seed.errors import StoreConnectionError

logger = logging.getLogger(__name__)

EVENTS = "events"
EVENT_MISSIONS = "event_missions"
EVENT_REWARDS = "event_rewards"
EVENT_PARTICIPATIONS = "event_participations"

# Children before parents.
EVENT_COLLECTIONS = (EVENT_PARTICIPATIONS, EVENT_REWARDS, EVENT_MISSIONS, EVENTS)


async def connect_db(settings: Settings) -> AsyncIOMotorClient:
    """Create a client and make sure the server answers before any write happens."""
    client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS,
        connectTimeoutMS=settings.CONNECT_TIMEOUT_MS,
        tz_aware=True,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StoreConnectionError(
            f"Cannot reach MongoDB at {settings.MONGODB_URI}: {exc}"
        ) from exc
    logger.info("Connected to MongoDB, database '%s'", settings.DATABASE_NAME)
    return client


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.DATABASE_NAME]


def disconnect_db(client: AsyncIOMotorClient) -> None:
    client.close()
