"""Seeds the event collections with the CoShow 2024 fixture.

Precondition: run only against an empty or disposable event store. The reset
step deletes every document in the four event collections with no filter, so
it is opt-in (``reset=True``). Without it, a store that already holds event
data is refused before anything is written.

There is no atomicity across steps. If missions or rewards fail to insert,
the event inserted just before stays in the store; it is logged as orphaned
and left for the operator to clean up (re-run with reset).
"""

import logging
from datetime import UTC, datetime
from typing import Callable, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from event_seed.config import Settings
from event_seed.errors import InsertError, ReadBackError, StoreNotEmptyError
from event_seed.events import service
from event_seed.events.fixtures import build_event, build_missions, build_rewards
from event_seed.events.models import Event, EventMission, EventReward
from event_seed.events.report import MissionLine, RewardLine, SeedSummary

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Seeder:
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        settings: Settings,
        reset: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.db = db
        self.settings = settings
        self.reset = reset
        self.clock = clock

    async def run(self) -> SeedSummary:
        """Reset (or check emptiness), insert event, missions, rewards, then read back."""
        await self._prepare_store()

        now = self.clock()
        event = build_event(self.settings.ORGANIZATION_ID, now)
        event_id = await service.insert_event(self.db, event)
        logger.info("Inserted event '%s' (%s)", event.name, event_id)

        missions = build_missions(event_id, now)
        rewards = build_rewards(event_id, now)
        try:
            mission_ids = await service.insert_missions(self.db, missions)
            logger.info("Inserted %d missions", len(mission_ids))
            reward_ids = await service.insert_rewards(self.db, rewards)
            logger.info("Inserted %d rewards", len(reward_ids))
        except InsertError:
            logger.error(
                "Event %s is orphaned: its children were not fully inserted "
                "and it was not rolled back",
                event_id,
            )
            raise

        return await self.verify(event_id, event, missions, rewards)

    async def _prepare_store(self) -> None:
        if self.reset:
            logger.warning(
                "Resetting event collections in '%s' (all documents are deleted)",
                self.settings.DATABASE_NAME,
            )
            await service.clear_collections(self.db)
            return

        counts = await service.count_documents(self.db)
        if any(counts.values()):
            raise StoreNotEmptyError(counts)

    async def verify(
        self,
        event_id: ObjectId,
        event: Event,
        missions: list[EventMission],
        rewards: list[EventReward],
    ) -> SeedSummary:
        """Read the seeded data back. Never writes; read failures are reported, not raised."""
        try:
            stored_event = await service.get_event(self.db, event_id)
            if stored_event is None:
                raise ReadBackError(f"event {event_id} not found after insert")
            stored_missions = await service.list_missions(self.db, event_id)
            stored_rewards = await service.list_rewards(self.db, event_id)
        except (PyMongoError, ValidationError, ReadBackError) as exc:
            error = exc if isinstance(exc, ReadBackError) else ReadBackError(str(exc))
            logger.error("Read-back of event %s failed, data is unverified: %s", event_id, error)
            return self._summary(event_id, event, missions, rewards, read_back_error=error)

        return self._summary(event_id, stored_event, stored_missions, stored_rewards)

    @staticmethod
    def _summary(
        event_id: ObjectId,
        event: Event,
        missions: list[EventMission],
        rewards: list[EventReward],
        read_back_error: Optional[ReadBackError] = None,
    ) -> SeedSummary:
        return SeedSummary(
            event_id=str(event_id),
            event_name=event.name,
            organization_id=event.organization_id,
            start_date=event.start_date,
            end_date=event.end_date,
            is_active=event.is_active,
            mission_count=len(missions),
            reward_count=len(rewards),
            missions=[MissionLine.from_mission(m) for m in missions],
            rewards=[RewardLine.from_reward(r) for r in rewards],
            verified=read_back_error is None,
            read_back_error=str(read_back_error) if read_back_error else None,
        )


async def clean(db: AsyncIOMotorDatabase) -> dict[str, int]:
    """Delete every document in the event collections without seeding."""
    return await service.clear_collections(db)
