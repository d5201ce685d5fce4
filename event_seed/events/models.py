from datetime import datetime
from enum import Enum
from typing import Optional

from bson import DBRef, ObjectId
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Documents are stored with camelCase keys (startDate, isActive, rewardGrade, ...),
# the shape the event service reads.
DOCUMENT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    arbitrary_types_allowed=True,
    use_enum_values=True,
)


class MissionType(str, Enum):
    BOARDING = "BOARDING"  # Ride a specific bus
    VISIT_STATION = "VISIT_STATION"  # Visit a specific station
    AUTO_DETECT_BOARDING = "AUTO_DETECT_BOARDING"  # Complete one auto-detected boarding


class EventDocument(BaseModel):
    """Common shape of every document this project writes.

    ``id`` maps to Mongo's ``_id``. It is None until the document is inserted;
    to_document() leaves it out so the driver generates one.
    """

    model_config = DOCUMENT_CONFIG

    id: Optional[ObjectId] = Field(None, alias="_id")

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"})


class Event(EventDocument):
    """A time-bounded promotional campaign (collection ``events``).

    The event does not hold its missions or rewards; they point back at it
    through a DBRef in their own ``eventId`` field.
    """

    name: str  # e.g. "CoShow 2024 부스 이벤트"
    description: str
    start_date: datetime  # UTC
    end_date: datetime  # UTC, after start_date
    is_active: bool = True
    organization_id: str  # Organization is not modeled here; plain identifier
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _check_window(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class EventMission(EventDocument):
    """A task participants complete within an event (collection ``event_missions``)."""

    event_id: DBRef  # DBRef("events", <event _id>)
    title: str
    description: str
    mission_type: MissionType
    target_value: Optional[str] = None  # Bus number, station id, ... None when the type needs no target
    is_required: bool = True
    order: int = Field(..., ge=1)  # Presentation order, contiguous from 1 within an event
    created_at: datetime


class EventReward(EventDocument):
    """A prize tier with a win probability and a capped inventory (collection ``event_rewards``)."""

    event_id: DBRef
    reward_name: str
    reward_grade: int = Field(..., ge=1)  # 1 = rarest / most valuable
    probability: float = Field(..., gt=0, le=1)
    total_quantity: int = Field(..., ge=0)
    remaining_quantity: int = Field(..., ge=0)  # Decremented by the awarding service, never here
    image_url: str
    description: str
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _check_quantities(self):
        if self.remaining_quantity > self.total_quantity:
            raise ValueError("remaining_quantity cannot exceed total_quantity")
        return self


class EventParticipation(EventDocument):
    """A user's progress and draw result for an event (collection ``event_participations``).

    Owned by the event service. The seeder only clears this collection; the
    model documents the shape of what it is clearing.
    """

    event_id: DBRef
    user_id: DBRef
    completed_missions: list[str] = Field(default_factory=list)  # Mission ids as strings
    is_eligible_for_draw: bool = False
    has_drawn: bool = False
    drawn_reward_id: Optional[DBRef] = None
    draw_timestamp: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
