"""CoShow 2024 booth event fixture data and the builders that turn it into documents.

The organization id and the VISIT_STATION target are placeholders: replace
them with real values (ORGANIZATION_ID in .env, the station id below) before
seeding a store that real users hit.
"""

from datetime import UTC, datetime

from bson import DBRef, ObjectId

from event_seed.database import EVENTS
from event_seed.events.models import Event, EventMission, EventReward, MissionType

# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

EVENT = {
    "name": "CoShow 2024 부스 이벤트",
    "description": "버스 버디버디 부스를 방문하고 미션을 완료하여 푸짐한 경품을 받아가세요!",
    "start_date": datetime(2024, 11, 7, 0, 0, 0, tzinfo=UTC),
    "end_date": datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC),
    "is_active": True,
}

# ---------------------------------------------------------------------------
# Missions (order is the display sequence)
# ---------------------------------------------------------------------------

MISSIONS = [
    {
        "title": "특정 버스 탑승하기",
        "description": "5001번 버스를 타고 목적지까지 이동하세요",
        "mission_type": MissionType.BOARDING,
        "target_value": "5001",
        "is_required": True,
        "order": 1,
    },
    {
        "title": "특정 정류장 방문하기",
        "description": "CoShow 전시장 정류장을 방문하세요",
        "mission_type": MissionType.VISIT_STATION,
        "target_value": "STATION_COSHOW",  # placeholder station id
        "is_required": True,
        "order": 2,
    },
    {
        "title": "자동 승하차 감지 완료",
        "description": "버스에 탑승하여 자동 승하차 감지 기능을 체험하세요",
        "mission_type": MissionType.AUTO_DETECT_BOARDING,
        "target_value": None,
        "is_required": True,
        "order": 3,
    },
]

# ---------------------------------------------------------------------------
# Rewards (grade 1 = rarest). Probabilities sum to 1.00.
# ---------------------------------------------------------------------------

REWARDS = [
    # (grade, name, probability, quantity, image, description)
    (1, "AirPods Pro 2세대", 0.05, 5,
     "https://example.com/airpods-pro.jpg", "최신 노이즈 캔슬링 무선 이어폰"),
    (2, "스타벅스 기프티콘 3만원", 0.10, 10,
     "https://example.com/starbucks-30k.jpg", "스타벅스 모바일 기프트카드 3만원권"),
    (3, "카카오프렌즈 인형", 0.15, 15,
     "https://example.com/kakao-friends.jpg", "라이언 또는 어피치 인형 (랜덤)"),
    (4, "스타벅스 기프티콘 1만원", 0.20, 20,
     "https://example.com/starbucks-10k.jpg", "스타벅스 모바일 기프트카드 1만원권"),
    (5, "버스 버디버디 굿즈", 0.50, 50,
     "https://example.com/busbuddy-goods.jpg", "버스 버디버디 에코백 + 스티커 세트"),
]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def event_ref(event_id: ObjectId) -> DBRef:
    return DBRef(EVENTS, event_id)


def build_event(organization_id: str, now: datetime) -> Event:
    return Event(**EVENT, organization_id=organization_id, created_at=now, updated_at=now)


def build_missions(event_id: ObjectId, now: datetime) -> list[EventMission]:
    ref = event_ref(event_id)
    return [EventMission(**mission, event_id=ref, created_at=now) for mission in MISSIONS]


def build_rewards(event_id: ObjectId, now: datetime) -> list[EventReward]:
    ref = event_ref(event_id)
    return [
        EventReward(
            event_id=ref,
            reward_name=name,
            reward_grade=grade,
            probability=probability,
            total_quantity=quantity,
            remaining_quantity=quantity,  # full inventory at seed time
            image_url=image_url,
            description=description,
            created_at=now,
            updated_at=now,
        )
        for grade, name, probability, quantity, image_url, description in REWARDS
    ]
