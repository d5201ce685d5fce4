from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from event_seed.events.models import EventMission, EventReward


class MissionLine(BaseModel):
    title: str
    mission_type: str
    order: int
    target_value: Optional[str] = None

    @classmethod
    def from_mission(cls, mission: EventMission) -> "MissionLine":
        return cls(
            title=mission.title,
            mission_type=mission.mission_type,
            order=mission.order,
            target_value=mission.target_value,
        )


class RewardLine(BaseModel):
    grade: int
    name: str
    probability: float
    total_quantity: int
    remaining_quantity: int

    @classmethod
    def from_reward(cls, reward: EventReward) -> "RewardLine":
        return cls(
            grade=reward.reward_grade,
            name=reward.reward_name,
            probability=reward.probability,
            total_quantity=reward.total_quantity,
            remaining_quantity=reward.remaining_quantity,
        )


class SeedSummary(BaseModel):
    """What a seeding run wrote, as read back from the store.

    When the read-back fails the counts come from what was inserted,
    ``verified`` is False and ``read_back_error`` holds the reason.
    """

    event_id: str
    event_name: str
    organization_id: str
    start_date: datetime
    end_date: datetime
    is_active: bool
    mission_count: int
    reward_count: int
    missions: list[MissionLine] = []
    rewards: list[RewardLine] = []
    verified: bool = True
    read_back_error: Optional[str] = None


def _percent(probability: float) -> str:
    return f"{round(probability * 100, 2):g}%"


def format_summary(summary: SeedSummary) -> str:
    """Human-readable report for the operator who ran the seeder."""
    rule = "=" * 40
    lines = [
        rule,
        "📋 생성된 이벤트 데이터 요약",
        rule,
        f"이벤트 ID: {summary.event_id}",
        f"이벤트 이름: {summary.event_name}",
        f"미션 수: {summary.mission_count}개",
        f"상품 수: {summary.reward_count}개",
        f"조직 ID: {summary.organization_id}",
        "",
        "⚠️  주의: organizationId와 targetValue를 실제 값으로 변경하세요!",
        rule,
    ]

    if not summary.verified:
        lines += ["", f"❌ 데이터 조회 실패 (저장은 완료됨): {summary.read_back_error}"]
        return "\n".join(lines)

    lines += [
        "",
        "📊 이벤트 조회 테스트:",
        f"  name: {summary.event_name}",
        f"  startDate: {summary.start_date.isoformat()}",
        f"  endDate: {summary.end_date.isoformat()}",
        f"  isActive: {str(summary.is_active).lower()}",
        f"  organizationId: {summary.organization_id}",
    ]
    lines += ["", "📋 미션 목록:"]
    lines += [f"  - {m.title} ({m.mission_type})" for m in summary.missions]
    lines += ["", "🎁 상품 목록:"]
    lines += [f"  - {r.grade}등: {r.name} ({_percent(r.probability)})" for r in summary.rewards]
    return "\n".join(lines)
