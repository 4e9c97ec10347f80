"""레이팅 갱신 입력/출력 값 타입"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MatchResult


@dataclass(frozen=True)
class MatchOutcome:
    """종료된 경기 결과 (저장하지 않음)

    무승부일 때 winner_id / loser_id는 순서 무관한 두 참가자
    """

    winner_id: int | None
    loser_id: int | None
    is_draw: bool = False

    @property
    def participant_ids(self) -> tuple[int | None, int | None]:
        return self.winner_id, self.loser_id


@dataclass(frozen=True)
class ParticipantUpdate:
    """한 참가자의 레이팅 변화"""

    user_id: int
    result: MatchResult
    rating_before: int
    rating_after: int
    k_factor: float

    @property
    def change(self) -> int:
        return self.rating_after - self.rating_before


@dataclass(frozen=True)
class RatingUpdateResult:
    """apply_match_result 결과 - A는 승자 (무승부면 첫 번째 참가자)"""

    participant_a: ParticipantUpdate
    participant_b: ParticipantUpdate

    @property
    def updated_rating_a(self) -> int:
        return self.participant_a.rating_after

    @property
    def updated_rating_b(self) -> int:
        return self.participant_b.rating_after
