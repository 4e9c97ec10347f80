"""레이팅 상수 및 설정"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class MatchResult(str, Enum):
    """참가자 기준 경기 결과"""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class DrawStreakPolicy(str, Enum):
    """무승부 시 연승 처리 방식"""

    PRESERVE = "preserve"  # 연승 유지
    RESET = "reset"  # 연승 초기화


class EloConstants:
    """Elo 기본값 (settings에 값이 없을 때 사용)"""

    DEFAULT_RATING: ClassVar[int] = 1200
    K_FACTOR: ClassVar[int] = 32
    RATING_FLOOR: ClassVar[int] = 100
    RATING_CEILING: ClassVar[int] = 4000
    WIN_STREAK_MULTIPLIER: ClassVar[float] = 0.1  # 연승 1회당 10% 증가
    MAX_WIN_STREAK_BONUS: ClassVar[float] = 0.5  # 연승 보너스 최대 50%
    GAMES_PLAYED_DAMPENING: ClassVar[int] = 30
    MIN_DAMPENING_RATIO: ClassVar[float] = 0.5
    MAX_UPDATE_RETRIES: ClassVar[int] = 3

    SCORE_BY_RESULT: ClassVar[dict[MatchResult, float]] = {
        MatchResult.WIN: 1.0,
        MatchResult.LOSS: 0.0,
        MatchResult.DRAW: 0.5,
    }


class LeaderboardConstants:
    """리더보드 상수"""

    DEFAULT_LIMIT: ClassVar[int] = 10
    MAX_LIMIT: ClassVar[int] = 100
    CACHE_TTL: ClassVar[int] = 30
    GENERATION_KEY: ClassVar[str] = "leaderboard:generation"


@dataclass(frozen=True)
class EloSettings:
    """호출 시점의 Django settings에서 읽은 Elo 설정"""

    k_factor: int = EloConstants.K_FACTOR
    rating_floor: int = EloConstants.RATING_FLOOR
    rating_ceiling: int = EloConstants.RATING_CEILING
    dynamic_k_factor: bool = False
    win_streak_multiplier: float = EloConstants.WIN_STREAK_MULTIPLIER
    max_win_streak_bonus: float = EloConstants.MAX_WIN_STREAK_BONUS
    games_played_dampening: int = EloConstants.GAMES_PLAYED_DAMPENING
    max_update_retries: int = EloConstants.MAX_UPDATE_RETRIES
    draw_streak_policy: DrawStreakPolicy = DrawStreakPolicy.PRESERVE

    @classmethod
    def from_settings(cls) -> EloSettings:
        policy = getattr(settings, "ELO_DRAW_STREAK_POLICY", DrawStreakPolicy.PRESERVE.value)
        try:
            draw_streak_policy = DrawStreakPolicy(policy)
        except ValueError as e:
            raise ImproperlyConfigured(
                f"ELO_DRAW_STREAK_POLICY는 preserve 또는 reset 이어야 합니다: {policy}"
            ) from e

        config = cls(
            k_factor=getattr(settings, "ELO_K_FACTOR", EloConstants.K_FACTOR),
            rating_floor=getattr(settings, "ELO_RATING_FLOOR", EloConstants.RATING_FLOOR),
            rating_ceiling=getattr(settings, "ELO_RATING_CEILING", EloConstants.RATING_CEILING),
            dynamic_k_factor=getattr(settings, "ELO_DYNAMIC_K_FACTOR", False),
            win_streak_multiplier=getattr(
                settings, "ELO_WIN_STREAK_MULTIPLIER", EloConstants.WIN_STREAK_MULTIPLIER
            ),
            max_win_streak_bonus=getattr(
                settings, "ELO_MAX_WIN_STREAK_BONUS", EloConstants.MAX_WIN_STREAK_BONUS
            ),
            games_played_dampening=getattr(
                settings, "ELO_GAMES_PLAYED_DAMPENING", EloConstants.GAMES_PLAYED_DAMPENING
            ),
            max_update_retries=getattr(
                settings, "ELO_MAX_UPDATE_RETRIES", EloConstants.MAX_UPDATE_RETRIES
            ),
            draw_streak_policy=draw_streak_policy,
        )
        if config.rating_floor < 0 or config.rating_floor > config.rating_ceiling:
            raise ImproperlyConfigured("ELO_RATING_FLOOR는 0 이상, ELO_RATING_CEILING 이하여야 합니다")
        if config.max_update_retries < 0:
            raise ImproperlyConfigured("ELO_MAX_UPDATE_RETRIES는 음수가 될 수 없습니다")
        return config
