"""리더보드 조회 및 캐시"""

from __future__ import annotations

import logging
import uuid

from django.conf import settings
from django.core.cache import cache

from apps.accounts.models import User
from apps.ratings.constants import LeaderboardConstants

logger = logging.getLogger(__name__)


class LeaderboardService:
    """레이팅 리더보드 (limit별 캐시, 경기 반영 시 세대 키 교체로 전체 무효화)"""

    @staticmethod
    def _generation() -> str:
        return cache.get_or_set(
            LeaderboardConstants.GENERATION_KEY, lambda: uuid.uuid4().hex, timeout=None
        )

    @classmethod
    def cache_key(cls, limit: int) -> str:
        return f"leaderboard:{cls._generation()}:{limit}"

    @staticmethod
    def invalidate() -> None:
        """캐시된 모든 리더보드 무효화"""
        cache.set(LeaderboardConstants.GENERATION_KEY, uuid.uuid4().hex, timeout=None)

    @staticmethod
    def build(limit: int) -> list[dict]:
        """DB에서 상위 플레이어 조회"""
        return [
            {
                "rank": index,
                "user_id": user.pk,
                "nickname": user.nickname,
                "rating": user.stats.rating,
                "games_played": user.stats.games_played,
                "win_rate": user.stats.win_rate,
            }
            for index, user in enumerate(User.objects.top_players(limit), start=1)
        ]

    @classmethod
    def top_players(cls, limit: int = LeaderboardConstants.DEFAULT_LIMIT) -> list[dict]:
        """상위 플레이어 (캐시 우선)"""
        key = cls.cache_key(limit)
        entries = cache.get(key)
        if entries is None:
            entries = cls.build(limit)
            ttl = getattr(settings, "LEADERBOARD_CACHE_TTL", LeaderboardConstants.CACHE_TTL)
            cache.set(key, entries, ttl)
            logger.debug(f"leaderboard cache miss: limit={limit}")
        return entries
