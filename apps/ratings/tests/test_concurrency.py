"""동시 수정 감지 및 재시도 테스트"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from django.db import connection, connections
from django.db.models import F

import pytest

from apps.accounts.models import UserStats
from apps.accounts.models.user_stats import UserStatsManager
from apps.ratings.exceptions import RatingUpdateConflict
from apps.ratings.models import RatingChange
from apps.ratings.services import RatingService
from apps.ratings.types import MatchOutcome


@pytest.mark.django_db
class TestVersionCheck:
    """낙관적 잠금 (save_rating_and_stats)"""

    def test_stale_instance_rejected(self, create_user):
        user = create_user()
        first = UserStats.objects.get_rating_and_stats(user.pk)
        second = UserStats.objects.get_rating_and_stats(user.pk)

        first.rating = 1300
        UserStats.objects.save_rating_and_stats(first)
        assert first.version == 1

        second.rating = 1100
        with pytest.raises(RatingUpdateConflict):
            UserStats.objects.save_rating_and_stats(second)

        assert UserStats.objects.get(user=user).rating == 1300

    def test_get_missing_raises_does_not_exist(self, db):
        with pytest.raises(UserStats.DoesNotExist):
            UserStats.objects.get_rating_and_stats(999999)


@pytest.mark.django_db
class TestConflictRetry:
    """충돌 시 읽기-계산-쓰기 재시도"""

    def test_retries_after_concurrent_write(self, create_user, caplog):
        """첫 조회 직후 다른 요청이 버전을 올리면 재시도해서 성공"""
        winner = create_user()
        loser = create_user()
        original_lock_pair = UserStatsManager.lock_pair
        calls = []

        def lock_pair_with_interleaved_write(manager, user_ids):
            rows = original_lock_pair(manager, user_ids)
            calls.append(user_ids)
            if len(calls) == 1:
                UserStats.objects.filter(user=winner).update(version=F("version") + 1)
            return rows

        with patch.object(
            UserStatsManager, "lock_pair", autospec=True, side_effect=lock_pair_with_interleaved_write
        ):
            with caplog.at_level("WARNING", logger="apps.ratings"):
                result = RatingService.apply_match_result(MatchOutcome(winner.pk, loser.pk))

        assert len(calls) == 2
        assert result.updated_rating_a == 1216
        assert "재시도 1/3" in caplog.text
        stats = UserStats.objects.get(user=winner)
        assert stats.games_played == 1
        assert RatingChange.objects.count() == 2

    def test_conflict_surfaced_after_retries_exhausted(self, create_user):
        winner = create_user()
        loser = create_user()

        with patch.object(
            UserStatsManager,
            "save_rating_and_stats",
            autospec=True,
            side_effect=RatingUpdateConflict(),
        ) as mock_save:
            with pytest.raises(RatingUpdateConflict):
                RatingService.apply_match_result(MatchOutcome(winner.pk, loser.pk))

        # 최초 1회 + 재시도 3회
        assert mock_save.call_count == 4
        stats = UserStats.objects.get(user=winner)
        assert stats.games_played == 0
        assert stats.rating == 1200
        assert RatingChange.objects.count() == 0

    def test_no_retry_when_disabled(self, create_user, settings):
        settings.ELO_MAX_UPDATE_RETRIES = 0
        winner = create_user()
        loser = create_user()

        with patch.object(
            UserStatsManager,
            "save_rating_and_stats",
            autospec=True,
            side_effect=RatingUpdateConflict(),
        ) as mock_save:
            with pytest.raises(RatingUpdateConflict):
                RatingService.apply_match_result(MatchOutcome(winner.pk, loser.pk))

        assert mock_save.call_count == 1

    def test_partial_write_rolled_back(self, create_user):
        """두 번째 참가자 저장 실패 시 첫 번째 참가자 변경도 롤백"""
        winner = create_user()
        loser = create_user()
        original_save = UserStatsManager.save_rating_and_stats

        def fail_for_loser(manager, stats):
            if stats.user_id == loser.pk:
                raise RatingUpdateConflict()
            return original_save(manager, stats)

        with patch.object(
            UserStatsManager, "save_rating_and_stats", autospec=True, side_effect=fail_for_loser
        ):
            with pytest.raises(RatingUpdateConflict):
                RatingService.apply_match_result(MatchOutcome(winner.pk, loser.pk))

        stats = UserStats.objects.get(user=winner)
        assert stats.rating == 1200
        assert stats.games_played == 0
        assert stats.version == 0


@pytest.mark.skipif(
    connection.vendor != "postgresql", reason="행 잠금 동시성 테스트는 PostgreSQL에서만 수행"
)
@pytest.mark.django_db(transaction=True)
class TestConcurrentMatches:
    """공유 참가자가 있는 경기의 동시 반영 (lost update 없음)"""

    def test_shared_participant_counts_both_games(self, create_user):
        shared = create_user()
        opponent_a = create_user()
        opponent_b = create_user()
        barrier = threading.Barrier(2)

        def apply(opponent_id):
            try:
                barrier.wait(timeout=5)
                return RatingService.apply_match_result(MatchOutcome(shared.pk, opponent_id))
            finally:
                connections.close_all()

        with ThreadPoolExecutor(max_workers=2) as executor:
            results = list(executor.map(apply, [opponent_a.pk, opponent_b.pk]))

        assert len(results) == 2
        stats = UserStats.objects.get(user=shared)
        assert stats.games_played == 2
        assert stats.total_wins == 2
        assert stats.win_streak == 2
        assert stats.version == 2
