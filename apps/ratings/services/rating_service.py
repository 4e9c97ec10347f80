"""레이팅 및 통계 관리 서비스"""

from __future__ import annotations

import logging

from django.db import transaction

from apps.accounts.models import UserStats
from apps.ratings.constants import DrawStreakPolicy, EloConstants, EloSettings, MatchResult
from apps.ratings.exceptions import InvalidOutcome, RatingUpdateConflict, UnknownParticipant
from apps.ratings.models import RatingChange
from apps.ratings.types import MatchOutcome, ParticipantUpdate, RatingUpdateResult

from .elo import calculate_k_factor, calculate_new_rating
from .leaderboard_service import LeaderboardService

logger = logging.getLogger(__name__)


class RatingService:
    """ELO 레이팅 및 플레이어 통계 관리 (레이팅/통계의 유일한 쓰기 경로)"""

    @staticmethod
    def validate_outcome(outcome: MatchOutcome) -> None:
        """경기 결과 검증 (DB 접근 전)

        Raises:
            InvalidOutcome: 참가자 누락, 동일 참가자, is_draw 타입 오류
        """
        if not isinstance(outcome, MatchOutcome):
            raise InvalidOutcome("경기 결과 형식이 올바르지 않습니다.")
        if not isinstance(outcome.is_draw, bool):
            raise InvalidOutcome("is_draw는 true 또는 false 여야 합니다.")

        for user_id in outcome.participant_ids:
            if user_id is None:
                raise InvalidOutcome("승자/패자 또는 무승부 참가자 두 명이 모두 필요합니다.")
            if isinstance(user_id, bool) or not isinstance(user_id, int):
                raise InvalidOutcome(f"참가자 ID는 정수여야 합니다: {user_id!r}")

        if outcome.winner_id == outcome.loser_id:
            raise InvalidOutcome("같은 참가자끼리의 경기 결과는 반영할 수 없습니다.")

    @staticmethod
    def update_user_stats(stats: UserStats, result: MatchResult, config: EloSettings) -> None:
        """유저 통계 업데이트 (저장하지 않음, 호출자가 save 필요)"""
        stats.games_played += 1
        if result == MatchResult.WIN:
            stats.total_wins += 1
            stats.win_streak += 1
            stats.best_win_streak = max(stats.best_win_streak, stats.win_streak)
        elif result == MatchResult.LOSS:
            stats.total_losses += 1
            stats.win_streak = 0
        else:
            stats.total_draws += 1
            if config.draw_streak_policy == DrawStreakPolicy.RESET:
                stats.win_streak = 0

    @staticmethod
    def _compute_update(
        stats: UserStats,
        opponent: UserStats,
        result: MatchResult,
        config: EloSettings,
    ) -> ParticipantUpdate:
        """경기 전 레이팅/통계 기준으로 새 레이팅 계산"""
        k_factor = calculate_k_factor(
            stats.games_played, stats.win_streak, result == MatchResult.WIN, config
        )
        new_rating = calculate_new_rating(
            stats.rating,
            opponent.rating,
            EloConstants.SCORE_BY_RESULT[result],
            k_factor=k_factor,
            floor=config.rating_floor,
            ceiling=config.rating_ceiling,
        )
        return ParticipantUpdate(
            user_id=stats.user_id,
            result=result,
            rating_before=stats.rating,
            rating_after=new_rating,
            k_factor=k_factor,
        )

    @staticmethod
    def _apply_once(outcome: MatchOutcome, config: EloSettings) -> RatingUpdateResult:
        """읽기 → 계산 → 쓰기 1회 (호출자가 transaction.atomic으로 감쌈)"""
        stats_by_user = UserStats.objects.lock_pair(outcome.participant_ids)
        for user_id in outcome.participant_ids:
            if user_id not in stats_by_user:
                raise UnknownParticipant(user_id)

        stats_a = stats_by_user[outcome.winner_id]
        stats_b = stats_by_user[outcome.loser_id]

        if outcome.is_draw:
            result_a = result_b = MatchResult.DRAW
        else:
            result_a, result_b = MatchResult.WIN, MatchResult.LOSS

        # 양쪽 모두 경기 전 값으로 계산
        update_a = RatingService._compute_update(stats_a, stats_b, result_a, config)
        update_b = RatingService._compute_update(stats_b, stats_a, result_b, config)

        for stats, update in ((stats_a, update_a), (stats_b, update_b)):
            RatingService.update_user_stats(stats, update.result, config)
            stats.rating = update.rating_after
            UserStats.objects.save_rating_and_stats(stats)

        RatingChange.objects.bulk_create(
            [
                RatingChange(
                    user_id=update.user_id,
                    opponent_id=opponent_id,
                    result=update.result.value,
                    rating_before=update.rating_before,
                    rating_after=update.rating_after,
                    k_factor=update.k_factor,
                )
                for update, opponent_id in (
                    (update_a, update_b.user_id),
                    (update_b, update_a.user_id),
                )
            ]
        )

        return RatingUpdateResult(participant_a=update_a, participant_b=update_b)

    @staticmethod
    def apply_match_result(outcome: MatchOutcome) -> RatingUpdateResult:
        """경기 종료 후 양쪽 플레이어 레이팅 및 통계 업데이트

        두 참가자의 레코드를 하나의 트랜잭션에서 갱신 (전부 반영 또는 전부 미반영).
        버전 충돌 시 읽기-계산-쓰기를 ELO_MAX_UPDATE_RETRIES 회까지 재시도.
        같은 결과를 두 번 호출하면 두 번 반영됨 (중복 제거는 호출자 책임).

        Raises:
            InvalidOutcome: 잘못된 입력 (DB 접근 없음)
            UnknownParticipant: 참가자 통계 없음 (아무것도 저장하지 않음)
            RatingUpdateConflict: 재시도 소진
        """
        RatingService.validate_outcome(outcome)
        config = EloSettings.from_settings()

        attempt = 0
        while True:
            attempt += 1
            try:
                with transaction.atomic():
                    result = RatingService._apply_once(outcome, config)
                    # 커밋 이후 무효화 실패는 로그만 남김
                    transaction.on_commit(LeaderboardService.invalidate, robust=True)
            except RatingUpdateConflict:
                if attempt > config.max_update_retries:
                    logger.error(
                        f"레이팅 갱신 재시도 소진: winner={outcome.winner_id} "
                        f"loser={outcome.loser_id} attempts={attempt}"
                    )
                    raise
                logger.warning(
                    f"레이팅 갱신 충돌, 재시도 {attempt}/{config.max_update_retries}: "
                    f"winner={outcome.winner_id} loser={outcome.loser_id}"
                )
                continue

            logger.info(
                f"레이팅 갱신: {result.participant_a.user_id} "
                f"{result.participant_a.rating_before}→{result.updated_rating_a}, "
                f"{result.participant_b.user_id} "
                f"{result.participant_b.rating_before}→{result.updated_rating_b} "
                f"(draw={outcome.is_draw})"
            )
            return result
