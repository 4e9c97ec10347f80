"""사용자 레이팅 및 게임 통계 모델"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from apps.ratings.exceptions import RatingUpdateConflict

# RatingService가 한 번에 기록하는 필드 (레이팅 + 통계)
RATING_AND_STATS_FIELDS = (
    "rating",
    "games_played",
    "total_wins",
    "total_losses",
    "total_draws",
    "win_streak",
    "best_win_streak",
)


def default_rating():
    """신규 유저 기본 레이팅 (ELO_DEFAULT_RATING)"""
    return getattr(settings, "ELO_DEFAULT_RATING", 1200)


class UserStatsManager(models.Manager):
    """레이팅/통계 영속성 매니저 - RatingService 전용 쓰기 경로"""

    def get_rating_and_stats(self, user_id):
        """유저의 레이팅/통계 조회

        Raises:
            UserStats.DoesNotExist: 해당 유저의 통계가 없을 때
        """
        return self.get(user_id=user_id)

    def lock_pair(self, user_ids):
        """두 유저의 통계를 행 잠금으로 조회 (user_id 순서로 잠가 데드락 방지)

        Returns:
            dict[int, UserStats]: user_id → UserStats (없는 유저는 빠짐)
        """
        rows = self.select_for_update().filter(user_id__in=user_ids).order_by("user_id")
        return {stats.user_id: stats for stats in rows}

    def save_rating_and_stats(self, stats):
        """버전 검사 후 레이팅/통계 저장 (낙관적 잠금)

        조회 이후 다른 트랜잭션이 같은 행을 수정했다면 저장하지 않고 예외 발생

        Raises:
            RatingUpdateConflict: 버전 불일치 (동시 수정 감지)
        """
        values = {field: getattr(stats, field) for field in RATING_AND_STATS_FIELDS}
        updated = self.filter(pk=stats.pk, version=stats.version).update(
            **values,
            version=models.F("version") + 1,
            updated_at=timezone.now(),
        )
        if updated == 0:
            raise RatingUpdateConflict(f"user_id={stats.user_id} 통계가 다른 요청에 의해 변경되었습니다.")
        stats.version += 1


class UserStats(models.Model):
    """사용자 레이팅 + 게임 통계 - User 모델과 1:1 관계

    Note: 레이팅/통계 필드는 RatingService만 수정함 (다른 곳은 읽기 전용)
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="stats",
        help_text="연결된 사용자",
    )

    rating = models.IntegerField(default=default_rating, help_text="ELO 레이팅")
    games_played = models.IntegerField(default=0, help_text="총 게임 수")
    total_wins = models.IntegerField(default=0, help_text="승리 수")
    total_losses = models.IntegerField(default=0, help_text="패배 수")
    total_draws = models.IntegerField(default=0, help_text="무승부 수")
    win_streak = models.IntegerField(default=0, help_text="현재 연승 수")
    best_win_streak = models.IntegerField(default=0, help_text="최다 연승 수")

    # 낙관적 잠금용 버전 (저장할 때마다 +1)
    version = models.IntegerField(default=0, help_text="동시 수정 감지용 버전")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserStatsManager()

    class Meta:
        db_table = "user_stats"
        verbose_name = "사용자 통계"
        verbose_name_plural = "사용자 통계"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=0),
                name="stats_rating_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(games_played__gte=0),
                name="stats_games_played_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(total_wins__gte=0),
                name="stats_total_wins_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(total_losses__gte=0),
                name="stats_total_losses_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(total_draws__gte=0),
                name="stats_total_draws_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(win_streak__gte=0),
                name="stats_win_streak_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(
                    games_played=models.F("total_wins")
                    + models.F("total_losses")
                    + models.F("total_draws")
                ),
                name="stats_games_played_sum",
            ),
        ]
        indexes = [
            models.Index(fields=["-rating"], name="stats_rating_idx"),
            models.Index(fields=["-games_played"], name="stats_games_idx"),
        ]

    def __str__(self):
        return f"{self.user.nickname} - Rating: {self.rating}"

    def clean(self):
        super().clean()
        if self.rating < 0:
            raise ValidationError("레이팅은 음수가 될 수 없습니다")
        if self.games_played < 0:
            raise ValidationError("게임 수는 음수가 될 수 없습니다")
        if self.total_wins + self.total_losses + self.total_draws != self.games_played:
            raise ValidationError("승/패/무승부 합계가 게임 수와 일치하지 않습니다")

    @property
    def win_rate(self):
        """승률 계산"""
        if self.games_played == 0:
            return 0
        return round((self.total_wins / self.games_played) * 100, 2)
