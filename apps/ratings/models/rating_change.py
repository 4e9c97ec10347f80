from django.conf import settings
from django.db import models


class RatingChangeManager(models.Manager):
    """RatingChange 커스텀 매니저"""

    def user_history(self, user, start=None, end=None):
        """유저의 레이팅 변화 기록 (기간 필터 선택)"""
        queryset = self.filter(user=user).select_related("opponent")
        if start is not None:
            queryset = queryset.filter(created_at__gte=start)
        if end is not None:
            queryset = queryset.filter(created_at__lte=end)
        return queryset


class RatingChange(models.Model):
    """경기별 레이팅 변화 기록 - RatingService가 레이팅 갱신과 같은 트랜잭션에서 추가"""

    RESULT_CHOICES = [
        ("win", "승리"),
        ("loss", "패배"),
        ("draw", "무승부"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="rating_changes",
        help_text="레이팅이 변경된 사용자",
    )
    opponent = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
        help_text="상대 사용자",
    )
    result = models.CharField(max_length=4, choices=RESULT_CHOICES, help_text="경기 결과")
    rating_before = models.IntegerField(help_text="경기 전 레이팅")
    rating_after = models.IntegerField(help_text="경기 후 레이팅")
    k_factor = models.FloatField(help_text="적용된 K-factor")

    created_at = models.DateTimeField(auto_now_add=True)

    objects = RatingChangeManager()

    class Meta:
        db_table = "rating_changes"
        verbose_name = "레이팅 변화"
        verbose_name_plural = "레이팅 변화"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="rating_change_user_idx"),
        ]

    def __str__(self):
        return f"{self.user_id}: {self.rating_before} → {self.rating_after} ({self.result})"

    @property
    def change(self):
        """레이팅 증감"""
        return self.rating_after - self.rating_before
