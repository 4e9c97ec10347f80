import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import apps.accounts.models.user_stats


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                (
                    "last_login",
                    models.DateTimeField(blank=True, null=True, verbose_name="last login"),
                ),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        db_index=True,
                        help_text="이메일 주소 (로그인 ID)",
                        max_length=254,
                        unique=True,
                    ),
                ),
                (
                    "nickname",
                    models.CharField(help_text="게임 내 표시 이름", max_length=50, unique=True),
                ),
                ("is_staff", models.BooleanField(default=False, help_text="관리자 권한")),
                ("is_active", models.BooleanField(default=True, help_text="활성 계정")),
                (
                    "date_joined",
                    models.DateTimeField(default=django.utils.timezone.now, help_text="가입일"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "사용자",
                "verbose_name_plural": "사용자",
                "db_table": "users",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="UserStats",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "rating",
                    models.IntegerField(
                        default=apps.accounts.models.user_stats.default_rating,
                        help_text="ELO 레이팅",
                    ),
                ),
                ("games_played", models.IntegerField(default=0, help_text="총 게임 수")),
                ("total_wins", models.IntegerField(default=0, help_text="승리 수")),
                ("total_losses", models.IntegerField(default=0, help_text="패배 수")),
                ("total_draws", models.IntegerField(default=0, help_text="무승부 수")),
                ("win_streak", models.IntegerField(default=0, help_text="현재 연승 수")),
                ("best_win_streak", models.IntegerField(default=0, help_text="최다 연승 수")),
                ("version", models.IntegerField(default=0, help_text="동시 수정 감지용 버전")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        help_text="연결된 사용자",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "사용자 통계",
                "verbose_name_plural": "사용자 통계",
                "db_table": "user_stats",
                "indexes": [
                    models.Index(fields=["-rating"], name="stats_rating_idx"),
                    models.Index(fields=["-games_played"], name="stats_games_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(rating__gte=0), name="stats_rating_non_negative"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(games_played__gte=0),
                        name="stats_games_played_positive",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(total_wins__gte=0), name="stats_total_wins_positive"
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
                        condition=models.Q(win_streak__gte=0), name="stats_win_streak_positive"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            games_played=models.F("total_wins")
                            + models.F("total_losses")
                            + models.F("total_draws")
                        ),
                        name="stats_games_played_sum",
                    ),
                ],
            },
        ),
    ]
