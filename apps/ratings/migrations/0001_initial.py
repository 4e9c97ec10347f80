import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="RatingChange",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "result",
                    models.CharField(
                        choices=[("win", "승리"), ("loss", "패배"), ("draw", "무승부")],
                        help_text="경기 결과",
                        max_length=4,
                    ),
                ),
                ("rating_before", models.IntegerField(help_text="경기 전 레이팅")),
                ("rating_after", models.IntegerField(help_text="경기 후 레이팅")),
                ("k_factor", models.FloatField(help_text="적용된 K-factor")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "opponent",
                    models.ForeignKey(
                        blank=True,
                        help_text="상대 사용자",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="레이팅이 변경된 사용자",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rating_changes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "레이팅 변화",
                "verbose_name_plural": "레이팅 변화",
                "db_table": "rating_changes",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="rating_change_user_idx"),
                ],
            },
        ),
    ]
