from rest_framework import serializers

from apps.accounts.models import User, UserStats


class UserStatsSerializer(serializers.ModelSerializer):
    """사용자 레이팅 및 게임 통계 (읽기 전용)"""

    win_rate = serializers.FloatField(read_only=True)

    class Meta:
        model = UserStats
        fields = (
            "rating",
            "games_played",
            "total_wins",
            "total_losses",
            "total_draws",
            "win_streak",
            "best_win_streak",
            "win_rate",
            "updated_at",
        )
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """사용자 정보 조회용 Serializer"""

    stats = UserStatsSerializer(read_only=True)

    class Meta:
        model = User
        fields = (
            "id",
            "email",
            "nickname",
            "created_at",
            "stats",
        )
        read_only_fields = (
            "id",
            "created_at",
        )
