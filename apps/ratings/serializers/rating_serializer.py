from rest_framework import serializers

from apps.ratings.constants import LeaderboardConstants
from apps.ratings.models import RatingChange
from apps.ratings.types import MatchOutcome


class LeaderboardQuerySerializer(serializers.Serializer):
    """리더보드 조회 파라미터"""

    limit = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=LeaderboardConstants.MAX_LIMIT,
        default=LeaderboardConstants.DEFAULT_LIMIT,
        help_text="조회할 순위 수 (1~100, 기본 10)",
    )


class LeaderboardEntrySerializer(serializers.Serializer):
    """리더보드 항목"""

    rank = serializers.IntegerField()
    user_id = serializers.IntegerField()
    nickname = serializers.CharField()
    rating = serializers.IntegerField()
    games_played = serializers.IntegerField()
    win_rate = serializers.FloatField()


class RatingChangeSerializer(serializers.ModelSerializer):
    """레이팅 변화 기록"""

    change = serializers.IntegerField(read_only=True)
    opponent_nickname = serializers.CharField(
        source="opponent.nickname", read_only=True, default=None
    )

    class Meta:
        model = RatingChange
        fields = (
            "id",
            "opponent_id",
            "opponent_nickname",
            "result",
            "rating_before",
            "rating_after",
            "change",
            "created_at",
        )
        read_only_fields = fields


class RatingHistoryQuerySerializer(serializers.Serializer):
    """레이팅 기록 조회 기간 (ISO-8601)"""

    start_time = serializers.DateTimeField(required=False, help_text="조회 시작 시각")
    end_time = serializers.DateTimeField(required=False, help_text="조회 종료 시각")

    def validate(self, attrs):
        start_time = attrs.get("start_time")
        end_time = attrs.get("end_time")
        if start_time and end_time and start_time > end_time:
            raise serializers.ValidationError(
                {"start_time": "start_time은 end_time보다 이전이어야 합니다."}
            )
        return attrs


class MatchResultSerializer(serializers.Serializer):
    """경기 결과 입력"""

    winner_id = serializers.IntegerField(help_text="승자 ID (무승부면 첫 번째 참가자)")
    loser_id = serializers.IntegerField(help_text="패자 ID (무승부면 두 번째 참가자)")
    is_draw = serializers.BooleanField(default=False, help_text="무승부 여부")

    def validate(self, attrs):
        if attrs["winner_id"] == attrs["loser_id"]:
            raise serializers.ValidationError("같은 참가자끼리의 경기 결과는 반영할 수 없습니다.")
        return attrs

    def to_outcome(self) -> MatchOutcome:
        data = self.validated_data
        return MatchOutcome(
            winner_id=data["winner_id"],
            loser_id=data["loser_id"],
            is_draw=data["is_draw"],
        )


class ParticipantRatingSerializer(serializers.Serializer):
    """경기 반영 후 참가자 레이팅"""

    user_id = serializers.IntegerField()
    result = serializers.CharField(source="result.value")
    rating_before = serializers.IntegerField()
    rating_after = serializers.IntegerField()
    change = serializers.IntegerField()


class MatchResultResponseSerializer(serializers.Serializer):
    """경기 반영 결과"""

    updated_rating_a = serializers.IntegerField()
    updated_rating_b = serializers.IntegerField()
    participant_a = ParticipantRatingSerializer()
    participant_b = ParticipantRatingSerializer()
