"""레이팅/통계 조회 및 경기 결과 반영 View"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.models import UserStats
from apps.accounts.serializers import UserStatsSerializer
from apps.ratings.exceptions import UnknownParticipant
from apps.ratings.models import RatingChange
from apps.ratings.serializers import (
    LeaderboardEntrySerializer,
    LeaderboardQuerySerializer,
    MatchResultResponseSerializer,
    MatchResultSerializer,
    RatingChangeSerializer,
    RatingHistoryQuerySerializer,
)
from apps.ratings.services import LeaderboardService, RatingService


class LeaderboardView(APIView):
    """레이팅 리더보드 (로그인 필요, 30초 캐시)"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[OpenApiParameter("limit", int, description="조회할 순위 수 (1~100)")],
        responses={200: LeaderboardEntrySerializer(many=True)},
        tags=["레이팅"],
    )
    def get(self, request: Request) -> Response:
        query = LeaderboardQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        entries = LeaderboardService.top_players(query.validated_data["limit"])
        return Response({"top_elo": entries}, status=status.HTTP_200_OK)


class MyStatsView(APIView):
    """내 레이팅 및 게임 통계"""

    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserStatsSerializer}, tags=["레이팅"])
    def get(self, request: Request) -> Response:
        try:
            stats = UserStats.objects.get_rating_and_stats(request.user.pk)
        except UserStats.DoesNotExist as e:
            raise UnknownParticipant(request.user.pk) from e

        response = Response(UserStatsSerializer(stats).data)
        response["Cache-Control"] = "private, max-age=10"
        return response


class MyRatingHistoryView(APIView):
    """내 레이팅 변화 기록 (기간 필터)"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter("start_time", str, description="ISO-8601 시작 시각"),
            OpenApiParameter("end_time", str, description="ISO-8601 종료 시각"),
        ],
        responses={200: RatingChangeSerializer(many=True)},
        tags=["레이팅"],
    )
    def get(self, request: Request) -> Response:
        query = RatingHistoryQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        history = RatingChange.objects.user_history(
            request.user,
            start=query.validated_data.get("start_time"),
            end=query.validated_data.get("end_time"),
        )
        return Response(RatingChangeSerializer(history, many=True).data)


class MatchResultView(APIView):
    """경기 결과 반영 (관리자 전용 - 경기 서버 / 수동 정정)"""

    permission_classes = [IsAdminUser]

    @extend_schema(
        request=MatchResultSerializer,
        responses={
            201: MatchResultResponseSerializer,
            400: {"description": "잘못된 경기 결과"},
            404: {"description": "참가자 레이팅 정보 없음"},
            409: {"description": "동시 수정 충돌 (재시도 필요)"},
        },
        tags=["레이팅"],
    )
    def post(self, request: Request) -> Response:
        serializer = MatchResultSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        # InvalidOutcome / UnknownParticipant / RatingUpdateConflict는 DRF가 응답으로 변환
        result = RatingService.apply_match_result(serializer.to_outcome())

        return Response(MatchResultResponseSerializer(result).data, status=status.HTTP_201_CREATED)
