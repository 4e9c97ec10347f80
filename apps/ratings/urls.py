"""Ratings 앱 URL 설정"""

from django.urls import path

from apps.ratings.views import LeaderboardView, MatchResultView, MyRatingHistoryView, MyStatsView

app_name = "ratings"

urlpatterns = [
    path("leaderboard/", LeaderboardView.as_view(), name="leaderboard"),
    path("me/", MyStatsView.as_view(), name="my-stats"),
    path("me/history/", MyRatingHistoryView.as_view(), name="my-history"),
    # 경기 서버 / 관리자 전용
    path("matches/", MatchResultView.as_view(), name="match-result"),
]
