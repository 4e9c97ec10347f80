from .rating_views import LeaderboardView, MatchResultView, MyRatingHistoryView, MyStatsView

__all__ = ["LeaderboardView", "MatchResultView", "MyRatingHistoryView", "MyStatsView"]
