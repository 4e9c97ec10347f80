from .rating_serializer import (
    LeaderboardEntrySerializer,
    LeaderboardQuerySerializer,
    MatchResultResponseSerializer,
    MatchResultSerializer,
    RatingChangeSerializer,
    RatingHistoryQuerySerializer,
)

__all__ = [
    "LeaderboardEntrySerializer",
    "LeaderboardQuerySerializer",
    "MatchResultSerializer",
    "MatchResultResponseSerializer",
    "RatingChangeSerializer",
    "RatingHistoryQuerySerializer",
]
