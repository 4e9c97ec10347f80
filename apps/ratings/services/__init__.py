from .elo import calculate_k_factor, calculate_new_rating, expected_score, expected_scores
from .leaderboard_service import LeaderboardService
from .rating_service import RatingService

__all__ = [
    "RatingService",
    "LeaderboardService",
    "calculate_k_factor",
    "calculate_new_rating",
    "expected_score",
    "expected_scores",
]
