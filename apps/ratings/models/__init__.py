from .rating_change import RatingChange

__all__ = ["RatingChange"]
