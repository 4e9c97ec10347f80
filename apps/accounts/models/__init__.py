from .user import User
from .user_stats import UserStats

__all__ = ["User", "UserStats"]
