from .user_serializer import UserSerializer, UserStatsSerializer

__all__ = [
    "UserSerializer",
    "UserStatsSerializer",
]
