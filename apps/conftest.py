"""Pytest 설정 및 공통 Fixtures"""

from django.contrib.auth import get_user_model
from django.core.cache import cache

import pytest
from faker import Faker
from rest_framework.test import APIClient

from apps.accounts.models import UserStats

User = get_user_model()
fake = Faker("ko_KR")


@pytest.fixture(autouse=True)
def clear_cache():
    """테스트 간 리더보드 캐시 격리"""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """API 클라이언트"""
    return APIClient()


@pytest.fixture
def create_user(db):
    """유저 생성 팩토리 (rating 등 통계 필드 지정 가능)"""

    def _create_user(rating=None, **kwargs):
        stats_fields = {
            field: kwargs.pop(field)
            for field in (
                "games_played",
                "total_wins",
                "total_losses",
                "total_draws",
                "win_streak",
                "best_win_streak",
            )
            if field in kwargs
        }
        defaults = {
            "email": fake.unique.email(),
            "nickname": fake.unique.user_name(),
            "password": "TestPass123!@#",
        }
        defaults.update(kwargs)
        password = defaults.pop("password")
        user = User.objects.create_user(**defaults, password=password)

        if rating is not None:
            stats_fields["rating"] = rating
        if stats_fields:
            UserStats.objects.filter(user=user).update(**stats_fields)
        return user

    return _create_user


@pytest.fixture
def authenticated_client(api_client, create_user):
    """인증된 API 클라이언트"""
    user = create_user()
    api_client.force_authenticate(user=user)
    api_client.user = user
    return api_client


@pytest.fixture
def staff_client(create_user):
    """관리자 API 클라이언트 (경기 결과 반영용)"""
    client = APIClient()
    user = create_user(is_staff=True)
    client.force_authenticate(user=user)
    client.user = user
    return client
