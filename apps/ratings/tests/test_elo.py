"""Elo 계산 순수 함수 테스트"""

import pytest

from apps.ratings.constants import EloSettings
from apps.ratings.services.elo import (
    calculate_k_factor,
    calculate_new_rating,
    expected_score,
    expected_scores,
    round_half_away_from_zero,
)


class TestExpectedScore:
    """기대 승률"""

    @pytest.mark.parametrize(
        "rating_a, rating_b",
        [(1200, 1200), (1400, 1000), (1000, 1400), (100, 4000), (1523, 1489), (2750, 812)],
    )
    def test_expected_scores_sum_to_one(self, rating_a, rating_b):
        """Ea + Eb == 1 (정확히)"""
        expected_a, expected_b = expected_scores(rating_a, rating_b)
        assert expected_a + expected_b == 1

    def test_equal_ratings_is_half(self):
        assert expected_score(1200, 1200) == 0.5

    def test_symmetric(self):
        """상대 위치를 바꾸면 기대 승률도 뒤바뀜"""
        expected_a, expected_b = expected_scores(1400, 1000)
        assert expected_score(1000, 1400) == expected_b
        assert expected_score(1400, 1000) == expected_a

    def test_lower_rated_underdog(self):
        assert expected_score(1000, 1400) == pytest.approx(0.0909, abs=1e-4)


class TestCalculateNewRating:
    """새 레이팅 계산"""

    def test_win_at_equal_ratings(self):
        """1200 vs 1200, K=32 승리 → 1216 / 1184"""
        assert calculate_new_rating(1200, 1200, 1.0, k_factor=32) == 1216
        assert calculate_new_rating(1200, 1200, 0.0, k_factor=32) == 1184

    def test_upset_win(self):
        """1400 vs 1000, 하위 레이팅 승리 → 1029 / 1371"""
        assert calculate_new_rating(1000, 1400, 1.0, k_factor=32) == 1029
        assert calculate_new_rating(1400, 1000, 0.0, k_factor=32) == 1371

    def test_draw_at_equal_ratings_unchanged(self):
        assert calculate_new_rating(1200, 1200, 0.5, k_factor=32) == 1200

    @pytest.mark.parametrize("k_factor", [10, 16, 24, 32, 33, 40])
    def test_zero_sum_at_equal_ratings(self, k_factor):
        """동일 레이팅이면 증감이 정확히 대칭"""
        winner = calculate_new_rating(1500, 1500, 1.0, k_factor=k_factor)
        loser = calculate_new_rating(1500, 1500, 0.0, k_factor=k_factor)
        assert winner - 1500 == -(loser - 1500)

    def test_clamped_to_floor(self):
        assert calculate_new_rating(100, 100, 0.0, k_factor=32, floor=100) == 100
        assert calculate_new_rating(110, 100, 0.0, k_factor=32, floor=100) == 100

    def test_clamped_to_ceiling(self):
        assert calculate_new_rating(4000, 4000, 1.0, k_factor=32, ceiling=4000) == 4000

    def test_round_half_away_from_zero(self):
        assert round_half_away_from_zero(16.5) == 17
        assert round_half_away_from_zero(-16.5) == -17
        assert round_half_away_from_zero(2.4) == 2
        assert round_half_away_from_zero(-2.6) == -3
        assert round_half_away_from_zero(0.0) == 0


class TestKFactor:
    """K-factor"""

    def test_fixed_by_default(self):
        config = EloSettings(k_factor=32)
        assert calculate_k_factor(0, 0, True, config) == 32
        assert calculate_k_factor(500, 20, True, config) == 32

    def test_dynamic_rookie_gets_base(self):
        config = EloSettings(k_factor=32, dynamic_k_factor=True)
        assert calculate_k_factor(0, 0, False, config) == 32

    def test_dynamic_veteran_dampened(self):
        """30 / (100 + 30) < 0.5 이므로 최소 50%"""
        config = EloSettings(k_factor=32, dynamic_k_factor=True)
        assert calculate_k_factor(100, 0, False, config) == 16
        assert calculate_k_factor(30, 0, False, config) == 16
        assert calculate_k_factor(10, 0, False, config) == pytest.approx(32 * 30 / 40)

    def test_dynamic_win_streak_bonus_capped(self):
        config = EloSettings(k_factor=32, dynamic_k_factor=True)
        assert calculate_k_factor(0, 2, True, config) == pytest.approx(32 * 1.2)
        assert calculate_k_factor(0, 10, True, config) == pytest.approx(32 * 1.5)

    def test_dynamic_streak_bonus_only_for_winner(self):
        config = EloSettings(k_factor=32, dynamic_k_factor=True)
        assert calculate_k_factor(0, 10, False, config) == 32
