"""Elo 계산 (DB 접근 없는 순수 함수)"""

from __future__ import annotations

import math

from apps.ratings.constants import EloConstants, EloSettings


def expected_scores(rating_a: float, rating_b: float) -> tuple[float, float]:
    """두 참가자의 기대 승률 (Ea, Eb)

    높은 쪽을 공식으로 계산하고 낮은 쪽은 1 - 높은 쪽으로 구해 Ea + Eb == 1 을 보장
    """
    if rating_a >= rating_b:
        expected_a = 1 / (1 + 10 ** ((rating_b - rating_a) / 400))
        return expected_a, 1 - expected_a
    expected_b = 1 / (1 + 10 ** ((rating_a - rating_b) / 400))
    return 1 - expected_b, expected_b


def expected_score(player_rating: float, opponent_rating: float) -> float:
    """기대 승률 (상대를 이길 확률)"""
    return expected_scores(player_rating, opponent_rating)[0]


def round_half_away_from_zero(value: float) -> int:
    """0.5는 0에서 먼 쪽으로 반올림 (+16.5 → 17, -16.5 → -17)"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calculate_new_rating(
    player_rating: int,
    opponent_rating: int,
    score: float,
    k_factor: float = EloConstants.K_FACTOR,
    floor: int = EloConstants.RATING_FLOOR,
    ceiling: int = EloConstants.RATING_CEILING,
) -> int:
    """ELO 레이팅 계산

    Args:
        player_rating (int): 플레이어 현재 레이팅
        opponent_rating (int): 상대방 레이팅 (경기 전)
        score (float): 1.0 (승리), 0.5 (무승부), 0.0 (패배)
        k_factor (float): K-factor (기본값 32)
        floor (int): 최저 레이팅
        ceiling (int): 최고 레이팅

    Returns:
        int: 새로운 레이팅
    """
    expected = expected_score(player_rating, opponent_rating)
    delta = round_half_away_from_zero(k_factor * (score - expected))
    return max(floor, min(ceiling, player_rating + delta))


def calculate_k_factor(
    games_played: int,
    win_streak: int,
    won: bool,
    config: EloSettings,
) -> float:
    """참가자별 K-factor

    기본은 고정 K. ELO_DYNAMIC_K_FACTOR가 켜져 있으면
    게임 수가 늘수록 K를 줄이고 (최소 50%), 승자는 연승 보너스를 받음 (최대 +50%)
    """
    if not config.dynamic_k_factor:
        return float(config.k_factor)

    k_factor = float(config.k_factor)

    dampening = config.games_played_dampening
    if dampening > 0:
        ratio = dampening / (max(0, games_played) + dampening)
        k_factor *= max(EloConstants.MIN_DAMPENING_RATIO, ratio)

    if won:
        bonus = min(config.max_win_streak_bonus, win_streak * config.win_streak_multiplier)
        k_factor *= 1 + bonus

    return k_factor
