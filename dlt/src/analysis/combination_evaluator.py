"""
번호 조합 평가

후보 번호 조합을 스냅샷 통계와 비교하여 빈도, 균형, 추세, 다양성 점수를 매기고
가중 합산한 종합 점수와 등급을 산출합니다. 동일한 입력에는 항상 동일한 결과를 반환합니다.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Optional, Sequence, Tuple, Union

from ..models import HistorySnapshot, Rating, Zone
from .frequency_analyzer import count_occurrences
from .ratio_analyzer import analyze_big_small, analyze_odd_even

TREND_WINDOW = 10
TREND_POINTS = 20.0
FREQUENCY_SCALE = 50.0

# 종합 점수 가중치 (빈도, 균형, 추세, 다양성)
SCORE_WEIGHTS = (0.3, 0.3, 0.2, 0.2)

INVALID_DETAILS = "유효하지 않은 번호 조합"


def evaluation_details(score: float, frequency_score: float, balance_score: float) -> str:
    """평가 요약 문구"""
    return (
        f"종합 점수 {score:.1f}점, 빈도 분석 {frequency_score:.1f}점, "
        f"균형성 {balance_score:.1f}점"
    )


@dataclass(frozen=True)
class CombinationEvaluation:
    """조합 평가 결과"""
    score: float
    frequency_score: float
    balance_score: float
    trend_score: float
    diversity_score: float
    rating: Rating
    details: str = INVALID_DETAILS

    @property
    def is_valid(self) -> bool:
        return self.rating is not Rating.INVALID

    @classmethod
    def invalid(cls) -> 'CombinationEvaluation':
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, Rating.INVALID)

    @classmethod
    def combine(
        cls,
        front: 'CombinationEvaluation',
        back: 'CombinationEvaluation',
        front_weight: float = 0.7,
        back_weight: float = 0.3
    ) -> 'CombinationEvaluation':
        """전구/후구 평가를 가중 합산"""
        if not (front.is_valid and back.is_valid):
            return cls.invalid()

        def mix(attr: str) -> float:
            return getattr(front, attr) * front_weight + getattr(back, attr) * back_weight

        score = mix('score')
        return cls(
            score=score,
            frequency_score=mix('frequency_score'),
            balance_score=mix('balance_score'),
            trend_score=mix('trend_score'),
            diversity_score=mix('diversity_score'),
            rating=Rating.from_score(score),
            details=evaluation_details(
                score, mix('frequency_score'), mix('balance_score')
            )
        )


def normalize_candidate(candidate: Any, zone: Zone) -> Optional[Tuple[int, ...]]:
    """
    후보 조합 정규화

    비어 있거나, 정수가 아니거나, 범위를 벗어나거나, 중복이 있으면 None을 반환합니다.
    """
    if candidate is None or isinstance(candidate, (str, bytes)):
        return None
    try:
        numbers = list(candidate)
    except TypeError:
        return None

    if not numbers:
        return None
    for n in numbers:
        if isinstance(n, bool) or not isinstance(n, Integral):
            return None
        if not 1 <= n <= zone.max_number:
            return None
    if len(set(numbers)) != len(numbers):
        return None
    return tuple(int(n) for n in numbers)


def evaluate(
    candidate: Sequence[int],
    draws: HistorySnapshot,
    zone: Union[Zone, str],
    trend_window: int = TREND_WINDOW
) -> CombinationEvaluation:
    """
    번호 조합 평가

    Args:
        candidate: 평가할 번호 조합
        draws: 최신 회차가 앞에 오는 추첨 결과
        zone: 조합이 속한 구역
        trend_window: 추세 점수에 사용할 최신 회차 수

    Returns:
        CombinationEvaluation (잘못된 조합이면 점수 0, Invalid 등급)
    """
    zone = Zone.coerce(zone)
    numbers = normalize_candidate(candidate, zone)
    if numbers is None:
        return CombinationEvaluation.invalid()

    size = len(numbers)

    # 빈도 점수
    counts = count_occurrences(draws, zone)
    mean = counts.sum() / zone.max_number
    if mean > 0:
        frequency_score = sum(
            min(100.0, counts[n - 1] / mean * FREQUENCY_SCALE) for n in numbers
        ) / size
    else:
        frequency_score = 0.0

    # 균형 점수
    odd_ratio = sum(1 for n in numbers if n % 2 == 1) / size
    big_ratio = sum(1 for n in numbers if n > zone.big_threshold) / size
    odd_balance = 1 - abs(odd_ratio - analyze_odd_even(draws, zone).odd_percentage)
    big_balance = 1 - abs(big_ratio - analyze_big_small(draws, zone).big_percentage)
    balance_score = (odd_balance + big_balance) / 2 * 100

    # 추세 점수
    recent_counts = count_occurrences(draws[:trend_window], zone)
    trend_hits = sum(1 for n in numbers if recent_counts[n - 1] > 0)
    trend_score = min(100.0, trend_hits * TREND_POINTS)

    # 다양성 점수
    span = max(numbers) - min(numbers)
    diversity_score = min(100.0, span / zone.max_span * 100)

    weights = SCORE_WEIGHTS
    score = (
        frequency_score * weights[0]
        + balance_score * weights[1]
        + trend_score * weights[2]
        + diversity_score * weights[3]
    )

    return CombinationEvaluation(
        score=float(score),
        frequency_score=float(frequency_score),
        balance_score=float(balance_score),
        trend_score=float(trend_score),
        diversity_score=float(diversity_score),
        rating=Rating.from_score(score),
        details=evaluation_details(score, frequency_score, balance_score)
    )
