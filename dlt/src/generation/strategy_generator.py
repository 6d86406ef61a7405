"""
전략 기반 번호 생성

빈도 분석 결과에서 전략별 후보 풀을 만든 뒤, 주입된 난수 생성기로 풀에서
중복 없이 번호를 뽑아 오름차순으로 반환합니다.

전략:
- hot: 핫 번호 (출현 횟수 내림차순) 상위 count+2개
- cold: 콜드 번호 (출현 횟수 오름차순) 상위 count+2개
- balanced: 가장 뜨거운 ceil(count/2)개 + 가장 차가운 ceil(count/2)개
- trend: 최근 10회 출현 횟수 내림차순 상위 count+2개
- integrated: 핫 40% + 콜드 30% + 나머지 중립 번호
"""

import math
from typing import List, Optional, Union

import numpy as np

from ..analysis.frequency_analyzer import (
    COLD_RATIO, HOT_RATIO, NumberFrequency, analyze_frequency,
    cold_numbers, hot_numbers, neutral_numbers
)
from ..models import HistorySnapshot, Strategy, Zone
from shared.error_handler import get_logger

logger = get_logger(__name__)

TREND_WINDOW = 10
POOL_MARGIN = 2

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """난수 생성기 또는 시드를 numpy Generator로 변환"""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def resolve_strategy(strategy: Union[Strategy, str]) -> Strategy:
    """전략 이름 해석 (알 수 없는 이름은 integrated)"""
    try:
        return Strategy.parse(strategy)
    except ValueError:
        logger.warning(f"알 수 없는 전략 '{strategy}', integrated 전략으로 대체합니다")
        return Strategy.INTEGRATED


def _dedupe(numbers: List[int]) -> List[int]:
    return list(dict.fromkeys(numbers))


def build_pool(
    frequencies: List[NumberFrequency],
    draws: HistorySnapshot,
    strategy: Strategy,
    count: int,
    zone: Zone,
    hot_ratio: float = HOT_RATIO,
    cold_ratio: float = COLD_RATIO,
    trend_window: int = TREND_WINDOW
) -> List[int]:
    """
    전략별 후보 풀 구성

    Args:
        frequencies: 출현 횟수 내림차순 빈도 분석 결과
        draws: 최신 회차가 앞에 오는 추첨 결과
        strategy: 생성 전략
        count: 뽑을 번호 개수
        zone: 구역

    Returns:
        중복 없는 후보 번호 리스트 (부족할 수 있음)
    """
    hot = hot_numbers(frequencies)
    # 출현 횟수 오름차순 (가장 차가운 번호부터)
    coldest = [
        f.number for f in sorted((f for f in frequencies if f.is_cold), key=lambda f: f.count)
    ]

    if strategy is Strategy.HOT:
        pool = hot[:count + POOL_MARGIN]
    elif strategy is Strategy.COLD:
        pool = coldest[:count + POOL_MARGIN]
    elif strategy is Strategy.BALANCED:
        half = math.ceil(count / 2)
        pool = hot[:half] + coldest[:half]
    elif strategy is Strategy.TREND:
        recent = analyze_frequency(draws[:trend_window], zone, hot_ratio, cold_ratio)
        pool = [f.number for f in recent][:count + POOL_MARGIN]
    else:
        hot_count = math.ceil(count * 0.4)
        cold_count = math.ceil(count * 0.3)
        neutral_count = max(0, count - hot_count - cold_count)
        pool = (
            hot[:hot_count]
            + cold_numbers(frequencies)[:cold_count]
            + neutral_numbers(frequencies)[:neutral_count]
        )

    return _dedupe(pool)


def fill_pool(pool: List[int], count: int, max_number: int) -> List[int]:
    """풀이 count보다 작으면 1..max_number를 순서대로 훑으며 채움"""
    filled = list(pool)
    existing = set(filled)
    for number in range(1, max_number + 1):
        if len(filled) >= count:
            break
        if number not in existing:
            filled.append(number)
            existing.add(number)
    return filled


def random_numbers(count: int, max_number: int, rng: RandomSource = None) -> List[int]:
    """1..max_number에서 중복 없이 무작위 추출"""
    rng = make_rng(rng)
    picked = rng.choice(np.arange(1, max_number + 1), size=count, replace=False)
    return sorted(int(n) for n in picked)


def generate(
    draws: HistorySnapshot,
    strategy: Union[Strategy, str],
    count: int,
    max_number: int,
    zone: Optional[Union[Zone, str]] = None,
    rng: RandomSource = None,
    hot_ratio: float = HOT_RATIO,
    cold_ratio: float = COLD_RATIO,
    trend_window: int = TREND_WINDOW
) -> List[int]:
    """
    전략에 따라 번호 생성

    Args:
        draws: 최신 회차가 앞에 오는 추첨 결과 (빈 스냅샷 허용)
        strategy: 생성 전략 (Strategy 또는 이름)
        count: 뽑을 번호 개수
        max_number: 최대 번호
        zone: 빈도를 계산할 구역 (None이면 max_number로 추정)
        rng: numpy Generator 또는 시드

    Returns:
        1..max_number 범위의 서로 다른 번호 count개 (오름차순)
    """
    if count < 1 or count > max_number:
        raise ValueError(f"count는 1 이상 max_number({max_number}) 이하여야 합니다: {count}")

    rng = make_rng(rng)
    strategy = resolve_strategy(strategy)
    zone = Zone.for_max_number(max_number) if zone is None else Zone.coerce(zone)

    frequencies = analyze_frequency(draws, zone, hot_ratio, cold_ratio)
    pool = build_pool(
        frequencies, draws, strategy, count, zone,
        hot_ratio=hot_ratio, cold_ratio=cold_ratio, trend_window=trend_window
    )
    pool = [n for n in pool if 1 <= n <= max_number]
    pool = fill_pool(pool, count, max_number)

    picked = rng.choice(np.array(pool), size=count, replace=False)
    selected = sorted(int(n) for n in picked)

    if len(set(selected)) != count:
        logger.warning(f"{strategy.value} 전략 번호 생성 실패, 무작위 번호로 대체합니다")
        return random_numbers(count, max_number, rng)
    return selected
