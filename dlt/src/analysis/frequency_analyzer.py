"""
번호별 출현 빈도 분석

스냅샷 안의 각 번호 출현 횟수, 마지막 출현 위치, 핫/콜드 분류를 계산합니다.
"""

from dataclasses import dataclass
from typing import Dict, List, Union

import numpy as np

from ..models import HistorySnapshot, Zone

HOT_RATIO = 1.2
COLD_RATIO = 0.8


@dataclass(frozen=True)
class NumberFrequency:
    """번호별 빈도 통계"""
    number: int
    count: int
    percentage: float
    is_hot: bool
    is_cold: bool
    last_seen_index: int


def count_occurrences(draws: HistorySnapshot, zone: Union[Zone, str]) -> np.ndarray:
    """
    구역 번호별 출현 횟수 배열 (인덱스 0은 번호 1)
    """
    zone = Zone.coerce(zone)
    counts = np.zeros(zone.max_number, dtype=np.int64)
    for draw in draws:
        for number in draw.numbers(zone):
            counts[number - 1] += 1
    return counts


def analyze_frequency(
    draws: HistorySnapshot,
    zone: Union[Zone, str],
    hot_ratio: float = HOT_RATIO,
    cold_ratio: float = COLD_RATIO
) -> List[NumberFrequency]:
    """
    번호 출현 빈도 분석

    구역의 모든 번호에 대해 출현 횟수를 세고, 평균 출현 횟수 대비
    hot_ratio 초과면 핫, cold_ratio 미만이면 콜드로 분류합니다.
    빈 스냅샷이면 모든 번호를 0회로 반환합니다.

    Args:
        draws: 최신 회차가 앞에 오는 추첨 결과
        zone: 분석할 구역
        hot_ratio: 핫 번호 기준 배수
        cold_ratio: 콜드 번호 기준 배수

    Returns:
        출현 횟수 내림차순(동률이면 번호 오름차순) NumberFrequency 리스트
    """
    zone = Zone.coerce(zone)
    total_draws = len(draws)
    counts = count_occurrences(draws, zone)

    last_seen = np.full(zone.max_number, total_draws, dtype=np.int64)
    # 최신 회차부터 역순으로 채워서 가장 최근 인덱스가 남도록 함
    for index in range(total_draws - 1, -1, -1):
        for number in draws[index].numbers(zone):
            last_seen[number - 1] = index

    mean_count = counts.sum() / zone.max_number

    results = []
    for number in zone.numbers:
        count = int(counts[number - 1])
        results.append(NumberFrequency(
            number=number,
            count=count,
            percentage=count / total_draws if total_draws else 0.0,
            is_hot=bool(count > mean_count * hot_ratio),
            is_cold=bool(count < mean_count * cold_ratio),
            last_seen_index=int(last_seen[number - 1])
        ))

    return sorted(results, key=lambda f: f.count, reverse=True)


def frequency_map(draws: HistorySnapshot, zone: Union[Zone, str]) -> Dict[int, int]:
    """번호 -> 출현 횟수"""
    zone = Zone.coerce(zone)
    counts = count_occurrences(draws, zone)
    return {number: int(counts[number - 1]) for number in zone.numbers}


def mean_count(draws: HistorySnapshot, zone: Union[Zone, str]) -> float:
    """구역 평균 출현 횟수"""
    zone = Zone.coerce(zone)
    return float(count_occurrences(draws, zone).sum() / zone.max_number)


def hot_numbers(frequencies: List[NumberFrequency]) -> List[int]:
    """핫 번호 (입력 순서 유지)"""
    return [f.number for f in frequencies if f.is_hot]


def cold_numbers(frequencies: List[NumberFrequency]) -> List[int]:
    """콜드 번호 (입력 순서 유지)"""
    return [f.number for f in frequencies if f.is_cold]


def neutral_numbers(frequencies: List[NumberFrequency]) -> List[int]:
    """핫도 콜드도 아닌 번호 (입력 순서 유지)"""
    return [f.number for f in frequencies if not f.is_hot and not f.is_cold]
