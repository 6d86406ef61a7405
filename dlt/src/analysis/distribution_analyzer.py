"""
합계 / 스팬 분포 분석

전구 번호 5개의 합계와 스팬(최대 - 최소) 분포를 계산합니다.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict

import numpy as np

from ..models import Draw, HistorySnapshot


@dataclass(frozen=True)
class DistributionStat:
    """분포 통계"""
    average: float
    min: int
    max: int
    histogram: Dict[int, int] = field(default_factory=dict)


# 빈 스냅샷에서 사용하는 중립 기본값
DEFAULT_SUM = DistributionStat(average=100.0, min=15, max=175)
DEFAULT_SPAN = DistributionStat(average=20.0, min=4, max=34)


def _distribution(
    draws: HistorySnapshot,
    metric: Callable[[Draw], int],
    default: DistributionStat
) -> DistributionStat:
    values = np.array([metric(draw) for draw in draws], dtype=np.int64)
    if values.size == 0:
        return DistributionStat(default.average, default.min, default.max, {})

    observed, counts = np.unique(values, return_counts=True)
    return DistributionStat(
        average=float(values.mean()),
        min=int(values.min()),
        max=int(values.max()),
        histogram={int(v): int(c) for v, c in zip(observed, counts)}
    )


def analyze_sum(draws: HistorySnapshot) -> DistributionStat:
    """
    전구 합계 분포

    빈 스냅샷이면 평균 100, 범위 15-175를 반환합니다.
    """
    return _distribution(draws, lambda d: d.front_sum, DEFAULT_SUM)


def analyze_span(draws: HistorySnapshot) -> DistributionStat:
    """
    전구 스팬 분포

    빈 스냅샷이면 평균 20, 범위 4-34를 반환합니다.
    """
    return _distribution(draws, lambda d: d.front_span, DEFAULT_SPAN)
