"""
스냅샷 통계 일괄 분석

전구/후구 빈도, 홀짝, 대소 비율과 합계/스팬 분포를 한 번에 계산합니다.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models import HistorySnapshot, Zone
from ..utils.config import AnalysisConfig
from .distribution_analyzer import DistributionStat, analyze_span, analyze_sum
from .frequency_analyzer import NumberFrequency, analyze_frequency
from .ratio_analyzer import BigSmallRatio, OddEvenRatio, analyze_big_small, analyze_odd_even
from shared.error_handler import get_logger, log_performance

logger = get_logger(__name__)


@dataclass(frozen=True)
class StatisticsSnapshot:
    """스냅샷 통계 묶음"""
    draw_count: int
    front_frequencies: List[NumberFrequency]
    back_frequencies: List[NumberFrequency]
    front_odd_even: OddEvenRatio
    back_odd_even: OddEvenRatio
    front_big_small: BigSmallRatio
    back_big_small: BigSmallRatio
    sum_distribution: DistributionStat
    span_distribution: DistributionStat

    def frequencies(self, zone) -> List[NumberFrequency]:
        zone = Zone.coerce(zone)
        return self.front_frequencies if zone is Zone.FRONT else self.back_frequencies


@log_performance
def analyze_snapshot(
    draws: HistorySnapshot,
    config: Optional[AnalysisConfig] = None
) -> StatisticsSnapshot:
    """
    스냅샷 전체 분석

    Args:
        draws: 최신 회차가 앞에 오는 추첨 결과
        config: 분석 설정 (핫/콜드 기준 배수)

    Returns:
        StatisticsSnapshot
    """
    config = config or AnalysisConfig()
    logger.debug(f"스냅샷 분석 시작: {len(draws)}회")

    return StatisticsSnapshot(
        draw_count=len(draws),
        front_frequencies=analyze_frequency(
            draws, Zone.FRONT, config.hot_ratio, config.cold_ratio
        ),
        back_frequencies=analyze_frequency(
            draws, Zone.BACK, config.hot_ratio, config.cold_ratio
        ),
        front_odd_even=analyze_odd_even(draws, Zone.FRONT),
        back_odd_even=analyze_odd_even(draws, Zone.BACK),
        front_big_small=analyze_big_small(draws, Zone.FRONT),
        back_big_small=analyze_big_small(draws, Zone.BACK),
        sum_distribution=analyze_sum(draws),
        span_distribution=analyze_span(draws)
    )
