"""
번호 분석 모듈

이 패키지는 빈도, 비율, 분포 통계와 조합 평가 기능을 제공합니다.
"""

from .frequency_analyzer import NumberFrequency, analyze_frequency
from .ratio_analyzer import BigSmallRatio, OddEvenRatio, RatioStat, analyze_big_small, analyze_odd_even
from .distribution_analyzer import DistributionStat, analyze_span, analyze_sum
from .combination_evaluator import CombinationEvaluation, evaluate
from .snapshot_analyzer import StatisticsSnapshot, analyze_snapshot

__all__ = [
    'NumberFrequency', 'analyze_frequency',
    'RatioStat', 'OddEvenRatio', 'BigSmallRatio', 'analyze_odd_even', 'analyze_big_small',
    'DistributionStat', 'analyze_sum', 'analyze_span',
    'CombinationEvaluation', 'evaluate',
    'StatisticsSnapshot', 'analyze_snapshot'
]
