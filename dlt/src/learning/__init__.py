"""
반복 학습 및 추천 모듈

이 패키지는 반복 학습 컨트롤러, 전략별 추천, 인사이트 문구를 제공합니다.
"""

from .learning_controller import LearningController, LearningIteration, LearningState, PerformanceMetric
from .recommender import Recommendation, recommend
from .insights import STRATEGY_PROFILES, learning_insights, strategy_insights

__all__ = [
    'LearningController', 'LearningIteration', 'LearningState', 'PerformanceMetric',
    'Recommendation', 'recommend',
    'STRATEGY_PROFILES', 'learning_insights', 'strategy_insights'
]
