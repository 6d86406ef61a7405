"""
번호 분석 엔진 - 소스 코드

이 패키지는 엔진의 핵심 기능을 구현합니다.
"""

from .analysis import analyze_snapshot, evaluate
from .generation import generate
from .learning import LearningController, recommend
from .utils.data_loader import DataManager, validate_draws

__all__ = [
    'analyze_snapshot', 'evaluate', 'generate',
    'LearningController', 'recommend', 'DataManager', 'validate_draws'
]
