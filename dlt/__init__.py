"""
대형 로또(전구 5/35, 후구 2/12) 번호 분석 및 추천 엔진

이 패키지는 과거 추첨 결과 통계, 전략 기반 번호 생성, 조합 평가,
반복 학습 컨트롤러를 제공합니다. 예측 정확도를 주장하지 않는 휴리스틱 도구입니다.
"""

from pathlib import Path

from .src.models import Draw, Rating, Strategy, Zone
from .src.utils.config import Config
from .src.utils.data_loader import DataManager, validate_draws
from .src.utils.exceptions import DltError, InsufficientDataError, LearningInProgressError
from .src.analysis import (
    analyze_frequency, analyze_odd_even, analyze_big_small,
    analyze_sum, analyze_span, analyze_snapshot, evaluate
)
from .src.generation import generate
from .src.learning import LearningController, LearningState, recommend

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent

# 버전
__version__ = "1.0.0"

__all__ = [
    'Draw', 'Rating', 'Strategy', 'Zone',
    'Config', 'DataManager', 'validate_draws',
    'DltError', 'InsufficientDataError', 'LearningInProgressError',
    'analyze_frequency', 'analyze_odd_even', 'analyze_big_small',
    'analyze_sum', 'analyze_span', 'analyze_snapshot', 'evaluate',
    'generate', 'LearningController', 'LearningState', 'recommend'
]
