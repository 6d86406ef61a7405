"""
설정 관리 모듈

이 모듈은 엔진의 설정을 관리하는 Config 클래스를 제공합니다.
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml

from ..models import Strategy

logger = logging.getLogger(__name__)

DEFAULT_ROTATION = ('integrated', 'balanced', 'hot', 'cold', 'trend')


@dataclass
class DataConfig:
    """데이터 설정"""
    window_size: int = 50
    min_recommend_draws: int = 10

    def __post_init__(self):
        if self.window_size < 1:
            raise ValueError(f"window_size는 1 이상이어야 합니다: {self.window_size}")
        if self.min_recommend_draws < 0:
            raise ValueError(f"min_recommend_draws는 0 이상이어야 합니다: {self.min_recommend_draws}")


@dataclass
class AnalysisConfig:
    """분석 설정"""
    hot_ratio: float = 1.2
    cold_ratio: float = 0.8
    trend_window: int = 10

    def __post_init__(self):
        if self.cold_ratio > self.hot_ratio:
            raise ValueError("cold_ratio는 hot_ratio보다 클 수 없습니다")
        if self.trend_window < 1:
            raise ValueError(f"trend_window는 1 이상이어야 합니다: {self.trend_window}")


@dataclass
class LearningConfig:
    """반복 학습 설정"""
    total_iterations: int = 6
    strategy_rotation: Tuple[str, ...] = DEFAULT_ROTATION
    min_draws: int = 20
    front_weight: float = 0.7
    back_weight: float = 0.3
    base_accuracy: float = 0.3
    max_accuracy_gain: float = 0.4
    accuracy_cap: float = 0.85
    iteration_delay: float = 0.0
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.total_iterations < 1:
            raise ValueError(f"total_iterations는 1 이상이어야 합니다: {self.total_iterations}")
        if not self.strategy_rotation:
            raise ValueError("strategy_rotation이 비어 있습니다")
        # 문자열/Strategy 혼용 입력을 정규화 (알 수 없는 이름은 ValueError)
        self.strategy_rotation = tuple(
            Strategy.parse(name).value for name in self.strategy_rotation
        )
        if abs(self.front_weight + self.back_weight - 1.0) > 1e-9:
            raise ValueError("front_weight와 back_weight의 합은 1이어야 합니다")
        if self.min_draws < 0:
            raise ValueError(f"min_draws는 0 이상이어야 합니다: {self.min_draws}")
        if self.iteration_delay < 0:
            raise ValueError(f"iteration_delay는 0 이상이어야 합니다: {self.iteration_delay}")

    @property
    def strategies(self) -> Tuple[Strategy, ...]:
        return tuple(Strategy.parse(name) for name in self.strategy_rotation)


class Config:
    """설정 관리 클래스"""

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리
        """
        self._apply(config_dict or {})

    def _apply(self, config_dict: Dict[str, Any]) -> None:
        """섹션을 모두 검증한 뒤에 반영 (실패 시 기존 설정 유지)"""
        data = DataConfig(**config_dict.get('data', {}))
        analysis = AnalysisConfig(**config_dict.get('analysis', {}))

        learning = dict(config_dict.get('learning', {}))
        if 'strategy_rotation' in learning:
            learning['strategy_rotation'] = tuple(learning['strategy_rotation'])
        learning = LearningConfig(**learning)

        self._config = config_dict
        self.data = data
        self.analysis = analysis
        self.learning = learning

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정값
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키
            value: 설정값
        """
        updated = dict(self._config)
        updated[key] = value
        self._apply(updated)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트 (섹션 단위로 병합)

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        updated = dict(self._config)
        for key, value in config_dict.items():
            if isinstance(value, dict) and isinstance(updated.get(key), dict):
                updated[key] = {**updated[key], **value}
            else:
                updated[key] = value
        self._apply(updated)

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except Exception as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로
        """
        try:
            if not Path(filepath).exists():
                raise FileNotFoundError(f'설정 파일을 찾을 수 없습니다: {filepath}')

            with open(filepath, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            logger.info(f'설정 로드 완료: {filepath}')

            # 설정 객체 재초기화
            self._apply(loaded)
        except Exception as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise

    @classmethod
    def from_file(cls, filepath: str) -> 'Config':
        config = cls()
        config.load(filepath)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        learning = asdict(self.learning)
        learning['strategy_rotation'] = list(self.learning.strategy_rotation)
        return {
            'data': asdict(self.data),
            'analysis': asdict(self.analysis),
            'learning': learning
        }

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
