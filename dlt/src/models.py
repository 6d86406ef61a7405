"""
공통 데이터 모델

구역(Zone), 추첨 결과(Draw), 생성 전략(Strategy), 평가 등급(Rating)을 정의합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union


class Zone(Enum):
    """번호 구역 (전구: 35개 중 5개, 후구: 12개 중 2개)"""
    FRONT = 'front'
    BACK = 'back'

    @property
    def max_number(self) -> int:
        return 35 if self is Zone.FRONT else 12

    @property
    def pick_count(self) -> int:
        return 5 if self is Zone.FRONT else 2

    @property
    def big_threshold(self) -> int:
        """이 값보다 큰 번호가 '대'로 분류됨"""
        return 18 if self is Zone.FRONT else 6

    @property
    def max_span(self) -> int:
        return self.max_number - 1

    @property
    def numbers(self) -> range:
        return range(1, self.max_number + 1)

    @classmethod
    def coerce(cls, zone: Union['Zone', str]) -> 'Zone':
        """Zone 또는 문자열 값을 Zone으로 변환"""
        if isinstance(zone, cls):
            return zone
        try:
            return cls(str(zone).lower())
        except ValueError:
            raise ValueError(f"알 수 없는 구역입니다: {zone!r}") from None

    @classmethod
    def for_max_number(cls, max_number: int) -> 'Zone':
        """최대 번호에 맞는 구역 추정"""
        return cls.BACK if max_number <= cls.BACK.max_number else cls.FRONT


class Strategy(Enum):
    """번호 생성 전략"""
    HOT = 'hot'
    COLD = 'cold'
    BALANCED = 'balanced'
    TREND = 'trend'
    INTEGRATED = 'integrated'

    @classmethod
    def parse(cls, strategy: Union['Strategy', str]) -> 'Strategy':
        if isinstance(strategy, cls):
            return strategy
        return cls(str(strategy).strip().lower())


class Rating(Enum):
    """조합 평가 등급"""
    INVALID = 'Invalid'
    NEEDS_WORK = 'NeedsWork'
    FAIR = 'Fair'
    GOOD = 'Good'
    EXCELLENT = 'Excellent'

    @classmethod
    def from_score(cls, score: float) -> 'Rating':
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.FAIR
        return cls.NEEDS_WORK


@dataclass(frozen=True)
class Draw:
    """검증된 추첨 결과 (불변)"""
    id: str
    date: str
    front_numbers: Tuple[int, ...]
    back_numbers: Tuple[int, ...]

    def numbers(self, zone: Union[Zone, str]) -> Tuple[int, ...]:
        """구역별 번호 반환"""
        zone = Zone.coerce(zone)
        return self.front_numbers if zone is Zone.FRONT else self.back_numbers

    @property
    def front_sum(self) -> int:
        return sum(self.front_numbers)

    @property
    def front_span(self) -> int:
        return max(self.front_numbers) - min(self.front_numbers)


# 최신 회차가 앞에 오는 검증된 추첨 결과 시퀀스
HistorySnapshot = Sequence[Draw]
