"""
홀짝 / 대소 비율 분석
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from ..models import HistorySnapshot, Zone

NEUTRAL_SHARE = 0.5


@dataclass(frozen=True)
class RatioStat:
    """범주별 개수와 비율"""
    category: str
    count: int
    percentage: float


@dataclass(frozen=True)
class OddEvenRatio:
    odd_count: int
    even_count: int
    odd_percentage: float
    even_percentage: float

    @property
    def stats(self) -> Tuple[RatioStat, RatioStat]:
        return (
            RatioStat('odd', self.odd_count, self.odd_percentage),
            RatioStat('even', self.even_count, self.even_percentage)
        )


@dataclass(frozen=True)
class BigSmallRatio:
    big_count: int
    small_count: int
    big_percentage: float
    small_percentage: float

    @property
    def stats(self) -> Tuple[RatioStat, RatioStat]:
        return (
            RatioStat('big', self.big_count, self.big_percentage),
            RatioStat('small', self.small_count, self.small_percentage)
        )


def _shares(first: int, second: int) -> Tuple[float, float]:
    total = first + second
    if total == 0:
        return NEUTRAL_SHARE, NEUTRAL_SHARE
    return first / total, second / total


def _zone_numbers(draws: HistorySnapshot, zone: Zone) -> Sequence[int]:
    return [number for draw in draws for number in draw.numbers(zone)]


def is_big(number: int, zone: Union[Zone, str]) -> bool:
    return number > Zone.coerce(zone).big_threshold


def analyze_odd_even(draws: HistorySnapshot, zone: Union[Zone, str]) -> OddEvenRatio:
    """
    홀짝 비율 분석

    회차 단위가 아니라 번호 단위로 집계합니다. 빈 스냅샷이면 0.5 / 0.5를 반환합니다.
    """
    zone = Zone.coerce(zone)
    numbers = _zone_numbers(draws, zone)
    odd_count = sum(1 for n in numbers if n % 2 == 1)
    even_count = len(numbers) - odd_count
    odd_share, even_share = _shares(odd_count, even_count)
    return OddEvenRatio(odd_count, even_count, odd_share, even_share)


def analyze_big_small(draws: HistorySnapshot, zone: Union[Zone, str]) -> BigSmallRatio:
    """
    대소 비율 분석

    전구는 18 초과, 후구는 6 초과를 '대'로 봅니다. 빈 스냅샷이면 0.5 / 0.5를 반환합니다.
    """
    zone = Zone.coerce(zone)
    numbers = _zone_numbers(draws, zone)
    big_count = sum(1 for n in numbers if n > zone.big_threshold)
    small_count = len(numbers) - big_count
    big_share, small_share = _shares(big_count, small_count)
    return BigSmallRatio(big_count, small_count, big_share, small_share)
