"""
학습 / 추천 인사이트 문구

반복 회차와 조합 통계로부터 정해진 템플릿 문구를 만드는 순수 함수들입니다.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Union

from ..models import Strategy


@dataclass(frozen=True)
class StrategyProfile:
    """전략 표시 정보"""
    strategy: Strategy
    name: str
    description: str


# 추천 화면 표시 순서
STRATEGY_PROFILES: Dict[Strategy, StrategyProfile] = {
    Strategy.INTEGRATED: StrategyProfile(
        Strategy.INTEGRATED, '종합 분석', '여러 분석 지표를 종합하여 균형 있게 구성'
    ),
    Strategy.HOT: StrategyProfile(
        Strategy.HOT, '핫 번호 추적', '출현 빈도가 높은 번호 중심의 추적 전략'
    ),
    Strategy.COLD: StrategyProfile(
        Strategy.COLD, '콜드 번호 회귀', '오랫동안 적게 나온 번호에 주목'
    ),
    Strategy.BALANCED: StrategyProfile(
        Strategy.BALANCED, '균형 배치', '홀짝과 대소의 균형을 추구'
    ),
    Strategy.TREND: StrategyProfile(
        Strategy.TREND, '추세 분석', '최근 회차의 추세를 기반으로 구성'
    ),
}


def strategy_name(strategy: Union[Strategy, str]) -> str:
    try:
        return STRATEGY_PROFILES[Strategy.parse(strategy)].name
    except ValueError:
        return str(strategy)


def _front_stats(front_numbers: Sequence[int]):
    numbers = list(front_numbers)
    total = sum(numbers)
    span = max(numbers) - min(numbers) if len(numbers) > 1 else 0
    odd_count = sum(1 for n in numbers if n % 2 == 1)
    return total, span, odd_count, len(numbers) - odd_count


def learning_insights(
    iteration: int,
    strategy: Union[Strategy, str],
    front_numbers: Sequence[int],
    back_numbers: Sequence[int]
) -> List[str]:
    """
    반복 학습 회차별 인사이트

    Args:
        iteration: 1부터 시작하는 반복 회차
        strategy: 사용한 전략
        front_numbers: 전구 번호
        back_numbers: 후구 번호

    Returns:
        인사이트 문구 리스트
    """
    total, span, odd_count, even_count = _front_stats(front_numbers)
    name = strategy_name(strategy)

    if iteration == 1:
        return [
            f"{iteration}회차 반복: {name} 전략으로 초기 분석 시작",
            "과거 데이터의 번호 분포 규칙 분석 시작",
            f"현재 예측 조합의 합계는 {total}",
        ]
    if iteration == 2:
        return [
            f"{iteration}회차 반복: 번호 빈도 분포 심층 분석",
            "핫 번호와 콜드 번호의 분포 특징 식별",
            f"현재 조합의 홀짝 비율은 {odd_count}:{even_count}",
        ]
    if iteration == 3:
        return [
            f"{iteration}회차 반복: 번호 간 연관성과 추세 분석",
            f"예측 조합의 스팬은 {span}, 과거 분포 범위와 비교",
            "번호 출현의 주기성 식별 시작",
        ]
    if iteration == 4:
        return [
            f"{iteration}회차 반복: 예측 모델 파라미터 최적화",
            "여러 분석 지표를 결합하여 종합 점수 개선",
            "홀짝비, 대소비, 합계 범위의 균형점 학습",
        ]
    if iteration == 5:
        return [
            f"{iteration}회차 반복: 모델 자기 조정 및 검증",
            "과거 검증 결과에 따라 가중치 조정",
            "예측 모델의 안정성 향상",
        ]
    return [
        f"{iteration}회차 반복: 모델 지속 최적화 및 자기 조정",
        "과거 규칙과 최신 추세를 종합하여 최적 조합 생성",
        "다차원 분석 모델 구축 완료",
    ]


def strategy_insights(
    strategy: Union[Strategy, str],
    front_numbers: Sequence[int],
    back_numbers: Sequence[int]
) -> List[str]:
    """
    추천 전략별 인사이트
    """
    if not front_numbers:
        return ["전략 분석 완료"]

    total, span, odd_count, even_count = _front_stats(front_numbers)
    try:
        strategy = Strategy.parse(strategy)
    except ValueError:
        strategy = Strategy.INTEGRATED

    if strategy is Strategy.HOT:
        return [
            "출현 빈도가 높은 핫 번호 위주로 선택",
            f"현재 조합의 합계는 {total}",
        ]
    if strategy is Strategy.COLD:
        return [
            "적게 나온 콜드 번호에 주목, 회귀 가능성 고려",
            f"스팬 {span}, 적당한 분산 유지",
        ]
    if strategy is Strategy.BALANCED:
        return [
            f"홀짝 비율 {odd_count}:{even_count}, 균형 배치 추구",
            "대소 번호 분포를 함께 고려하여 극단적인 조합 회피",
        ]
    if strategy is Strategy.TREND:
        return [
            "최근 10회 추세 분석으로 단기 규칙 포착",
            "주기적 특징을 결합한 구성",
        ]
    return [
        "빈도, 균형, 추세 등 다차원 종합 분석",
        "가중치 배분으로 전체 지표 최적화",
    ]
