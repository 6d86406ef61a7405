"""
스마트 번호 추천

모든 전략을 한 번씩 적용하여 전구/후구 번호를 생성하고, 평가 점수를
가중 합산한 신뢰도 순으로 정렬한 추천 목록을 만듭니다.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from ..analysis.combination_evaluator import CombinationEvaluation, evaluate
from ..generation.strategy_generator import RandomSource, generate, make_rng, resolve_strategy
from ..models import HistorySnapshot, Strategy, Zone
from ..utils.config import Config
from ..utils.data_loader import validate_draws
from ..utils.exceptions import InsufficientDataError
from .insights import STRATEGY_PROFILES, strategy_insights
from shared.error_handler import get_logger, log_performance, safe_execute

logger = get_logger(__name__)


@dataclass(frozen=True)
class Recommendation:
    """전략별 추천 결과"""
    strategy: Strategy
    name: str
    description: str
    front_numbers: Tuple[int, ...]
    back_numbers: Tuple[int, ...]
    confidence: float
    front_evaluation: CombinationEvaluation
    back_evaluation: CombinationEvaluation
    insights: Tuple[str, ...]


@safe_execute(default_return=None)
def _recommend_strategy(
    strategy: Strategy,
    draws: HistorySnapshot,
    config: Config,
    rng
) -> Optional[Recommendation]:
    analysis = config.analysis
    options = dict(
        rng=rng,
        hot_ratio=analysis.hot_ratio,
        cold_ratio=analysis.cold_ratio,
        trend_window=analysis.trend_window
    )
    front = generate(draws, strategy, Zone.FRONT.pick_count, Zone.FRONT.max_number,
                     zone=Zone.FRONT, **options)
    back = generate(draws, strategy, Zone.BACK.pick_count, Zone.BACK.max_number,
                    zone=Zone.BACK, **options)

    front_eval = evaluate(front, draws, Zone.FRONT, analysis.trend_window)
    back_eval = evaluate(back, draws, Zone.BACK, analysis.trend_window)
    confidence = (
        front_eval.score * config.learning.front_weight
        + back_eval.score * config.learning.back_weight
    )

    profile = STRATEGY_PROFILES[strategy]
    return Recommendation(
        strategy=strategy,
        name=profile.name,
        description=profile.description,
        front_numbers=tuple(front),
        back_numbers=tuple(back),
        confidence=confidence,
        front_evaluation=front_eval,
        back_evaluation=back_eval,
        insights=tuple(strategy_insights(strategy, front, back))
    )


@log_performance
def recommend(
    draws: Iterable[Any],
    config: Optional[Config] = None,
    rng: RandomSource = None,
    strategies: Optional[Iterable[Strategy]] = None
) -> List[Recommendation]:
    """
    전략별 추천 번호 생성

    Args:
        draws: 최신 회차가 앞에 오는 추첨 기록 (검증 전 기록 허용)
        config: 설정 객체
        rng: numpy Generator 또는 시드
        strategies: 적용할 전략 (None이면 전체, 알 수 없는 이름은 종합 분석으로 처리)

    Returns:
        신뢰도 내림차순 Recommendation 리스트

    Raises:
        InsufficientDataError: 유효 데이터가 최소 회차 수보다 적을 때
    """
    config = config or Config()
    validated = validate_draws(draws)
    required = config.data.min_recommend_draws
    if len(validated) < required:
        raise InsufficientDataError(len(validated), required)

    rng = make_rng(rng)
    strategies = list(strategies) if strategies is not None else list(STRATEGY_PROFILES)

    recommendations = []
    for strategy in strategies:
        result = _recommend_strategy(resolve_strategy(strategy), validated, config, rng)
        if result is None:
            logger.warning(f"{strategy} 전략 추천 생성 실패, 건너뜁니다")
            continue
        recommendations.append(result)

    recommendations.sort(key=lambda r: r.confidence, reverse=True)
    logger.info(f"{len(validated)}회 데이터로 추천 {len(recommendations)}건 생성")
    return recommendations
