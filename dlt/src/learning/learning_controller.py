"""
반복 학습 컨트롤러

전략 순환 목록에 따라 번호 생성과 평가를 정해진 횟수만큼 반복하면서
회차별 결과, 모의 성능 지표, 인사이트를 누적하고 최고 점수 결과를 선택합니다.

상태 전이:
    IDLE -> RUNNING -> (ITERATING)* -> COMPLETED
    RUNNING/ITERATING -> FAILED     (내부 오류)
    RUNNING/ITERATING -> CANCELLED  (반복 사이 취소)

각 반복이 끝날 때마다 콜백으로 진행 상황을 알리며, 반복 사이에서 취소할 수 있습니다.
"""

import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..analysis.combination_evaluator import CombinationEvaluation, evaluate
from ..generation.strategy_generator import RandomSource, generate, make_rng
from ..models import Draw, Strategy, Zone
from ..utils.config import Config
from ..utils.data_loader import validate_draws
from ..utils.exceptions import InsufficientDataError, LearningInProgressError
from .insights import learning_insights
from shared.error_handler import format_exception, get_logger, log_performance

logger = get_logger(__name__)


class LearningState(Enum):
    """컨트롤러 상태"""
    IDLE = 'idle'
    RUNNING = 'running'
    ITERATING = 'iterating'
    COMPLETED = 'completed'
    FAILED = 'failed'
    CANCELLED = 'cancelled'

    @property
    def is_active(self) -> bool:
        return self in (LearningState.RUNNING, LearningState.ITERATING)

    @property
    def is_terminal(self) -> bool:
        return self in (LearningState.COMPLETED, LearningState.FAILED, LearningState.CANCELLED)


@dataclass(frozen=True)
class LearningIteration:
    """반복 1회 결과"""
    index: int
    strategy_used: Strategy
    front_numbers: Tuple[int, ...]
    back_numbers: Tuple[int, ...]
    front_evaluation: CombinationEvaluation
    back_evaluation: CombinationEvaluation
    evaluation: CombinationEvaluation
    simulated_accuracy: float
    insights: Tuple[str, ...]

    @property
    def score(self) -> float:
        """전구 0.7 / 후구 0.3 가중 종합 점수"""
        return self.evaluation.score


@dataclass(frozen=True)
class PerformanceMetric:
    """모의 성능 지표"""
    name: str
    value: float
    change: float
    trend: str
    description: str


def _trend(change: float, band: float) -> str:
    if change > band:
        return 'up'
    if change < -band:
        return 'down'
    return 'stable'


class LearningController:
    """반복 학습 컨트롤러"""

    def __init__(self, config: Optional[Config] = None, rng: RandomSource = None):
        """
        컨트롤러 초기화

        Args:
            config: 설정 객체 (learning 섹션 사용)
            rng: numpy Generator 또는 시드 (None이면 설정의 random_seed 사용)
        """
        self.config = config or Config()
        self.learning_config = self.config.learning
        self._rng = make_rng(rng if rng is not None else self.learning_config.random_seed)

        # 스레드 안전성을 위한 락
        self._lock = threading.Lock()
        self._cancel_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        self._callbacks: Dict[str, List[Callable]] = {
            'iteration': [],
            'completed': [],
            'failed': [],
            'cancelled': [],
            'notice': [],
        }

        self._state = LearningState.IDLE
        self._draws: Tuple[Draw, ...] = ()
        self._iterations: List[LearningIteration] = []
        self._insights: List[str] = []
        self._metrics: Dict[str, PerformanceMetric] = {}
        self._best_result: Optional[LearningIteration] = None
        self._error: Optional[BaseException] = None
        self._notice: Optional[str] = None

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------

    @property
    def state(self) -> LearningState:
        return self._state

    @property
    def iterations(self) -> Tuple[LearningIteration, ...]:
        with self._lock:
            return tuple(self._iterations)

    @property
    def best_result(self) -> Optional[LearningIteration]:
        return self._best_result

    @property
    def insights(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._insights)

    @property
    def metrics(self) -> Dict[str, PerformanceMetric]:
        with self._lock:
            return dict(self._metrics)

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def notice(self) -> Optional[str]:
        return self._notice

    @property
    def progress(self) -> float:
        """완료된 반복 비율 (0~1)"""
        with self._lock:
            return len(self._iterations) / self.learning_config.total_iterations

    # ------------------------------------------------------------------
    # 콜백 등록
    # ------------------------------------------------------------------

    def on_iteration_complete(self, callback: Callable[[LearningIteration], Any]) -> Callable:
        """반복 1회 완료 시 호출 (인자: LearningIteration)"""
        self._callbacks['iteration'].append(callback)
        return callback

    def on_completed(self, callback: Callable[[LearningIteration, Tuple[LearningIteration, ...]], Any]) -> Callable:
        """학습 완료 시 호출 (인자: best_result, 전체 반복 결과)"""
        self._callbacks['completed'].append(callback)
        return callback

    def on_failed(self, callback: Callable[[BaseException, Tuple[LearningIteration, ...]], Any]) -> Callable:
        """내부 오류로 중단 시 호출 (인자: 예외, 완료된 반복 결과)"""
        self._callbacks['failed'].append(callback)
        return callback

    def on_cancelled(self, callback: Callable[[Tuple[LearningIteration, ...]], Any]) -> Callable:
        """취소 시 호출 (인자: 완료된 반복 결과)"""
        self._callbacks['cancelled'].append(callback)
        return callback

    def on_notice(self, callback: Callable[[str], Any]) -> Callable:
        """데이터 부족 등 안내 메시지 발생 시 호출"""
        self._callbacks['notice'].append(callback)
        return callback

    def _emit(self, event: str, *args) -> None:
        for callback in list(self._callbacks[event]):
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"{event} 콜백 실행 중 오류 발생: {str(e)}\n{format_exception(e)}")

    # ------------------------------------------------------------------
    # 실행 제어
    # ------------------------------------------------------------------

    def start(self, draws: Iterable[Any], background: bool = False) -> bool:
        """
        학습 시작

        Args:
            draws: 최신 회차가 앞에 오는 추첨 기록 (검증 전 기록 허용)
            background: True면 작업 스레드에서 실행하고 즉시 반환

        Returns:
            학습이 시작되었으면 True, 데이터 부족으로 시작하지 않았으면 False

        Raises:
            LearningInProgressError: 이미 실행 중일 때
        """
        with self._lock:
            if self._state.is_active:
                raise LearningInProgressError("학습이 이미 진행 중입니다")

            validated = validate_draws(draws)
            required = self.learning_config.min_draws
            if len(validated) < required:
                notice = str(InsufficientDataError(len(validated), required))
                self._notice = notice
            else:
                notice = None
                self._draws = tuple(validated)
                self._iterations = []
                self._insights = []
                self._metrics = {}
                self._best_result = None
                self._error = None
                self._notice = None
                self._cancel_event.clear()
                self._state = LearningState.RUNNING

        if notice is not None:
            logger.warning(notice)
            self._emit('notice', notice)
            return False

        logger.info(
            f"자율 학습 시작: 데이터 {len(self._draws)}회, "
            f"반복 {self.learning_config.total_iterations}회"
        )

        if background:
            self._thread = threading.Thread(
                target=self._run, name='dlt-learning', daemon=True
            )
            self._thread.start()
        else:
            self._run()
        return True

    def cancel(self) -> bool:
        """
        실행 중인 학습 취소 요청

        현재 반복이 끝난 뒤 다음 반복을 시작하지 않고 CANCELLED로 전이합니다.

        Returns:
            취소 요청이 접수되었으면 True
        """
        with self._lock:
            if not self._state.is_active:
                return False
            self._cancel_event.set()
        logger.info("학습 취소 요청")
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        백그라운드 실행 종료 대기

        Returns:
            실행이 종료되었으면 True
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
            if thread.is_alive():
                return False
        return not self._state.is_active

    def _set_state(self, state: LearningState) -> None:
        with self._lock:
            self._state = state

    @log_performance
    def _run(self) -> None:
        """반복 학습 루프"""
        config = self.learning_config
        rotation = config.strategies
        total = config.total_iterations

        try:
            for index in range(1, total + 1):
                if self._cancel_event.is_set():
                    self._finish_cancelled()
                    return

                self._set_state(LearningState.ITERATING)
                strategy = rotation[(index - 1) % len(rotation)]
                iteration = self.perform_iteration(index, strategy)

                with self._lock:
                    self._iterations.append(iteration)
                    self._insights.extend(iteration.insights)
                    self._update_metrics(iteration)

                logger.debug(f"{index}회차 반복 완료: 전략={strategy.value}, 점수={iteration.score:.1f}")
                self._emit('iteration', iteration)

                if index < total and config.iteration_delay > 0:
                    self._cancel_event.wait(config.iteration_delay)

            # 동점이면 먼저 나온 반복 선택
            best = max(self._iterations, key=lambda it: it.score)
        except Exception as e:
            logger.error(f"학습 반복 중 오류 발생: {str(e)}\n{format_exception(e)}")
            with self._lock:
                self._error = e
                self._state = LearningState.FAILED
                completed = tuple(self._iterations)
            self._emit('failed', e, completed)
            return

        with self._lock:
            self._best_result = best
            self._state = LearningState.COMPLETED
            completed = tuple(self._iterations)

        logger.info(f"자율 학습 완료: {total}회 반복, 최고 점수 {best.score:.1f} ({best.index}회차)")
        self._emit('completed', best, completed)

    def _finish_cancelled(self) -> None:
        with self._lock:
            self._state = LearningState.CANCELLED
            completed = tuple(self._iterations)
        logger.info(f"학습 취소됨: {len(completed)}회 반복 완료")
        self._emit('cancelled', completed)

    # ------------------------------------------------------------------
    # 반복 1회
    # ------------------------------------------------------------------

    def perform_iteration(self, index: int, strategy: Strategy) -> LearningIteration:
        """
        반복 1회 수행

        Args:
            index: 1부터 시작하는 반복 회차
            strategy: 적용할 전략

        Returns:
            LearningIteration
        """
        config = self.learning_config
        analysis = self.config.analysis
        draws = self._draws
        options = dict(
            rng=self._rng,
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
        combined = CombinationEvaluation.combine(
            front_eval, back_eval, config.front_weight, config.back_weight
        )

        return LearningIteration(
            index=index,
            strategy_used=strategy,
            front_numbers=tuple(front),
            back_numbers=tuple(back),
            front_evaluation=front_eval,
            back_evaluation=back_eval,
            evaluation=combined,
            simulated_accuracy=self._simulated_accuracy(index),
            insights=tuple(learning_insights(index, strategy, front, back))
        )

    def _simulated_accuracy(self, index: int) -> float:
        config = self.learning_config
        progress = index / config.total_iterations
        random_factor = 0.8 + self._rng.random() * 0.4
        accuracy = config.base_accuracy + config.max_accuracy_gain * progress * random_factor
        return float(min(accuracy, config.accuracy_cap))

    def _update_metrics(self, iteration: LearningIteration) -> None:
        """모의 성능 지표 갱신 (락 보유 상태에서 호출)"""
        accuracy = iteration.simulated_accuracy * 100
        quality = iteration.score

        if not self._metrics:
            self._metrics = {
                'accuracy': PerformanceMetric(
                    '예측 정확도', round(accuracy, 1), 0.0, 'stable',
                    '과거 데이터 검증 기반 예측 정확도'
                ),
                'complexity': PerformanceMetric(
                    '모델 복잡도', 15.0, 15.0, 'up',
                    '모델의 복잡도와 분석 차원 수'
                ),
                'efficiency': PerformanceMetric(
                    '학습 효율', round(75 + self._rng.random() * 15, 1), 0.0, 'stable',
                    '새로운 규칙을 학습하는 효율 지표'
                ),
                'quality': PerformanceMetric(
                    '예측 품질', round(quality, 1), 0.0, 'stable',
                    '예측 결과의 종합 품질 점수'
                ),
            }
            return

        previous = self._metrics
        complexity = min(100.0, previous['complexity'].value + 8 + self._rng.random() * 4)
        efficiency = max(60.0, previous['efficiency'].value - self._rng.random() * 3)

        updates = {
            'accuracy': (accuracy, 0.5),
            'complexity': (complexity, None),
            'efficiency': (efficiency, 0.5),
            'quality': (quality, 1.0),
        }
        metrics = {}
        for key, (value, band) in updates.items():
            metric = previous[key]
            change = value - metric.value
            trend = 'up' if band is None else _trend(change, band)
            metrics[key] = replace(
                metric, value=round(value, 1), change=round(change, 1), trend=trend
            )
        self._metrics = metrics
