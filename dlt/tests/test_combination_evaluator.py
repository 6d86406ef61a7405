"""
번호 조합 평가 테스트
"""

import unittest
import sys
from pathlib import Path

import numpy as np

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)
tests_dir = str(Path(__file__).parent)
if tests_dir not in sys.path:
    sys.path.append(tests_dir)

from dlt.src.analysis.combination_evaluator import (
    INVALID_DETAILS, CombinationEvaluation, evaluate
)
from dlt.src.generation.strategy_generator import generate
from dlt.src.models import Rating, Strategy, Zone
from helpers import make_draws, repeated_draws


class TestCombinationEvaluator(unittest.TestCase):
    """CombinationEvaluator 테스트"""

    @classmethod
    def setUpClass(cls):
        cls.draws = make_draws(50, seed=21)
        cls.fixed = repeated_draws(10)

    def test_known_front_scores(self):
        """반복 데이터에서 점수 직접 계산"""
        result = evaluate([1, 2, 3, 4, 5], self.fixed, Zone.FRONT)
        self.assertAlmostEqual(result.frequency_score, 100.0)
        self.assertAlmostEqual(result.balance_score, 100.0)
        self.assertAlmostEqual(result.trend_score, 100.0)
        self.assertAlmostEqual(result.diversity_score, 4 / 34 * 100)
        self.assertAlmostEqual(result.score, 80 + 0.2 * (4 / 34 * 100))
        self.assertIs(result.rating, Rating.EXCELLENT)
        self.assertEqual(result.details, "종합 점수 82.4점, 빈도 분석 100.0점, 균형성 100.0점")

    def test_unseen_front_combination(self):
        result = evaluate([31, 32, 33, 34, 35], self.fixed, Zone.FRONT)
        self.assertAlmostEqual(result.frequency_score, 0.0)
        self.assertAlmostEqual(result.balance_score, 50.0)
        self.assertAlmostEqual(result.trend_score, 0.0)
        self.assertAlmostEqual(result.score, 15 + 0.2 * (4 / 34 * 100))
        self.assertIs(result.rating, Rating.NEEDS_WORK)

    def test_known_back_scores(self):
        result = evaluate([1, 12], self.fixed, Zone.BACK)
        self.assertAlmostEqual(result.frequency_score, 50.0)
        self.assertAlmostEqual(result.balance_score, 75.0)
        self.assertAlmostEqual(result.trend_score, 20.0)
        self.assertAlmostEqual(result.diversity_score, 100.0)
        self.assertAlmostEqual(result.score, 61.5)
        self.assertIs(result.rating, Rating.GOOD)

    def test_invalid_candidates(self):
        """비어 있거나 잘못된 조합은 점수 0, Invalid"""
        invalid = [
            [],
            None,
            [0, 1, 2, 3, 4],
            [1, 2, 3, 4, 36],
            [1, 1, 2, 3, 4],
            [1.5, 2, 3, 4, 5],
            ['1', 2, 3, 4, 5],
            [True, 2, 3, 4, 5],
            '12345',
            42,
        ]
        for candidate in invalid:
            result = evaluate(candidate, self.draws, Zone.FRONT)
            self.assertIs(result.rating, Rating.INVALID, candidate)
            self.assertEqual(result.score, 0)
            self.assertFalse(result.is_valid)
            self.assertEqual(result.details, INVALID_DETAILS)
        self.assertIs(evaluate([13], self.draws, Zone.BACK).rating, Rating.INVALID)

    def test_deterministic(self):
        """동일 입력이면 동일 결과"""
        candidate = [4, 9, 17, 26, 33]
        first = evaluate(candidate, self.draws, Zone.FRONT)
        second = evaluate(candidate, self.draws, Zone.FRONT)
        self.assertEqual(first, second)

    def test_scores_within_bounds(self):
        rng = np.random.default_rng(8)
        for _ in range(30):
            candidate = sorted(int(n) for n in rng.choice(np.arange(1, 36), 5, replace=False))
            result = evaluate(candidate, self.draws, 'front')
            for value in (result.score, result.frequency_score, result.balance_score,
                          result.trend_score, result.diversity_score):
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 100.0)

    def test_empty_snapshot(self):
        result = evaluate([1, 2, 3, 4, 5], [], Zone.FRONT)
        self.assertEqual(result.frequency_score, 0.0)
        self.assertEqual(result.trend_score, 0.0)
        self.assertIsNot(result.rating, Rating.INVALID)

    def test_generated_candidates_never_raise(self):
        """생성 결과를 바로 평가해도 예외가 없음"""
        rng = np.random.default_rng(13)
        for strategy in Strategy:
            for draws in (self.draws, []):
                front = generate(draws, strategy, 5, 35, rng=rng)
                back = generate(draws, strategy, 2, 12, rng=rng)
                self.assertTrue(evaluate(front, draws, Zone.FRONT).is_valid)
                self.assertTrue(evaluate(back, draws, Zone.BACK).is_valid)

    def test_combine(self):
        """전구 0.7 / 후구 0.3 가중 합산"""
        front = evaluate([1, 2, 3, 4, 5], self.fixed, Zone.FRONT)
        back = evaluate([1, 12], self.fixed, Zone.BACK)
        combined = CombinationEvaluation.combine(front, back)
        self.assertAlmostEqual(combined.score, front.score * 0.7 + back.score * 0.3)
        self.assertAlmostEqual(combined.trend_score, 100 * 0.7 + 20 * 0.3)
        self.assertIs(combined.rating, Rating.from_score(combined.score))
        self.assertTrue(combined.details.startswith(f"종합 점수 {combined.score:.1f}점"))

        invalid = CombinationEvaluation.combine(front, CombinationEvaluation.invalid())
        self.assertIs(invalid.rating, Rating.INVALID)
        self.assertEqual(invalid.score, 0)

    def test_rating_thresholds(self):
        self.assertIs(Rating.from_score(80), Rating.EXCELLENT)
        self.assertIs(Rating.from_score(79.9), Rating.GOOD)
        self.assertIs(Rating.from_score(60), Rating.GOOD)
        self.assertIs(Rating.from_score(40), Rating.FAIR)
        self.assertIs(Rating.from_score(39.9), Rating.NEEDS_WORK)


if __name__ == '__main__':
    unittest.main()
