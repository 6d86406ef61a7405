"""
스마트 추천 및 인사이트 테스트
"""

import unittest
import sys
from pathlib import Path
from unittest.mock import patch

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)
tests_dir = str(Path(__file__).parent)
if tests_dir not in sys.path:
    sys.path.append(tests_dir)

from dlt.src.generation import strategy_generator
from dlt.src.learning.insights import learning_insights, strategy_insights, strategy_name
from dlt.src.learning.recommender import recommend
from dlt.src.models import Strategy
from dlt.src.utils.config import Config
from dlt.src.utils.exceptions import InsufficientDataError
from helpers import make_draws, to_record


class TestRecommender(unittest.TestCase):
    """recommend 테스트"""

    @classmethod
    def setUpClass(cls):
        cls.draws = make_draws(40, seed=17)

    def test_insufficient_data(self):
        with self.assertRaises(InsufficientDataError) as ctx:
            recommend(self.draws[:9])
        self.assertEqual(ctx.exception.available, 9)
        self.assertEqual(ctx.exception.required, 10)

    def test_all_strategies_sorted_by_confidence(self):
        """전략별 추천 5건, 신뢰도 내림차순"""
        results = recommend(self.draws, rng=1)
        self.assertEqual(len(results), 5)
        self.assertEqual({r.strategy for r in results}, set(Strategy))

        confidences = [r.confidence for r in results]
        self.assertEqual(confidences, sorted(confidences, reverse=True))
        for r in results:
            self.assertEqual(len(r.front_numbers), 5)
            self.assertEqual(len(r.back_numbers), 2)
            self.assertAlmostEqual(
                r.confidence, r.front_evaluation.score * 0.7 + r.back_evaluation.score * 0.3
            )
            self.assertTrue(r.name)
            self.assertTrue(r.insights)

    def test_accepts_raw_records(self):
        records = [to_record(d) for d in self.draws[:12]]
        results = recommend(records, rng=2, strategies=['hot', Strategy.COLD])
        self.assertEqual(len(results), 2)

    def test_seeded_recommendation_is_reproducible(self):
        first = recommend(self.draws, rng=4)
        second = recommend(self.draws, rng=4)
        self.assertEqual(
            [(r.strategy, r.front_numbers, r.back_numbers) for r in first],
            [(r.strategy, r.front_numbers, r.back_numbers) for r in second]
        )

    def test_failed_strategy_is_skipped(self):
        """한 전략이 실패해도 나머지 추천은 반환"""
        real_generate = strategy_generator.generate

        def flaky(draws, strategy, *args, **kwargs):
            if strategy is Strategy.COLD:
                raise RuntimeError("생성 실패")
            return real_generate(draws, strategy, *args, **kwargs)

        with patch('dlt.src.learning.recommender.generate', side_effect=flaky):
            results = recommend(self.draws, rng=0)

        self.assertEqual(len(results), 4)
        self.assertNotIn(Strategy.COLD, [r.strategy for r in results])

    def test_unknown_strategy_uses_integrated(self):
        """알 수 없는 전략 이름은 종합 분석으로 대체"""
        results = recommend(self.draws, rng=0, strategies=['hot', 'mystery'])
        self.assertEqual(len(results), 2)
        self.assertEqual({r.strategy for r in results}, {Strategy.HOT, Strategy.INTEGRATED})

    def test_custom_minimum(self):
        config = Config({'data': {'min_recommend_draws': 3}})
        self.assertEqual(len(recommend(self.draws[:3], config=config, rng=0)), 5)


class TestInsights(unittest.TestCase):
    """인사이트 문구 테스트"""

    def test_learning_insights_per_iteration(self):
        front, back = [3, 8, 15, 22, 30], [4, 9]
        first = learning_insights(1, Strategy.HOT, front, back)
        self.assertEqual(len(first), 3)
        self.assertIn(strategy_name(Strategy.HOT), first[0])
        self.assertIn('78', first[2])

        second = learning_insights(2, 'cold', front, back)
        self.assertIn('2:3', second[2])

        third = learning_insights(3, 'trend', front, back)
        self.assertIn('27', third[1])

        for index in (4, 5, 6, 9):
            lines = learning_insights(index, 'integrated', front, back)
            self.assertEqual(len(lines), 3)
            self.assertTrue(lines[0].startswith(f"{index}회차"))
        self.assertEqual(
            learning_insights(7, 'hot', front, back)[1:],
            learning_insights(9, 'cold', front, back)[1:]
        )

    def test_strategy_insights(self):
        front, back = [3, 8, 15, 22, 30], [4, 9]
        self.assertEqual(strategy_insights(Strategy.HOT, [], back), ["전략 분석 완료"])
        self.assertIn('78', strategy_insights(Strategy.HOT, front, back)[1])
        self.assertIn('27', strategy_insights(Strategy.COLD, front, back)[1])
        self.assertIn('2:3', strategy_insights(Strategy.BALANCED, front, back)[0])
        for strategy in Strategy:
            self.assertEqual(len(strategy_insights(strategy, front, back)), 2)
        self.assertEqual(
            strategy_insights('unknown', front, back),
            strategy_insights(Strategy.INTEGRATED, front, back)
        )

    def test_strategy_name(self):
        self.assertEqual(strategy_name('hot'), '핫 번호 추적')
        self.assertEqual(strategy_name('mystery'), 'mystery')


if __name__ == '__main__':
    unittest.main()
