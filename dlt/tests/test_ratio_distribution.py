"""
비율 / 분포 분석 테스트
"""

import unittest
import sys
from pathlib import Path

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)
tests_dir = str(Path(__file__).parent)
if tests_dir not in sys.path:
    sys.path.append(tests_dir)

from dlt.src.analysis.distribution_analyzer import analyze_span, analyze_sum
from dlt.src.analysis.ratio_analyzer import analyze_big_small, analyze_odd_even, is_big
from dlt.src.analysis.snapshot_analyzer import analyze_snapshot
from dlt.src.models import Draw, Zone
from helpers import make_draws


class TestRatioAnalyzer(unittest.TestCase):
    """RatioAnalyzer 테스트"""

    def setUp(self):
        self.draws = [
            Draw('2', '', (1, 3, 5, 20, 22), (1, 7)),
            Draw('1', '', (2, 4, 19, 30, 35), (6, 12)),
        ]

    def test_empty_defaults(self):
        """빈 스냅샷이면 0.5 / 0.5"""
        odd_even = analyze_odd_even([], Zone.FRONT)
        self.assertEqual(odd_even.odd_percentage, 0.5)
        self.assertEqual(odd_even.even_percentage, 0.5)
        self.assertEqual(odd_even.odd_count, 0)
        big_small = analyze_big_small([], Zone.BACK)
        self.assertEqual(big_small.big_percentage, 0.5)
        self.assertEqual(big_small.small_percentage, 0.5)

    def test_odd_even_counts_numbers(self):
        """회차가 아닌 번호 단위로 집계"""
        front = analyze_odd_even(self.draws, Zone.FRONT)
        self.assertEqual(front.odd_count, 5)
        self.assertEqual(front.even_count, 5)
        self.assertAlmostEqual(front.odd_percentage, 0.5)

        back = analyze_odd_even(self.draws, Zone.BACK)
        self.assertEqual((back.odd_count, back.even_count), (2, 2))

    def test_big_small_threshold(self):
        """전구 18, 후구 6 초과가 '대'"""
        front = analyze_big_small(self.draws, Zone.FRONT)
        self.assertEqual(front.big_count, 5)
        self.assertEqual(front.small_count, 5)

        back = analyze_big_small(self.draws, Zone.BACK)
        self.assertEqual(back.big_count, 2)
        self.assertAlmostEqual(back.big_percentage + back.small_percentage, 1.0)
        self.assertFalse(is_big(18, Zone.FRONT))
        self.assertTrue(is_big(19, Zone.FRONT))
        self.assertFalse(is_big(6, Zone.BACK))

    def test_ratio_stats(self):
        stats = analyze_odd_even(self.draws, Zone.FRONT).stats
        self.assertEqual([s.category for s in stats], ['odd', 'even'])
        stats = analyze_big_small(self.draws, Zone.FRONT).stats
        self.assertEqual([s.category for s in stats], ['big', 'small'])
        self.assertEqual(sum(s.count for s in stats), 10)


class TestDistributionAnalyzer(unittest.TestCase):
    """DistributionAnalyzer 테스트"""

    def test_empty_defaults(self):
        """빈 스냅샷이면 고정 기본값"""
        total = analyze_sum([])
        self.assertEqual((total.average, total.min, total.max), (100, 15, 175))
        self.assertEqual(total.histogram, {})
        span = analyze_span([])
        self.assertEqual((span.average, span.min, span.max), (20, 4, 34))
        self.assertEqual(span.histogram, {})

    def test_sum_and_span(self):
        draws = [
            Draw('3', '', (1, 2, 3, 4, 5), (1, 2)),
            Draw('2', '', (1, 2, 3, 4, 5), (1, 2)),
            Draw('1', '', (31, 32, 33, 34, 35), (1, 2)),
        ]
        total = analyze_sum(draws)
        self.assertEqual(total.histogram, {15: 2, 165: 1})
        self.assertAlmostEqual(total.average, 65.0)
        self.assertEqual((total.min, total.max), (15, 165))
        self.assertIsInstance(total.min, int)

        span = analyze_span(draws)
        self.assertEqual(span.histogram, {4: 3})
        self.assertEqual((span.min, span.max), (4, 4))

    def test_histogram_totals(self):
        draws = make_draws(30, seed=2)
        self.assertEqual(sum(analyze_sum(draws).histogram.values()), 30)
        self.assertEqual(sum(analyze_span(draws).histogram.values()), 30)


class TestSnapshotAnalyzer(unittest.TestCase):
    """스냅샷 일괄 분석 테스트"""

    def test_snapshot_bundle(self):
        draws = make_draws(25, seed=4)
        snapshot = analyze_snapshot(draws)
        self.assertEqual(snapshot.draw_count, 25)
        self.assertEqual(len(snapshot.frequencies(Zone.FRONT)), 35)
        self.assertEqual(len(snapshot.frequencies('back')), 12)
        self.assertEqual(snapshot.sum_distribution, analyze_sum(draws))
        self.assertEqual(snapshot.front_odd_even, analyze_odd_even(draws, Zone.FRONT))

    def test_empty_snapshot_bundle(self):
        snapshot = analyze_snapshot([])
        self.assertEqual(snapshot.draw_count, 0)
        self.assertEqual(snapshot.span_distribution.average, 20)


if __name__ == '__main__':
    unittest.main()
