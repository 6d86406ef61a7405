"""
테스트용 합성 추첨 데이터
"""

from datetime import date, timedelta
from typing import Any, Dict, List

import numpy as np

from dlt.src.models import Draw


def make_draws(count: int, seed: int = 0) -> List[Draw]:
    """최신 회차가 앞에 오는 무작위 추첨 결과"""
    rng = np.random.default_rng(seed)
    start = date(2024, 1, 1)
    draws = []
    for i in range(count):
        draw_no = 24000 + count - i
        front = sorted(int(n) for n in rng.choice(np.arange(1, 36), size=5, replace=False))
        back = sorted(int(n) for n in rng.choice(np.arange(1, 13), size=2, replace=False))
        draws.append(Draw(
            id=str(draw_no),
            date=(start + timedelta(days=3 * (count - i))).isoformat(),
            front_numbers=tuple(front),
            back_numbers=tuple(back)
        ))
    return draws


def to_record(draw: Draw) -> Dict[str, Any]:
    """Draw를 원본 기록 형식으로 변환"""
    return {
        'drawNumber': draw.id,
        'drawDate': draw.date,
        'frontNumbers': list(draw.front_numbers),
        'backNumbers': list(draw.back_numbers),
        'prize': '1000000',
        'sales': '300000000'
    }


def repeated_draws(count: int, front=(1, 2, 3, 4, 5), back=(1, 2)) -> List[Draw]:
    """같은 번호가 반복되는 추첨 결과"""
    return [
        Draw(id=str(i), date='', front_numbers=tuple(front), back_numbers=tuple(back))
        for i in range(count)
    ]
