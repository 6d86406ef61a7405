"""
번호 생성 모듈
"""

from .strategy_generator import generate, make_rng

__all__ = ['generate', 'make_rng']
