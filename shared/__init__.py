"""
공통 유틸리티

로깅 및 오류 처리 헬퍼를 제공합니다.
"""

from .error_handler import get_logger, setup_logger, safe_execute, log_performance

__all__ = ['get_logger', 'setup_logger', 'safe_execute', 'log_performance']
