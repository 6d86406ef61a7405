"""
오류 처리 및 로깅 유틸리티

모듈별 로거 생성, 콘솔/파일 핸들러 설정, 안전 실행 및 성능 로깅 데코레이터를 제공합니다.
임포트 시점에는 어떤 핸들러도 등록하지 않습니다.
"""

import logging
import sys
import time
import traceback
import functools
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if levelname in COLORS:
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 생성"""
    return logging.getLogger(name)


def setup_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
    colored: bool = True
) -> logging.Logger:
    """로거 설정

    Args:
        name: 로거 이름
        log_file: 로그 파일 경로 (None이면 콘솔만 사용)
        level: 로그 레벨
        colored: 콘솔 출력에 컬러 포매터를 사용할지 여부

    Returns:
        설정된 로거
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 중복 핸들러 방지
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter_cls = ColoredFormatter if colored else logging.Formatter
    console_handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT + ' - [%(filename)s:%(lineno)d]',
            datefmt=DATE_FORMAT
        ))
        logger.addHandler(file_handler)

    return logger


# 성능 측정 데코레이터
def log_performance(func: Callable) -> Callable:
    """
    함수 실행 시간을 로깅하는 데코레이터

    성공 시 INFO, 실패 시 ERROR 레벨로 실행 시간을 기록하고 예외는 그대로 전파합니다.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(func.__module__)
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.error(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={execution_time:.3f}초, "
                f"오류={str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        logger.info(f"함수 {func.__name__} 실행 완료: 시간={execution_time:.3f}초")
        return result

    return wrapper


# 안전한 실행 데코레이터
T = TypeVar('T')


def safe_execute(default_return: Optional[T] = None, reraise: bool = False) -> Callable:
    """
    함수 실행을 안전하게 처리하는 데코레이터

    Args:
        default_return: 오류 발생 시 반환할 기본값
        reraise: 예외를 다시 발생시킬지 여부
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Optional[T]:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger = logging.getLogger(func.__module__)
                logger.error(
                    f"함수 {func.__name__} 실행 중 오류 발생:\n"
                    f"오류: {str(e)}\n"
                    f"스택 트레이스:\n{traceback.format_exc()}"
                )
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


def format_exception(error: BaseException) -> str:
    """예외를 스택 트레이스 문자열로 변환"""
    return ''.join(traceback.format_exception(type(error), error, error.__traceback__))
