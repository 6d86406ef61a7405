"""
엔진 예외 정의
"""


class DltError(Exception):
    """엔진 기본 예외"""


class InsufficientDataError(DltError):
    """분석에 필요한 최소 회차 수에 미달"""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"데이터가 부족합니다: 유효 데이터 {available}회, 최소 {required}회 필요"
        )


class LearningInProgressError(DltError):
    """학습이 이미 진행 중일 때 재시작 요청"""
