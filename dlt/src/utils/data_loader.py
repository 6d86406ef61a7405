"""
추첨 데이터 검증 및 관리

이 모듈은 외부에서 들어온 추첨 기록을 검증하고, 최신 회차 순으로 정렬된
히스토리 스냅샷을 제공합니다. 파일이나 네트워크 입출력은 수행하지 않습니다.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd
from marshmallow import (
    EXCLUDE, Schema, ValidationError, fields, post_load, pre_load, validate, validates_schema
)

from ..models import Draw, HistorySnapshot, Zone
from .config import Config
from shared.error_handler import get_logger

# 로거 설정
logger = get_logger(__name__)

# 입력 레코드에서 허용하는 키 별칭
FIELD_ALIASES = {
    'id': ('id', 'drawNumber', 'draw_no', 'issue'),
    'date': ('date', 'drawDate', 'draw_date'),
    'frontNumbers': ('frontNumbers', 'front_numbers', 'front'),
    'backNumbers': ('backNumbers', 'back_numbers', 'back'),
}

FRONT_COLUMNS = ['f1', 'f2', 'f3', 'f4', 'f5']
BACK_COLUMNS = ['b1', 'b2']


def _zone_field(zone: Zone) -> fields.List:
    return fields.List(
        fields.Integer(strict=True, validate=validate.Range(min=1, max=zone.max_number)),
        required=True,
        validate=validate.Length(equal=zone.pick_count)
    )


class DrawSchema(Schema):
    """추첨 기록 스키마"""

    class Meta:
        unknown = EXCLUDE

    id = fields.String(load_default='')
    date = fields.String(load_default='')
    frontNumbers = _zone_field(Zone.FRONT)
    backNumbers = _zone_field(Zone.BACK)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, Draw):
            data = {
                'id': data.id,
                'date': data.date,
                'frontNumbers': list(data.front_numbers),
                'backNumbers': list(data.back_numbers),
            }
        if not isinstance(data, Mapping):
            raise ValidationError('추첨 기록은 매핑이어야 합니다')

        normalized: Dict[str, Any] = {}
        for target, aliases in FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data and data[alias] is not None:
                    normalized[target] = data[alias]
                    break

        for key in ('id', 'date'):
            if key in normalized:
                normalized[key] = str(normalized[key])

        for key in ('frontNumbers', 'backNumbers'):
            numbers = normalized.get(key)
            if isinstance(numbers, (str, bytes, Mapping)) or not isinstance(numbers, Iterable):
                continue
            numbers = list(numbers)
            # bool은 정수로 취급하지 않음
            if any(isinstance(n, bool) for n in numbers):
                raise ValidationError('번호에 bool 값이 포함되어 있습니다', key)
            normalized[key] = numbers
        return normalized

    @validates_schema
    def check_distinct(self, data, **kwargs):
        for key in ('frontNumbers', 'backNumbers'):
            numbers = data.get(key, [])
            if len(set(numbers)) != len(numbers):
                raise ValidationError(f'중복된 번호가 있습니다: {numbers}', key)

    @post_load
    def make_draw(self, data, **kwargs) -> Draw:
        return Draw(
            id=data['id'],
            date=data['date'],
            front_numbers=tuple(int(n) for n in data['frontNumbers']),
            back_numbers=tuple(int(n) for n in data['backNumbers'])
        )


_schema = DrawSchema()


def validate_draw(record: Any) -> Optional[Draw]:
    """
    단일 기록 검증

    Returns:
        유효하면 Draw, 아니면 None
    """
    try:
        return _schema.load(record)
    except ValidationError as e:
        logger.debug(f"유효하지 않은 추첨 기록 제외: {e.messages}")
        return None


def validate_draws(raw: Optional[Iterable[Any]]) -> List[Draw]:
    """
    추첨 기록 목록에서 형식에 맞는 기록만 남김

    형식에 맞지 않는 기록은 오류 없이 제외됩니다. 입력 순서는 유지됩니다.

    Args:
        raw: 추첨 기록(매핑 또는 Draw) 시퀀스

    Returns:
        검증된 Draw 리스트
    """
    if raw is None:
        return []

    draws = []
    total = 0
    for record in raw:
        total += 1
        draw = validate_draw(record)
        if draw is not None:
            draws.append(draw)

    if total != len(draws):
        logger.debug(f"원본 데이터: {total}건, 유효 데이터: {len(draws)}건")
    return draws


def _cell_number(value: Any) -> Any:
    """
    번호 셀 정규화

    결측값은 None으로 남겨 해당 행만 검증에서 제외되게 하고,
    결측값 때문에 float로 바뀐 정수는 int로 되돌립니다.
    """
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return value


def _row_numbers(df: pd.DataFrame, columns: List[str]) -> List[List[Any]]:
    # 열 단위 dtype 변환이 다른 행에 영향을 주지 않도록 행마다 변환
    return [
        [_cell_number(row[column]) for column in columns]
        for row in df[columns].to_dict(orient='records')
    ]


def records_from_dataframe(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    데이터프레임을 추첨 기록 목록으로 변환

    frontNumbers/backNumbers 리스트 컬럼 또는 f1..f5 / b1..b2 개별 컬럼을 지원합니다.
    """
    df = df.copy()
    if 'frontNumbers' not in df.columns and all(c in df.columns for c in FRONT_COLUMNS):
        df['frontNumbers'] = _row_numbers(df, FRONT_COLUMNS)
    if 'backNumbers' not in df.columns and all(c in df.columns for c in BACK_COLUMNS):
        df['backNumbers'] = _row_numbers(df, BACK_COLUMNS)

    for column in ('date', 'drawDate'):
        if column in df.columns and pd.api.types.is_datetime64_any_dtype(df[column]):
            df[column] = df[column].dt.strftime('%Y-%m-%d')

    df = df.drop(columns=[c for c in FRONT_COLUMNS + BACK_COLUMNS if c in df.columns])
    return df.to_dict(orient='records')


class DataManager:
    """히스토리 데이터 관리자"""

    def __init__(self, config: Optional[Config] = None):
        """
        데이터 관리자 초기화

        Args:
            config: 설정 객체
        """
        self.config = config or Config()
        self.data_config = self.config.data
        self.draws: Optional[Tuple[Draw, ...]] = None
        self.raw_count = 0

    def load_records(self, records: Iterable[Any], newest_first: bool = True) -> None:
        """
        추첨 기록 로드

        Args:
            records: 추첨 기록 시퀀스
            newest_first: 날짜 정보가 없을 때 입력이 최신 회차 순인지 여부
        """
        records = list(records)
        self.raw_count = len(records)
        draws = validate_draws(records)

        if draws and all(d.date for d in draws):
            dates = pd.to_datetime(pd.Series([d.date for d in draws]), errors='coerce')
            if not dates.isna().any():
                # 안정 정렬로 같은 날짜는 입력 순서 유지
                order = dates.sort_values(ascending=False, kind='mergesort').index
                draws = [draws[i] for i in order]
                newest_first = True

        if not newest_first:
            draws.reverse()

        self.draws = tuple(draws)
        logger.info(f"데이터 로드 완료: 원본 {self.raw_count}건, 유효 {len(self.draws)}건")

    def load_dataframe(self, df: pd.DataFrame, newest_first: bool = True) -> None:
        """
        데이터프레임에서 추첨 기록 로드

        Args:
            df: 추첨 기록 데이터프레임
            newest_first: 날짜 정보가 없을 때 행이 최신 회차 순인지 여부
        """
        self.load_records(records_from_dataframe(df), newest_first=newest_first)

    def _require_data(self) -> Tuple[Draw, ...]:
        if self.draws is None:
            raise ValueError("데이터가 로드되지 않았습니다.")
        return self.draws

    def get_snapshot(self, window: Optional[int] = None) -> HistorySnapshot:
        """
        최신 회차 기준 스냅샷 반환

        Args:
            window: 포함할 최신 회차 수 (None이면 설정값 사용)

        Returns:
            최신 회차가 앞에 오는 Draw 튜플
        """
        draws = self._require_data()
        window = self.data_config.window_size if window is None else window
        if window < 1:
            raise ValueError(f"window는 1 이상이어야 합니다: {window}")
        return draws[:window]

    def get_latest_draw(self) -> Optional[Draw]:
        """
        최신 추첨 결과 반환
        """
        draws = self._require_data()
        return draws[0] if draws else None

    def summary(self) -> Dict[str, int]:
        """로드 결과 요약"""
        draws = self._require_data()
        return {
            'raw': self.raw_count,
            'valid': len(draws),
            'dropped': self.raw_count - len(draws)
        }
