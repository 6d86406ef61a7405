"""
기본 YAML 설정 파일 생성 스크립트
"""

from pathlib import Path
from typing import Optional, Union

from .config import Config

# 기본 설정 파일 경로
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'dlt_config.yaml'


def write_default_config(path: Optional[Union[str, Path]] = None) -> Path:
    """
    기본값으로 채운 설정 파일 저장

    Args:
        path: 저장 경로 (None이면 DEFAULT_CONFIG_PATH)

    Returns:
        저장된 파일 경로
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    Config().save(str(config_path))
    return config_path


if __name__ == '__main__':
    saved = write_default_config()
    print(f"설정 파일이 생성되었습니다: {saved}")
