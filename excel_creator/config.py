"""워크북 기본값(기본 폰트, 기본 열 너비, 기본 행 높이) 설정 파일 로더."""

import json
import os

from excel_creator.logger import get_logger

logger = get_logger("config")

DEFAULT_CONFIG_ENV = "EXCEL_CREATOR_CONFIG"


def load_creator_config(path=None):
    """JSON 설정 파일을 로드한다. 경로가 없으면 환경변수를 보고, 둘 다 없으면 빈 설정.

    설정 예:
        {
            "default_font": {"name": "Arial", "size": 11},
            "default_column_width": 12,
            "default_row_height": 18
        }
    """
    path = path or os.environ.get(DEFAULT_CONFIG_ENV)
    if not path:
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            config = json.load(f)
        logger.info("설정 로드: %s (keys=%s)", path, sorted(config))
        return config
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        logger.warning("설정 파일 로드 실패 (%s) — 기본값 사용", exc)
        return {}
