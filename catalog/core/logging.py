"""
로깅 설정
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다 (표준 출력).

    uvicorn이 이미 핸들러를 등록한 경우에도 레벨과 포맷을 적용하기 위해
    force=True로 기존 설정을 덮어씁니다.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, WARNING, ...)
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
