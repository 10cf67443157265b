"""
로깅 설정
"""

import logging

from securekit.core.config import get_settings


def setup_logging(level: str | None = None):
    """로깅 설정"""
    if level is None:
        level = get_settings().log_level

    # 로깅 핸들러 설정 (기본 stderr 사용)
    handler = logging.StreamHandler()
    handler.setLevel(level.upper())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    # 패키지 로거 설정 (루트 로거는 사용하는 애플리케이션에 맡김)
    package_logger = logging.getLogger("securekit")
    package_logger.setLevel(level.upper())
    package_logger.handlers = [handler]

    return package_logger
