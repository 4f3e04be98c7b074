"""
Utilities Module
빌드 전반에서 공유하는 로거 설정
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Union

from serverhi.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logger(name: str, log_file: str = None, level: Union[int, str] = LOG_LEVEL) -> logging.Logger:
    """
    모듈 로거 반환 (stdout + 선택적 회전 파일)

    Args:
        name: 로거 이름 (__name__)
        log_file: LOG_DIR 아래 파일명 (예: 'build.log'). None이면 콘솔만 사용
        level: 로그 레벨 (정수 또는 'DEBUG' 같은 이름)

    Returns:
        설정된 Logger 인스턴스
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    # 같은 모듈이 두 번 설정해도 핸들러 중복 없음
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        # 10MB 단위로 최대 5개 파일 유지
        file_handler = RotatingFileHandler(
            LOG_DIR / log_file, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
