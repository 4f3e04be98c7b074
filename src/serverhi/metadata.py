"""
Derived Metadata - 본문에서 계산되는 표시용 메타데이터 (읽기 시간, 날짜 포맷 등)
"""

import math
from datetime import datetime
from serverhi.config import WORDS_PER_MINUTE


def estimate_reading_time(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """
    본문 읽기 시간 추정 (분 단위, 올림)

    공백 기준으로 단어를 세며, 비어있지 않은 본문은 최소 1분을 반환합니다.
    빈 본문(공백만 있는 경우 포함)은 0을 반환합니다.
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    words = len(body.split()) if body else 0
    return math.ceil(words / words_per_minute)


def reading_time_label(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    return f"{estimate_reading_time(body, words_per_minute)} min read"


def format_date(value: datetime) -> str:
    """'January 5, 2024' 형식"""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length].strip() + "..."
