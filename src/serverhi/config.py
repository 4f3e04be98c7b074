"""
Configuration Module
환경 변수 로드, 경로 설정, 정책 상수 정의를 담당합니다.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# 1. 경로 설정
CURRENT_DIR = Path(__file__).resolve().parent

# 환경 변수로 지정된 SERVERHI_ROOT 사용 (우선), 없으면 현재 작업 디렉토리
PROJECT_ROOT = Path(os.getenv("SERVERHI_ROOT", str(Path.cwd())))

# 2. 환경 변수 로드
# 프로젝트 루트의 .env 파일 우선적으로 로드
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path, override=True)


# 3. 설정 값 가져오기
def get_env(key: str, default: str = None) -> str:
    """환경 변수 가져오기"""
    return os.getenv(key, default)


def get_int_env(key: str, default: int) -> int:
    """정수형 환경 변수 가져오기 (잘못된 값이면 ValueError)"""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")


# 주요 디렉토리
LOG_DIR = PROJECT_ROOT / "logs"
CONTENT_DIR = Path(get_env("SERVERHI_CONTENT_DIR", str(PROJECT_ROOT / "content" / "posts")))
OUTPUT_DIR = Path(get_env("SERVERHI_OUTPUT_DIR", str(PROJECT_ROOT / "dist")))

# 사이트 설정 (YAML)
SITE_CONFIG_PATH = Path(get_env("SERVERHI_SITE_CONFIG", str(CURRENT_DIR / "site.yaml")))

# 콘텐츠 기본값
DEFAULT_AUTHOR = get_env("SERVERHI_DEFAULT_AUTHOR", "ServerHi Editorial Team")
WORDS_PER_MINUTE = get_int_env("SERVERHI_WORDS_PER_MINUTE", 200)
FEATURED_LIMIT = get_int_env("SERVERHI_FEATURED_LIMIT", 6)

# 관련 글 추천 가중치
RELATED_CATEGORY_WEIGHT = get_int_env("SERVERHI_RELATED_CATEGORY_WEIGHT", 10)
RELATED_TAG_WEIGHT = get_int_env("SERVERHI_RELATED_TAG_WEIGHT", 2)
RELATED_LIMIT = get_int_env("SERVERHI_RELATED_LIMIT", 3)

# 로그 레벨 (DEBUG로 설정하면 관련 글 점수까지 출력)
LOG_LEVEL = get_env("SERVERHI_LOG_LEVEL", "INFO")
