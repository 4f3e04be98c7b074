"""
ServerHi Content Module

서버 튜토리얼 사이트 콘텐츠 엔진:
- Content Loader: 마크다운 + YAML front matter 로드
- Content Index: 게시 글 정렬/필터 조회
- Relevance Ranker: 관련 글 점수 계산
- Tag Canonicalizer: 태그 정규화 및 슬러그
- RSS Feed: RSS 2.0 출력
"""

from serverhi.models import Category, ContentRecord, ContentValidationError, Difficulty
from serverhi.tags import TagCanonicalizer, collect_canonical_tags, normalize, slugify
from serverhi.index import ContentIndex
from serverhi.ranker import RelevanceRanker, ScoredRecord
from serverhi.metadata import estimate_reading_time
from serverhi.loader import ContentLoader

__all__ = [
    "Category",
    "ContentRecord",
    "ContentValidationError",
    "Difficulty",
    "TagCanonicalizer",
    "collect_canonical_tags",
    "normalize",
    "slugify",
    "ContentIndex",
    "RelevanceRanker",
    "ScoredRecord",
    "estimate_reading_time",
    "ContentLoader",
]

__version__ = "1.0.0"
__author__ = "ServerHi Team"
