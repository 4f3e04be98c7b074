"""
Tag Canonicalizer - 태그 정규화, 슬러그 생성, 대표 표기 선택
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List

from serverhi.models import ContentRecord
from serverhi.utils import setup_logger

logger = setup_logger(__name__)

_WHITESPACE_RE = re.compile(r'\s+')
_INVALID_SLUG_CHARS_RE = re.compile(r'[^a-z0-9-]')
_DASH_RUN_RE = re.compile(r'-+')


@dataclass(frozen=True)
class CanonicalTag:
    key: str
    display: str
    slug: str


class TagCanonicalizer:
    """대소문자/공백 차이를 무시하고 태그를 하나의 표기로 묶음"""

    @classmethod
    def normalize(cls, tag: str) -> str:
        """비교/그룹화용 키 (화면에 표시하지 않음)"""
        return tag.strip().lower()

    @classmethod
    def slugify(cls, tag: str) -> str:
        """
        URL용 슬러그 생성

        'CI/CD' -> 'ci-cd', 'Docker Compose' -> 'docker-compose'.
        결과는 [a-z0-9-]만 포함하며, 두 번 적용해도 같은 값입니다.
        """
        slug = tag.strip().lower().replace('/', '-')
        slug = _WHITESPACE_RE.sub('-', slug)
        slug = _INVALID_SLUG_CHARS_RE.sub('', slug)
        slug = _DASH_RUN_RE.sub('-', slug)
        return slug.strip('-')

    @classmethod
    def canonical_map(cls, records: Iterable[ContentRecord]) -> Dict[str, CanonicalTag]:
        """
        정규화 키 -> CanonicalTag 매핑 (코퍼스 순서대로 처음 본 원본 문자열이 그대로 대표 표기)

        빈 태그(공백만 있는 태그 포함)는 슬러그를 만들 수 없으므로 제외합니다.
        """
        canonical: Dict[str, CanonicalTag] = {}
        for record in records:
            for tag in record.tags:
                key = cls.normalize(tag)
                if not key:
                    logger.warning(f"Dropping empty tag on '{record.id}'")
                    continue
                if key not in canonical:
                    canonical[key] = CanonicalTag(key=key, display=tag, slug=cls.slugify(tag))
        return canonical

    @classmethod
    def collect_canonical_tags(cls, records: Iterable[ContentRecord]) -> List[str]:
        """대표 표기 목록 (대소문자 무시 오름차순)"""
        displays = [t.display for t in cls.canonical_map(records).values()]
        return sorted(displays, key=lambda d: (cls.normalize(d), d))


normalize = TagCanonicalizer.normalize
slugify = TagCanonicalizer.slugify
collect_canonical_tags = TagCanonicalizer.collect_canonical_tags
