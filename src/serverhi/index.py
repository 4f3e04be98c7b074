"""
Content Index - 게시된(비초안) 글의 단일 진실 공급원

로더가 넘겨준 레코드로 한 번 생성되며, 이후 모든 조회는 불변 스냅샷에 대한 읽기입니다.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple, Union

from serverhi.config import FEATURED_LIMIT
from serverhi.models import Category, ContentRecord, ContentValidationError
from serverhi.ranker import RelevanceRanker
from serverhi.tags import TagCanonicalizer
from serverhi.utils import setup_logger

logger = setup_logger(__name__)


class ContentIndex:
    """게시 글 인덱스 (최신순 정렬 스냅샷)"""

    def __init__(self, records: Iterable[ContentRecord], ranker: RelevanceRanker = None):
        records = list(records)
        for record in records:
            if getattr(record, "published_at", None) is None:
                raise ContentValidationError(record.id, "missing required published_at")

        published = [r for r in records if not r.draft]
        # reverse=True 정렬도 안정 정렬: 게시 시각이 같으면 입력(로딩) 순서 유지
        self._published: Tuple[ContentRecord, ...] = tuple(
            sorted(published, key=lambda r: r.published_at, reverse=True)
        )
        self._by_id: Dict[str, ContentRecord] = {r.id: r for r in self._published}
        self.ranker = ranker or RelevanceRanker()
        self.draft_count = len(records) - len(published)

        logger.info(f"Indexed {len(self._published)} published records ({self.draft_count} drafts skipped)")

    def __len__(self) -> int:
        return len(self._published)

    def all(self) -> List[ContentRecord]:
        return list(self._published)

    def featured(self, limit: int = FEATURED_LIMIT) -> List[ContentRecord]:
        if limit <= 0:
            return []
        return [r for r in self._published if r.featured][:limit]

    def by_category(self, category: Union[Category, str]) -> List[ContentRecord]:
        # 알 수 없는 카테고리는 오류가 아니라 빈 결과
        return [r for r in self._published if r.category == category]

    def by_tag(self, tag: str) -> List[ContentRecord]:
        key = TagCanonicalizer.normalize(tag)
        if not key:
            return []
        return [
            r for r in self._published
            if any(TagCanonicalizer.normalize(t) == key for t in r.tags)
        ]

    def get(self, record_id: str) -> Optional[ContentRecord]:
        return self._by_id.get(record_id)

    def tags(self) -> List[str]:
        return TagCanonicalizer.collect_canonical_tags(self._published)

    def categories(self) -> Dict[Category, int]:
        counts = Counter(r.category for r in self._published)
        return {category: counts[category] for category in Category if counts[category]}

    def related(self, record: ContentRecord, limit: Optional[int] = None) -> List[ContentRecord]:
        return self.ranker.rank(record, self._published, limit)
