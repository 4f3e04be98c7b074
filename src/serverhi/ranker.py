"""
Relevance Ranker - 기준 글과 관련된 글 점수 계산 및 상위 K개 선별

점수 = (같은 카테고리면 category_weight) + tag_weight * (공유 태그 수)
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from serverhi.config import RELATED_CATEGORY_WEIGHT, RELATED_LIMIT, RELATED_TAG_WEIGHT
from serverhi.models import ContentRecord
from serverhi.tags import TagCanonicalizer
from serverhi.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ScoredRecord:
    record: ContentRecord
    score: int


def _tag_keys(record: ContentRecord) -> FrozenSet[str]:
    # 레코드 내 중복 태그는 한 번만 집계
    keys = (TagCanonicalizer.normalize(tag) for tag in record.tags)
    return frozenset(k for k in keys if k)


class RelevanceRanker:
    """카테고리 일치 + 공유 태그 기반 가산 점수 랭커"""

    def __init__(
        self,
        category_weight: int = None,
        tag_weight: int = None,
        default_limit: int = None,
    ):
        self.category_weight = RELATED_CATEGORY_WEIGHT if category_weight is None else category_weight
        self.tag_weight = RELATED_TAG_WEIGHT if tag_weight is None else tag_weight
        self.default_limit = RELATED_LIMIT if default_limit is None else default_limit

        if self.category_weight < 0 or self.tag_weight < 0:
            raise ValueError("Ranking weights must be non-negative")

    def score(self, reference: ContentRecord, candidate: ContentRecord) -> int:
        score = 0
        if candidate.category == reference.category:
            score += self.category_weight
        shared = _tag_keys(reference) & _tag_keys(candidate)
        score += self.tag_weight * len(shared)
        return score

    def scored(self, reference: ContentRecord, pool: Iterable[ContentRecord]) -> List[ScoredRecord]:
        """
        기준 글을 제외한 전체 후보를 점수 내림차순으로 정렬

        동점은 pool의 원래 순서를 유지합니다 (안정 정렬).
        """
        results = [
            ScoredRecord(record=candidate, score=self.score(reference, candidate))
            for candidate in pool
            if candidate.id != reference.id
        ]

        results.sort(key=lambda item: item.score, reverse=True)
        return results

    def rank(
        self,
        reference: ContentRecord,
        pool: Iterable[ContentRecord],
        limit: Optional[int] = None,
    ) -> List[ContentRecord]:
        """
        관련 글 상위 limit개 반환

        Args:
            reference: 기준 글 (id가 같은 후보는 제외)
            pool: 후보 목록 (보통 ContentIndex.all())
            limit: 최대 개수. None이면 default_limit, 0 이하면 빈 리스트

        Returns:
            점수 내림차순 글 목록. 관련도 0인 후보도 개수를 채우는 데 사용됩니다.
        """
        if limit is None:
            limit = self.default_limit
        if limit <= 0:
            return []

        ranked = self.scored(reference, pool)[:limit]
        logger.debug(f"Related to '{reference.id}': {[(s.record.id, s.score) for s in ranked]}")
        return [item.record for item in ranked]
