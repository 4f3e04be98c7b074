"""
Content Index tests - 초안 제외, 최신순 정렬, 필터
"""

import pytest

from serverhi.index import ContentIndex
from serverhi.models import Category, ContentRecord, ContentValidationError


def ids(records):
    return [r.id for r in records]


@pytest.fixture
def index(corpus):
    return ContentIndex(corpus)


def test_all_excludes_drafts_and_sorts_newest_first(index):
    assert ids(index.all()) == [
        "devops/ci-pipeline",
        "docker/compose",
        "devops/ansible",
        "security/ufw",
        "devops/monitoring",
    ]
    assert len(index) == 5
    assert index.draft_count == 1


def test_drafts_appear_in_no_view(index):
    views = [
        index.all(),
        index.featured(),
        index.by_category("devops"),
        index.by_tag("CI/CD"),
        index.related(index.get("devops/ci-pipeline"), limit=100),
    ]
    for view in views:
        assert "devops/draft" not in ids(view)
    assert index.get("devops/draft") is None


def test_equal_timestamps_keep_ingestion_order(record_factory):
    records = [
        record_factory("first", "2024-05-01"),
        record_factory("second", "2024-05-01"),
        record_factory("newer", "2024-06-01"),
        record_factory("third", "2024-05-01"),
    ]
    index = ContentIndex(records)

    assert ids(index.all()) == ["newer", "first", "second", "third"]
    assert ids(ContentIndex(records).all()) == ids(index.all())


def test_featured_preserves_order_and_limit(index):
    assert ids(index.featured()) == ["devops/ci-pipeline", "docker/compose"]
    assert ids(index.featured(1)) == ["devops/ci-pipeline"]
    assert index.featured(0) == []


def test_by_category(index):
    """devops 3건을 최신순으로"""
    assert ids(index.by_category("devops")) == [
        "devops/ci-pipeline",
        "devops/ansible",
        "devops/monitoring",
    ]
    assert ids(index.by_category(Category.DOCKER)) == ["docker/compose"]


def test_unknown_category_is_empty(index):
    assert index.by_category("kubernetes") == []
    assert index.by_category(Category.TROUBLESHOOTING) == []


def test_by_tag_matches_normalized_key(index):
    expected = ["devops/ci-pipeline", "docker/compose", "devops/monitoring"]
    assert ids(index.by_tag("docker")) == expected
    assert ids(index.by_tag("  DOCKER ")) == expected
    assert ids(index.by_tag("ci/cd")) == ["devops/ci-pipeline", "devops/monitoring"]


def test_by_tag_is_not_substring_match(index):
    assert index.by_tag("dock") == []
    assert index.by_tag("") == []


def test_tags_and_categories(index):
    assert index.tags() == [
        "Ansible",
        "Automation",
        "CI/CD",
        "Compose",
        "Docker",
        "Firewall",
        "GitHub Actions",
        "Prometheus",
    ]
    assert index.categories() == {
        Category.DEVOPS: 3,
        Category.DOCKER: 1,
        Category.SECURITY: 1,
    }


def test_related_uses_published_pool(index):
    reference = index.get("devops/ci-pipeline")
    assert ids(index.related(reference)) == [
        "devops/monitoring",
        "devops/ansible",
        "docker/compose",
    ]


def test_queries_do_not_mutate_snapshot(index):
    snapshot = ids(index.all())
    index.all().clear()
    index.by_category("devops").reverse()
    assert ids(index.all()) == snapshot


def test_missing_published_at_fails_fast():
    broken = ContentRecord.model_construct(id="broken", tags=(), draft=False)
    with pytest.raises(ContentValidationError) as exc_info:
        ContentIndex([broken])
    assert exc_info.value.record_id == "broken"


def test_empty_corpus():
    index = ContentIndex([])
    assert index.all() == []
    assert index.featured() == []
    assert index.tags() == []
    assert index.categories() == {}
