"""
Shared fixtures - 합성 코퍼스 및 콘텐츠 디렉토리
"""

import pytest

from serverhi.models import ContentRecord


def make_record(record_id, published, category="docker", tags=(), **kwargs) -> ContentRecord:
    return ContentRecord(
        id=record_id,
        title=kwargs.pop("title", record_id.replace("/", " ").title()),
        description=kwargs.pop("description", f"About {record_id}"),
        published_at=published,
        category=category,
        tags=list(tags),
        **kwargs,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def corpus():
    """5 published + 1 draft, 3 devops"""
    return [
        make_record("devops/ci-pipeline", "2024-03-01", "devops", ["CI/CD", "GitHub Actions", "Docker"], featured=True),
        make_record("devops/ansible", "2024-02-01", "devops", ["Ansible", "Automation"]),
        make_record("devops/monitoring", "2024-01-01", "devops", ["Prometheus", "ci/cd", "docker"]),
        make_record("docker/compose", "2024-02-15", "docker", ["Docker", "Compose"], featured=True),
        make_record("security/ufw", "2024-01-20", "security", ["Firewall"]),
        make_record("devops/draft", "2024-04-01", "devops", ["CI/CD"], featured=True, draft=True),
    ]


POST_TEMPLATE = """---
title: "{title}"
description: "{description}"
pubDate: {pub_date}
category: {category}
tags: [{tags}]
{extra}---

{body}
"""


def write_post(directory, relative_path, title="Post", description="Desc", pub_date="2024-01-01",
               category="docker", tags=(), extra="", body="Some body text."):
    path = directory / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        POST_TEMPLATE.format(
            title=title,
            description=description,
            pub_date=pub_date,
            category=category,
            tags=", ".join(f'"{t}"' for t in tags),
            extra=extra,
            body=body,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def content_dir(tmp_path):
    root = tmp_path / "posts"
    write_post(root, "devops/ci-pipeline.md", title="CI Pipeline", pub_date="2024-03-01",
               category="devops", tags=["CI/CD", "GitHub Actions", "Docker"], extra="featured: true\n")
    write_post(root, "devops/ansible.md", title="Ansible", pub_date="2024-02-01",
               category="devops", tags=["Ansible", "Automation"])
    write_post(root, "devops/monitoring/index.md", title="Monitoring", pub_date="2024-01-01",
               category="devops", tags=["Prometheus", "ci/cd", "docker"])
    write_post(root, "docker/compose.md", title="Compose", pub_date="2024-02-15",
               category="docker", tags=["Docker", "Compose"], extra='author: "Jane Ops"\n')
    write_post(root, "security/ufw.md", title="UFW", pub_date="2024-01-20",
               category="security", tags=["Firewall"])
    write_post(root, "devops/draft.md", title="Draft", pub_date="2024-04-01",
               category="devops", tags=["CI/CD"], extra="draft: true\n")
    return root


@pytest.fixture
def post_writer():
    return write_post
