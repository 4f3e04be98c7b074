"""
Content Loader - 마크다운 파일의 YAML front matter를 읽어 ContentRecord 생성

content/posts/
  docker/compose-basics.md      -> id: docker/compose-basics
  linux/ssh-hardening/index.md  -> id: linux/ssh-hardening
"""

import re
import yaml
from pathlib import Path
from typing import List, Tuple, Dict, Any

from serverhi.config import CONTENT_DIR, DEFAULT_AUTHOR
from serverhi.models import ContentRecord, ContentValidationError
from serverhi.utils import setup_logger

logger = setup_logger(__name__, "loader.log")

_FRONT_MATTER_RE = re.compile(r'\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)(.*)\Z', re.DOTALL)


def split_front_matter(text: str, record_id: str) -> Tuple[Dict[str, Any], str]:
    """'---' 구분자로 front matter(dict)와 본문 분리"""
    match = _FRONT_MATTER_RE.match(text.lstrip('\ufeff'))
    if not match:
        raise ContentValidationError(record_id, "missing front matter block")

    try:
        data = yaml.safe_load(match.group(1) or "") or {}
    except yaml.YAMLError as e:
        raise ContentValidationError(record_id, f"invalid YAML front matter: {e}") from e

    if not isinstance(data, dict):
        raise ContentValidationError(record_id, "front matter must be a mapping")
    return data, match.group(2)


def parse_document(text: str, record_id: str, default_author: str = DEFAULT_AUTHOR) -> ContentRecord:
    data, body = split_front_matter(text, record_id)
    if not data.get("author"):
        data["author"] = default_author
    return ContentRecord.from_front_matter(record_id, data, body.strip())


class ContentLoader:
    """콘텐츠 디렉토리 로더 (빌드 시작 시 한 번 실행)"""

    def __init__(self, content_dir: Path = None, default_author: str = None):
        self.content_dir = Path(content_dir or CONTENT_DIR)
        self.default_author = default_author or DEFAULT_AUTHOR

        if not self.content_dir.is_dir():
            raise ValueError(f"콘텐츠 디렉토리가 존재하지 않습니다: {self.content_dir}")

    def record_id(self, path: Path) -> str:
        relative = path.relative_to(self.content_dir).with_suffix("")
        if relative.name == "index" and relative.parent != Path("."):
            relative = relative.parent
        return relative.as_posix()

    def load(self) -> List[ContentRecord]:
        """
        모든 마크다운 파일 로드 (경로 정렬 순서 = 로딩 순서)

        Returns:
            초안을 포함한 전체 레코드 목록

        Raises:
            ContentValidationError: front matter 누락 또는 필드 검증 실패
        """
        records = []
        for path in sorted(self.content_dir.rglob("*.md")):
            record_id = self.record_id(path)
            text = path.read_text(encoding="utf-8")
            try:
                records.append(parse_document(text, record_id, self.default_author))
            except ContentValidationError as e:
                logger.error(f"Invalid content file {path}: {e}")
                raise

        logger.info(f"Loaded {len(records)} records from {self.content_dir}")
        return records
