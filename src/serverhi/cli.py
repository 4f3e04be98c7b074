#!/usr/bin/env python3
"""
ServerHi Build - 콘텐츠 로드 → 인덱스 생성 → RSS 출력
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from serverhi.config import CONTENT_DIR, OUTPUT_DIR
from serverhi.feed import write_rss
from serverhi.index import ContentIndex
from serverhi.loader import ContentLoader
from serverhi.models import ContentValidationError
from serverhi.tags import slugify
from serverhi.utils import setup_logger

logger = setup_logger(__name__, "build.log")


def run_build(
    content_dir: Path,
    output_dir: Path,
    site_url: Optional[str] = None,
    related: Optional[str] = None,
    list_tags: bool = False,
) -> ContentIndex:
    logger.info("=== ServerHi Build Started ===")

    # 1. 콘텐츠 로드
    logger.info(f"[1/3] Loading content from {content_dir}...")
    records = ContentLoader(content_dir).load()

    # 2. 인덱스 생성
    logger.info("[2/3] Building content index...")
    index = ContentIndex(records)
    for category, count in index.categories().items():
        logger.info(f"   {category.value}: {count}")

    # 3. RSS 출력
    feed_path = write_rss(output_dir / "rss.xml", index.all(), site_url=site_url)
    logger.info(f"[3/3] Wrote feed: {feed_path}")

    if list_tags:
        for tag in index.tags():
            print(f"{tag}\t{slugify(tag)}")

    if related:
        reference = index.get(related)
        if reference is None:
            raise KeyError(f"No published record with id '{related}'")
        for record in index.related(reference):
            print(f"{index.ranker.score(reference, record)}\t{record.id}")

    logger.info(f"=== Build Completed: {len(index)} published, {index.draft_count} drafts ===")
    return index


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='ServerHi content index build')
    parser.add_argument('--content-dir', type=Path, default=CONTENT_DIR, help='마크다운 콘텐츠 디렉토리')
    parser.add_argument('--output-dir', type=Path, default=OUTPUT_DIR, help='rss.xml 출력 디렉토리')
    parser.add_argument('--site-url', default=None, help='피드 링크 기본 URL (기본: site.yaml)')
    parser.add_argument('--related', metavar='ID', default=None, help='해당 글의 관련 글 점수 출력')
    parser.add_argument('--list-tags', action='store_true', help='대표 태그와 슬러그 출력')
    args = parser.parse_args(argv)

    try:
        run_build(
            args.content_dir,
            args.output_dir,
            site_url=args.site_url,
            related=args.related,
            list_tags=args.list_tags,
        )
    except (ContentValidationError, ValueError, KeyError) as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
