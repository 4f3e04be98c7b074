"""
RSS Feed - 게시 글 목록을 RSS 2.0 XML로 직렬화
"""

import re
import xml.etree.ElementTree as ET
from email.utils import format_datetime
from pathlib import Path
from typing import Iterable
from urllib.parse import urljoin

from serverhi.models import ContentRecord
from serverhi.site_config import SiteConfig
from serverhi.utils import setup_logger

logger = setup_logger(__name__, "feed.log")

RSS_STYLESHEET = "/rss-styles.xsl"

# XML 1.0에서 허용되지 않는 제어 문자 (탭, 개행, CR 제외)
_XML_INVALID_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def xml_text(value: str) -> str:
    return _XML_INVALID_CHARS_RE.sub("", value)


def post_url(site_url: str, record: ContentRecord) -> str:
    return urljoin(site_url.rstrip("/") + "/", f"posts/{record.id}/")


def build_rss(
    records: Iterable[ContentRecord],
    site_url: str = None,
    title: str = None,
    description: str = None,
) -> str:
    """
    RSS 2.0 문서 생성

    Args:
        records: 출력 순서대로 정렬된 글 목록 (보통 ContentIndex.all())
        site_url: 사이트 기본 URL (없으면 site.yaml의 site.url)
        title, description: 채널 정보 (없으면 site.yaml 값)

    Returns:
        XML 선언과 스타일시트 지시자를 포함한 문자열
    """
    site_url = site_url or SiteConfig.get("site.url")

    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = xml_text(title or SiteConfig.get("site.title"))
    ET.SubElement(channel, "description").text = xml_text(description or SiteConfig.get("site.description"))
    ET.SubElement(channel, "link").text = site_url
    ET.SubElement(channel, "language").text = SiteConfig.get("site.language")

    count = 0
    for record in records:
        link = post_url(site_url, record)
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = xml_text(record.title)
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid", {"isPermaLink": "true"}).text = link
        ET.SubElement(item, "description").text = xml_text(record.description)
        ET.SubElement(item, "pubDate").text = format_datetime(record.published_at)
        for category in [record.category.value, *record.tags]:
            ET.SubElement(item, "category").text = xml_text(category)
        ET.SubElement(item, "author").text = xml_text(record.author)
        count += 1

    logger.info(f"Built RSS feed with {count} items")
    body = ET.tostring(rss, encoding="unicode")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<?xml-stylesheet href="{RSS_STYLESHEET}" type="text/xsl"?>\n'
        f"{body}\n"
    )


def write_rss(path: Path, records: Iterable[ContentRecord], **kwargs) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(build_rss(records, **kwargs))
    return path
