"""
Site Config
YAML 파일에서 사이트 메타데이터, 테마, 카테고리 테이블을 로드하고 관리합니다.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from serverhi.config import SITE_CONFIG_PATH

DEFAULT_CATEGORY_ICON = "📄"

class SiteConfig:
    _data: Dict[str, Any] = {}
    _path: Path = SITE_CONFIG_PATH

    @classmethod
    def load(cls, path: Optional[Path] = None):
        """YAML 파일 로드 (path가 주어지면 해당 파일로 교체)"""
        if path is not None:
            cls._path = Path(path)
        if not cls._path.exists():
            raise FileNotFoundError(f"Site config file not found at {cls._path}")

        with open(cls._path, 'r', encoding='utf-8') as f:
            cls._data = yaml.safe_load(f) or {}

    @classmethod
    def get(cls, key: str) -> Any:
        """
        점(.)으로 구분된 키에 해당하는 값 반환

        Args:
            key: 예) 'site.title', 'theme.colors.dark.primary'

        Returns:
            설정 값 (dict, list, str 등)
        """
        if not cls._data:
            cls.load()

        value = cls._data
        try:
            for k in key.split('.'):
                value = value[k]
        except (KeyError, TypeError):
            raise KeyError(f"Site config key '{key}' not found.")
        return value

    @classmethod
    def categories(cls) -> List[Dict[str, Any]]:
        return cls.get("categories")

    @classmethod
    def get_category_by_slug(cls, slug: str) -> Optional[Dict[str, Any]]:
        for category in cls.categories():
            if category.get("slug") == slug:
                return category
        return None

    @classmethod
    def get_category_color(cls, slug: str) -> str:
        category = cls.get_category_by_slug(slug)
        if category and category.get("color"):
            return category["color"]
        return cls.get("theme.colors.dark.primary")

    @classmethod
    def get_category_icon(cls, slug: str) -> str:
        category = cls.get_category_by_slug(slug)
        if category and category.get("icon"):
            return category["icon"]
        return DEFAULT_CATEGORY_ICON
