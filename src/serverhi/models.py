"""
Data Models
Pydantic을 사용한 콘텐츠 레코드 검증 및 파싱 모델
"""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from serverhi.config import DEFAULT_AUTHOR
from serverhi.metadata import estimate_reading_time


class ContentValidationError(ValueError):
    """로더 경계에서 잘못된 레코드를 발견했을 때 발생"""

    def __init__(self, record_id: str, message: str):
        self.record_id = record_id
        super().__init__(f"{record_id}: {message}")


class Category(str, Enum):
    DOCKER = "docker"
    LINUX = "linux"
    SERVER_CONFIG = "server-config"
    DEVOPS = "devops"
    SECURITY = "security"
    TROUBLESHOOTING = "troubleshooting"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DIFFICULTY_COLORS = {
    Difficulty.BEGINNER: "#00ff00",
    Difficulty.INTERMEDIATE: "#ff9500",
    Difficulty.ADVANCED: "#ff4444",
}
DEFAULT_DIFFICULTY_COLOR = "#8b949e"


def difficulty_color(difficulty: Optional[str]) -> str:
    try:
        return DIFFICULTY_COLORS[Difficulty(difficulty)]
    except ValueError:
        return DEFAULT_DIFFICULTY_COLOR


def difficulty_label(difficulty: Optional[str]) -> str:
    if not difficulty:
        return ""
    value = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty)
    return value[0].upper() + value[1:]


class ContentRecord(BaseModel):
    """게시글 한 건 (불변). 로더만 생성합니다."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="코퍼스 내 고유 식별자")
    title: str = Field(..., description="글 제목")
    description: str = Field(..., description="요약")
    published_at: datetime = Field(..., alias="pubDate", description="게시 시각 (정렬 기준)")
    updated_at: Optional[datetime] = Field(None, alias="updatedDate")
    category: Category = Field(..., description="카테고리")
    tags: Tuple[str, ...] = Field(default_factory=tuple, description="태그 목록 (입력 순서 유지)")
    author: str = Field(DEFAULT_AUTHOR)
    featured: bool = False
    draft: bool = False
    body: str = Field("", description="마크다운 본문")

    # 튜토리얼 전용 필드
    cover_image: Optional[str] = Field(None, alias="coverImage")
    cover_image_alt: Optional[str] = Field(None, alias="coverImageAlt")
    difficulty: Optional[Difficulty] = None
    estimated_time: Optional[str] = Field(None, alias="estimatedTime")
    prerequisites: Tuple[str, ...] = Field(default_factory=tuple)
    os_compatibility: Tuple[str, ...] = Field(default_factory=tuple, alias="osCompatibility")

    @field_validator("published_at", "updated_at", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        # YAML은 날짜만 있는 값을 date로 파싱함
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            except ValueError:
                return value
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("tags", "prerequisites", "os_compatibility", mode="before")
    @classmethod
    def _coerce_str_list(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(str(v) for v in value)
        return value

    @property
    def reading_time(self) -> int:
        return estimate_reading_time(self.body)

    @classmethod
    def from_front_matter(cls, record_id: str, data: Dict[str, Any], body: str = "") -> "ContentRecord":
        """
        front matter dict로부터 레코드 생성

        pydantic ValidationError는 레코드 id를 포함한 ContentValidationError로 변환됩니다.
        """
        payload = dict(data)
        payload["id"] = record_id
        payload["body"] = body
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ContentValidationError(record_id, problems) from e
