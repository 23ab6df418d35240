"""
Segment schemas: 템플릿 원문을 파싱한 결과 단위.

- TextSegment: 구조 없는 일반 텍스트
- CodeSegment: {{{ ... }}} 코드 블록 (header 줄과 구분자는 content에서 제외)

JSON 형태는 브라우저 에디터와 동일하게 유지:
    {"type": "text", "content": "..."}
    {"type": "code", "language": "python", "readOnly": false, "content": "..."}
"""

from dataclasses import dataclass
from typing import Any

from src.domain.constants import SEGMENT_TYPE_CODE, SEGMENT_TYPE_TEXT
from src.domain.errors import ErrorCodes, SegmentEditError


@dataclass
class TextSegment:
    """일반 텍스트 세그먼트."""
    content: str = ""

    @property
    def type(self) -> str:
        return SEGMENT_TYPE_TEXT

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": SEGMENT_TYPE_TEXT,
            "content": self.content,
        }


@dataclass
class CodeSegment:
    """코드 블록 세그먼트."""
    language: str = ""
    read_only: bool = False
    content: str = ""

    @property
    def type(self) -> str:
        return SEGMENT_TYPE_CODE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": SEGMENT_TYPE_CODE,
            "language": self.language,
            "readOnly": self.read_only,
            "content": self.content,
        }


Segment = TextSegment | CodeSegment


def segment_from_dict(data: Any) -> Segment:
    """
    JSON dict → Segment.

    readOnly(에디터 표기)와 read_only 둘 다 허용.

    Args:
        data: 세그먼트 dict

    Returns:
        TextSegment 또는 CodeSegment

    Raises:
        SegmentEditError: INVALID_SEGMENT
    """
    if not isinstance(data, dict):
        raise SegmentEditError(
            ErrorCodes.INVALID_SEGMENT,
            f"Segment must be an object, got {type(data).__name__}",
        )

    segment_type = data.get("type")
    content = data.get("content", "")
    if not isinstance(content, str):
        raise SegmentEditError(
            ErrorCodes.INVALID_SEGMENT,
            "Segment content must be a string",
            type=segment_type,
        )

    if segment_type == SEGMENT_TYPE_TEXT:
        return TextSegment(content=content)

    if segment_type == SEGMENT_TYPE_CODE:
        language = data.get("language") or ""
        if not isinstance(language, str):
            raise SegmentEditError(
                ErrorCodes.INVALID_SEGMENT,
                "Code segment language must be a string",
            )
        read_only = data.get("readOnly", data.get("read_only", False))
        if not isinstance(read_only, bool):
            raise SegmentEditError(
                ErrorCodes.INVALID_SEGMENT,
                "Code segment readOnly must be a boolean",
            )
        return CodeSegment(
            language=language,
            read_only=read_only,
            content=content,
        )

    raise SegmentEditError(
        ErrorCodes.INVALID_SEGMENT,
        f"Unknown segment type: {segment_type!r}",
        type=segment_type,
    )


def segments_from_list(items: Any) -> list[Segment]:
    """JSON list → list[Segment]."""
    if not isinstance(items, list):
        raise SegmentEditError(
            ErrorCodes.INVALID_SEGMENT,
            "segments must be a list",
        )
    return [segment_from_dict(item) for item in items]


def segments_to_list(segments: list[Segment]) -> list[dict[str, Any]]:
    """list[Segment] → JSON list."""
    return [segment.to_dict() for segment in segments]
