"""
Error definitions for the template editor.

규칙:
- 세그먼트 코덱(decode/encode)은 예외를 던지지 않음 (관대한 파싱)
- 그 외 실패는 code + message + context를 가진 예외로 명시적 실패
- 라우트에서 HTTPException(detail={"code", "message"})로 변환
"""

from typing import Any


class EditorError(Exception):
    """
    템플릿 에디터 에러 기반 클래스.

    Usage:
        raise TemplateError("TEMPLATE_NOT_FOUND", "Template 3 not found", template_id=3)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class TemplateError(EditorError):
    """템플릿 저장소 관련 에러."""


class SegmentEditError(EditorError):
    """세그먼트 변환/편집 관련 에러."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Template Store ===
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TEMPLATE_NAME = "INVALID_TEMPLATE_NAME"
    TEMPLATE_EXISTS = "TEMPLATE_EXISTS"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # === Segments ===
    INVALID_SEGMENT = "INVALID_SEGMENT"
    SEGMENT_INDEX_OUT_OF_RANGE = "SEGMENT_INDEX_OUT_OF_RANGE"
    SEGMENT_NOT_CODE = "SEGMENT_NOT_CODE"
    SEGMENT_READ_ONLY = "SEGMENT_READ_ONLY"

    # === Export ===
    UNKNOWN_FENCE = "UNKNOWN_FENCE"
