"""
Export: 복사/내보내기용 텍스트 변환.

코덱과 별개의 표시용 변환. 결과는 저장 원문으로 되돌리지 않음.
- [readonly] 마커 전부 제거
- fence 지정 시 {{{ / }}}를 대체 구분자로 치환 (예: markdown → ```)
"""

from src.domain.constants import (
    CLOSE_DELIMITER,
    EXPORT_FENCES,
    OPEN_DELIMITER,
    READONLY_MARKER,
)
from src.domain.errors import ErrorCodes, SegmentEditError


def resolve_fence(name: str | None) -> str | None:
    """
    fence 이름 → 구분자 토큰.

    Args:
        name: EXPORT_FENCES 키 (None 또는 ""이면 치환 없음)

    Raises:
        SegmentEditError: UNKNOWN_FENCE
    """
    if not name:
        return None

    try:
        return EXPORT_FENCES[name]
    except KeyError:
        raise SegmentEditError(
            ErrorCodes.UNKNOWN_FENCE,
            f"Unknown export fence: {name!r}",
            fence=name,
            allowed=sorted(EXPORT_FENCES),
        ) from None


def export_text(raw_text: str, fence: str | None = None) -> str:
    """
    원문 → 내보내기 텍스트.

    Args:
        raw_text: 템플릿 원문
        fence: 대체 구분자 토큰 (resolve_fence 결과). None이면 구분자 유지

    Returns:
        마커 제거(+ 구분자 치환)된 텍스트
    """
    text = raw_text.replace(READONLY_MARKER, "")
    if fence is not None:
        text = text.replace(OPEN_DELIMITER, fence).replace(CLOSE_DELIMITER, fence)
    return text
