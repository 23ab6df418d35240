"""
Editor Session: 편집 중인 문서 하나의 명시적 핸들.

브라우저 에디터의 두 모드:
- raw: 원문 textarea 직접 편집
- enhanced: 세그먼트 단위 편집 (코드 블록 content만 수정 가능)

규칙:
- 세션 하나 = 편집 흐름 하나 (공유/동시 편집 없음)
- enhanced 진입 시 원문을 decode
- enhanced 이탈 시 encode 결과를 원문으로 반영 (편집 유실 방지)
- update_segment는 CodeSegment의 content만 교체
- raw 모드 편집은 대상 블록 바이트만 교체 (다른 세그먼트 원문 그대로)
"""

import logging
from enum import Enum

from src.core.codec import decode, decode_spans, encode, encode_block
from src.core.export import export_text
from src.domain.errors import ErrorCodes, SegmentEditError
from src.domain.segments import CodeSegment, Segment

logger = logging.getLogger(__name__)


class EditorMode(str, Enum):
    """에디터 모드."""
    RAW = "raw"
    ENHANCED = "enhanced"


class EditorSession:
    """
    편집 세션.

    Usage:
        session = EditorSession(template.content, mode=EditorMode.ENHANCED)
        session.update_segment(1, "print(2)")
        store.update(template.id, template.name, session.get_raw_text())
    """

    def __init__(self, initial_content: str = "", mode: EditorMode = EditorMode.RAW):
        """
        Args:
            initial_content: 저장소에서 읽은 원문
            mode: 시작 모드
        """
        self._raw_text = initial_content
        self._mode = EditorMode(mode)
        self._segments: list[Segment] = []
        if self._mode is EditorMode.ENHANCED:
            self._segments = decode(self._raw_text)

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def segments(self) -> list[Segment]:
        """enhanced 모드의 세그먼트 목록 (raw 모드에서는 마지막 decode 결과)."""
        return self._segments

    @property
    def raw_text(self) -> str:
        return self._raw_text

    def set_raw_text(self, text: str) -> None:
        """원문 교체. enhanced 모드면 세그먼트도 다시 decode."""
        self._raw_text = text
        if self._mode is EditorMode.ENHANCED:
            self._segments = decode(text)

    def set_mode(self, mode: EditorMode) -> None:
        """
        모드 전환.

        raw → enhanced: 현재 원문 decode
        enhanced → raw: 현재 세그먼트 encode 결과를 원문으로
        """
        mode = EditorMode(mode)
        if mode is self._mode:
            return

        if mode is EditorMode.ENHANCED:
            self._segments = decode(self._raw_text)
        else:
            self._raw_text = encode(self._segments)

        self._mode = mode

    def toggle_mode(self) -> EditorMode:
        """raw ↔ enhanced 전환 후 새 모드 반환."""
        if self._mode is EditorMode.RAW:
            self.set_mode(EditorMode.ENHANCED)
        else:
            self.set_mode(EditorMode.RAW)
        return self._mode

    def update_segment(self, index: int, content: str) -> CodeSegment:
        """
        코드 블록 하나의 content 교체.

        language, read_only, 다른 세그먼트는 변경하지 않음.

        Args:
            index: 세그먼트 인덱스
            content: 새 코드 본문

        Returns:
            수정된 CodeSegment

        Raises:
            SegmentEditError: SEGMENT_INDEX_OUT_OF_RANGE, SEGMENT_NOT_CODE,
                SEGMENT_READ_ONLY
        """
        spans = []
        if self._mode is not EditorMode.ENHANCED:
            # raw 모드: 현재 원문 기준으로 decode, 대상 블록만 원문에 splice
            spans = decode_spans(self._raw_text)
            self._segments = [span[0] for span in spans]

        if not 0 <= index < len(self._segments):
            raise SegmentEditError(
                ErrorCodes.SEGMENT_INDEX_OUT_OF_RANGE,
                f"Segment index {index} out of range",
                index=index,
                count=len(self._segments),
            )

        segment = self._segments[index]
        if not isinstance(segment, CodeSegment):
            raise SegmentEditError(
                ErrorCodes.SEGMENT_NOT_CODE,
                f"Segment {index} is not a code block",
                index=index,
            )
        if segment.read_only:
            raise SegmentEditError(
                ErrorCodes.SEGMENT_READ_ONLY,
                f"Segment {index} is read-only",
                index=index,
                language=segment.language,
            )

        segment.content = content
        if spans:
            _, start, end = spans[index]
            self._raw_text = self._raw_text[:start] + encode_block(segment) + self._raw_text[end:]

        logger.debug(f"Updated code segment {index} ({segment.language or 'none'})")
        return segment

    def get_raw_text(self) -> str:
        """저장/복사용 최종 원문."""
        if self._mode is EditorMode.RAW:
            return self._raw_text
        return encode(self._segments)

    def export_text(self, fence: str | None = None) -> str:
        """복사용 텍스트 ([readonly] 제거, 선택적 fence 치환)."""
        return export_text(self.get_raw_text(), fence=fence)
