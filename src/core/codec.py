"""
Segment Codec: 템플릿 원문 ↔ 세그먼트 목록.

규칙:
- decode/encode는 순수 함수 (I/O, 공유 상태 없음)
- decode는 어떤 문자열에도 예외를 던지지 않음
  - 닫는 구분자 없음 → 끝까지 코드 블록으로 처리
  - header 줄에 개행 없음 → 본문 전체가 header, content는 ""
  - 빈 문자열 → []
- 코드 본문 안의 }}}는 이스케이프하지 않음 (블록 종료로 해석)
"""

from src.domain.constants import CLOSE_DELIMITER, OPEN_DELIMITER, READONLY_MARKER
from src.domain.segments import CodeSegment, Segment, TextSegment


def decode(text: str) -> list[Segment]:
    """
    원문 → 세그먼트 목록.

    Args:
        text: 템플릿 원문

    Returns:
        TextSegment / CodeSegment 순서 목록 (빈 문자열이면 [])
    """
    return [segment for segment, _, _ in decode_spans(text)]


def decode_spans(text: str) -> list[tuple[Segment, int, int]]:
    """
    원문 → (세그먼트, start, end) 목록.

    text[start:end]는 해당 세그먼트의 원래 바이트 (구분자 포함).
    span들은 겹치지 않고 순서대로 원문 전체를 덮음.
    """
    spans: list[tuple[Segment, int, int]] = []
    cursor = 0

    while cursor < len(text):
        start = text.find(OPEN_DELIMITER, cursor)
        if start == -1:
            spans.append((TextSegment(content=text[cursor:]), cursor, len(text)))
            break

        if start > cursor:
            spans.append((TextSegment(content=text[cursor:start]), cursor, start))

        body_start = start + len(OPEN_DELIMITER)
        end = text.find(CLOSE_DELIMITER, body_start)
        if end == -1:
            # 닫는 구분자 없음: 나머지 전부가 마지막 코드 블록
            spans.append((decode_block(text[body_start:]), start, len(text)))
            break

        cursor = end + len(CLOSE_DELIMITER)
        spans.append((decode_block(text[body_start:end]), start, cursor))

    return spans


def decode_block(body: str) -> CodeSegment:
    """
    코드 블록 본문(구분자 제외) → CodeSegment.

    첫 줄: 언어 태그 + 선택적 [readonly] 마커 (1회만 제거 후 trim)
    나머지: content (trim 없이 그대로)
    """
    header, newline, content = body.partition("\n")
    if not newline:
        content = ""

    read_only = READONLY_MARKER in header
    if read_only:
        header = header.replace(READONLY_MARKER, "", 1)

    return CodeSegment(
        language=header.strip(),
        read_only=read_only,
        content=content,
    )


def encode_block(segment: CodeSegment) -> str:
    """CodeSegment → {{{language [readonly]\\ncontent}}}."""
    marker = f" {READONLY_MARKER}" if segment.read_only else ""
    return f"{OPEN_DELIMITER}{segment.language}{marker}\n{segment.content}{CLOSE_DELIMITER}"


def encode(segments: list[Segment]) -> str:
    """
    세그먼트 목록 → 원문.

    세그먼트 사이에 구분자를 추가하지 않음.

    Args:
        segments: decode() 결과 (편집 후 포함)

    Returns:
        템플릿 원문
    """
    parts = []
    for segment in segments:
        if isinstance(segment, CodeSegment):
            parts.append(encode_block(segment))
        else:
            parts.append(segment.content)
    return "".join(parts)
