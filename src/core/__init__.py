"""
Core layer: 세그먼트 코덱과 편집 세션.

역할:
- 원문 ↔ 세그먼트 (codec.py, 순수 함수)
- 복사/내보내기 변환 (export.py)
- 편집 중 문서 핸들 (editor.py)
"""

from .codec import decode, decode_block, decode_spans, encode, encode_block
from .editor import EditorMode, EditorSession
from .export import export_text, resolve_fence

__all__ = [
    # codec
    "decode",
    "decode_block",
    "decode_spans",
    "encode",
    "encode_block",
    # editor
    "EditorMode",
    "EditorSession",
    # export
    "export_text",
    "resolve_fence",
]
