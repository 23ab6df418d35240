"""
Segments Routes: 저장소 없는 코덱 API.

- POST /api/segments/decode → 원문 → 세그먼트
- POST /api/segments/encode → 세그먼트 → 원문
- POST /api/segments/export → 복사용 텍스트
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from src.app.routes.templates import to_http_exception
from src.core.codec import decode, encode
from src.core.export import export_text, resolve_fence
from src.domain.errors import ErrorCodes, SegmentEditError
from src.domain.segments import segments_from_list, segments_to_list

api_router = APIRouter()


def _require_text(payload: dict[str, Any]) -> str:
    text = payload.get("text", "")
    if not isinstance(text, str):
        raise HTTPException(
            status_code=400,
            detail={"code": ErrorCodes.INVALID_INPUT, "message": "text must be a string"},
        )
    return text


@api_router.post("/decode")
async def decode_segments(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Body: {"text": "..."}"""
    return {"segments": segments_to_list(decode(_require_text(payload)))}


@api_router.post("/encode")
async def encode_segments(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Body: {"segments": [...]}"""
    try:
        segments = segments_from_list(payload.get("segments", []))
    except SegmentEditError as e:
        raise to_http_exception(e) from e

    return {"text": encode(segments)}


@api_router.post("/export")
async def export_segments(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Body: {"text": "...", "fence": "markdown" | null}"""
    text = _require_text(payload)
    try:
        fence_token = resolve_fence(payload.get("fence"))
    except SegmentEditError as e:
        raise to_http_exception(e) from e

    return {"text": export_text(text, fence=fence_token)}
