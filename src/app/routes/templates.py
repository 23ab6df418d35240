"""
Templates Routes: 템플릿 관리.

- GET /templates → 템플릿 관리 화면
- GET /templates/<id> → 세그먼트 보기 화면 (enhanced)
- API: CRUD + 세그먼트 조회/수정 + 내보내기
"""

import html
import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request, Response
from fastapi.responses import HTMLResponse

from src.core.codec import decode
from src.core.export import export_text, resolve_fence
from src.domain.errors import EditorError, ErrorCodes, SegmentEditError, TemplateError
from src.domain.segments import CodeSegment, segments_to_list
from src.templates.store import TemplateStore

logger = logging.getLogger(__name__)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def get_template_store(request: Request) -> TemplateStore:
    """Request에서 TemplateStore 가져오기."""
    return request.app.state.template_store


def to_http_exception(e: EditorError) -> HTTPException:
    """EditorError → HTTPException (NOT_FOUND는 404, 나머지 400)."""
    status_code = 404 if e.code == ErrorCodes.TEMPLATE_NOT_FOUND else 400
    logger.warning(f"Request rejected: {e}")
    return HTTPException(status_code=status_code, detail={"code": e.code, "message": e.message})


def _require_content(payload: dict[str, Any]) -> str:
    content = payload.get("content", "")
    if not isinstance(content, str):
        raise TemplateError(ErrorCodes.INVALID_INPUT, "content must be a string")
    return content


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("", response_class=HTMLResponse)
async def templates_page(request: Request) -> HTMLResponse:
    """템플릿 관리 화면."""
    return HTMLResponse(content="""
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>템플릿 관리</title>
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
</head>
<body>
    <div class="container">
        <header>
            <h1>📋 템플릿 관리</h1>
        </header>

        <div id="template-list"
             hx-get="/templates/fragments/list"
             hx-trigger="load"
             hx-swap="innerHTML">
            로딩 중...
        </div>
    </div>
</body>
</html>
    """)


@router.get("/fragments/list", response_class=HTMLResponse)
async def template_list_fragment(request: Request) -> HTMLResponse:
    """
    템플릿 목록 (HTML 조각).

    HTMX용 부분 렌더링.
    """
    templates = get_template_store(request).list_templates()

    if not templates:
        return HTMLResponse(content="<p class='empty'>등록된 템플릿이 없습니다.</p>")

    html_parts = ["<ul class='template-list'>"]
    for template in templates:
        html_parts.append(f"""
        <li>
            <a href="/templates/{template.id}">{html.escape(template.name)}</a>
            <small>{html.escape(template.updated_at)}</small>
        </li>
        """)
    html_parts.append("</ul>")

    return HTMLResponse(content="".join(html_parts))


@router.get("/{template_id}", response_class=HTMLResponse)
async def template_detail_page(request: Request, template_id: int) -> HTMLResponse:
    """
    템플릿 세그먼트 보기 화면.

    - 텍스트: 그대로 (pre-wrap)
    - 읽기 전용 코드 블록: <pre>
    - 편집 가능 코드 블록: <textarea> 폼 (hx-put → PUT /api/templates/{id}/segments/{index})
    """
    try:
        template = get_template_store(request).get(template_id)
    except TemplateError as e:
        raise to_http_exception(e) from e

    blocks = []
    for index, segment in enumerate(decode(template.content)):
        content = html.escape(segment.content)
        if not isinstance(segment, CodeSegment):
            blocks.append(f'<div class="segment-text" style="white-space: pre-wrap">{content}</div>')
            continue

        label = html.escape(segment.language or "none")
        if segment.read_only:
            blocks.append(
                f'<div class="segment-code"><p><em>Language: {label} (read-only)</em></p>'
                f"<pre>{content}</pre></div>"
            )
        else:
            # textarea 직후 개행 1개는 HTML 파서가 버림: content 앞 개행 보존용
            blocks.append(
                f'<form class="segment-code" hx-put="/api/templates/{template.id}/segments/{index}"'
                ' hx-ext="json-enc" hx-swap="none">'
                f"<p><em>Language: {label}</em></p>"
                f'<textarea name="content" data-index="{index}">\n{content}</textarea>'
                '<button type="submit">저장</button></form>'
            )

    return HTMLResponse(content=f"""
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(template.name)}</title>
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
    <script src="https://unpkg.com/htmx.org@1.9.10/dist/ext/json-enc.js"></script>
</head>
<body>
    <div class="container">
        <header>
            <h1>{html.escape(template.name)}</h1>
            <a href="/templates">← 목록</a>
        </header>
        {"".join(blocks)}
    </div>
</body>
</html>
    """)


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_templates(request: Request) -> list[dict[str, Any]]:
    """템플릿 목록."""
    return [template.to_dict() for template in get_template_store(request).list_templates()]


@api_router.post("")
async def create_template(
    request: Request,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """
    템플릿 등록.

    Body: {"name": "...", "content": "..."}
    """
    try:
        content = _require_content(payload)
        template = get_template_store(request).create(payload.get("name"), content)
        return template.to_dict()
    except TemplateError as e:
        raise to_http_exception(e) from e


@api_router.get("/{template_id}")
async def get_template(request: Request, template_id: int) -> dict[str, Any]:
    """템플릿 상세 조회."""
    try:
        return get_template_store(request).get(template_id).to_dict()
    except TemplateError as e:
        raise to_http_exception(e) from e


@api_router.put("/{template_id}", status_code=204)
async def update_template(
    request: Request,
    template_id: int,
    payload: dict[str, Any] = Body(...),
) -> Response:
    """
    템플릿 수정.

    Body: {"name": "...", "content": "..."}
    """
    try:
        content = _require_content(payload)
        get_template_store(request).update(template_id, payload.get("name"), content)
    except TemplateError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)


@api_router.delete("/{template_id}", status_code=204)
async def delete_template(request: Request, template_id: int) -> Response:
    """템플릿 삭제."""
    try:
        get_template_store(request).delete(template_id)
    except TemplateError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)


@api_router.get("/{template_id}/segments")
async def get_template_segments(request: Request, template_id: int) -> dict[str, Any]:
    """템플릿 원문을 세그먼트로 decode."""
    try:
        template = get_template_store(request).get(template_id)
    except TemplateError as e:
        raise to_http_exception(e) from e

    return {
        "template_id": template.id,
        "segments": segments_to_list(decode(template.content)),
    }


@api_router.put("/{template_id}/segments/{index}")
async def update_template_segment(
    request: Request,
    template_id: int,
    index: int,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """
    코드 블록 하나의 content 수정 후 저장.

    Body: {"content": "..."}
    """
    try:
        content = _require_content(payload)
        template = get_template_store(request).update_segment(template_id, index, content)
    except (TemplateError, SegmentEditError) as e:
        raise to_http_exception(e) from e

    return {
        "template_id": template.id,
        "content": template.content,
    }


@api_router.get("/{template_id}/export")
async def export_template(
    request: Request,
    template_id: int,
    fence: str | None = None,
) -> dict[str, Any]:
    """
    복사용 텍스트.

    [readonly] 마커 제거, fence=markdown이면 {{{ }}} → ```
    """
    try:
        fence_token = resolve_fence(fence)
        template = get_template_store(request).get(template_id)
    except (TemplateError, SegmentEditError) as e:
        raise to_http_exception(e) from e

    return {
        "template_id": template.id,
        "text": export_text(template.content, fence=fence_token),
    }
