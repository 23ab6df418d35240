"""
Domain Constants: 템플릿 원문(raw text) 포맷 상수.

저장된 템플릿 content의 wire format 일부이므로
값을 바꾸려면 저장 데이터 마이그레이션이 먼저 필요함.
"""

# =============================================================================
# Code Block Delimiters (코드 블록 구분자)
# =============================================================================
# 예:
#   앞 텍스트{{{python [readonly]
#   print(1)}}}뒤 텍스트
#
# - 첫 줄(header): 언어 태그 + 선택적 [readonly] 마커
# - 나머지: 코드 본문 (그대로 보존)

OPEN_DELIMITER = "{{{"
CLOSE_DELIMITER = "}}}"
READONLY_MARKER = "[readonly]"

# =============================================================================
# Segment Types (세그먼트 타입, JSON "type" 값)
# =============================================================================

SEGMENT_TYPE_TEXT = "text"
SEGMENT_TYPE_CODE = "code"

# =============================================================================
# Export Fences (복사/내보내기용 대체 구분자)
# =============================================================================
# 원문 저장에는 사용하지 않음. export_text()에서만 적용.

EXPORT_FENCES = {
    "markdown": "```",
}

# =============================================================================
# Template Store
# =============================================================================

TEMPLATE_NAME_MAX_LENGTH = 200
DEFAULT_DB_PATH = "data/templates.db"
DB_PATH_ENV_VAR = "TEMPLATES_DB_PATH"
