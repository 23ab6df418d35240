"""
App layer: UI/API 서버 (FastAPI + HTMX).

역할:
- 템플릿 CRUD API, 세그먼트 코덱 API
- 템플릿 목록/세그먼트 보기 화면
- ⚠️ 파싱 규칙 없음 (core에 위임)

주의: 폴더 구분
- src/templates/ → 코드 (store.py, 템플릿 저장소)
- data/ (루트) → SQLite 파일
"""
