"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app --host 0.0.0.0 --port 7979
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routes
from src.app.routes import segments, templates
from src.domain.constants import DB_PATH_ENV_VAR, DEFAULT_DB_PATH
from src.templates.store import TemplateStore

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_db_path(config: dict) -> Path:
    """
    SQLite 경로 결정.

    우선순위: 환경변수 TEMPLATES_DB_PATH > database.path > 기본값
    상대 경로는 프로젝트 루트 기준.
    """
    raw_path = os.getenv(DB_PATH_ENV_VAR) or config.get("database", {}).get("path") or DEFAULT_DB_PATH
    db_path = Path(raw_path)
    if not db_path.is_absolute():
        db_path = PROJECT_ROOT / db_path
    return db_path


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    src 패키지 로거 설정.

    핸들러가 없으면 StreamHandler 1개 추가 (재호출 시 중복 없음).
    """
    package_logger = logging.getLogger("src")
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        package_logger.addHandler(handler)

    return package_logger


config = load_config()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 로그 레벨 적용, 템플릿 DB 초기화
    종료 시: 정리할 리소스 없음 (커넥션은 연산 단위)
    """
    # Startup
    app.state.config = load_config()

    configure_logging(app.state.config.get("logging", {}).get("level", "INFO"))

    store = TemplateStore(resolve_db_path(app.state.config))
    store.initialize()
    app.state.template_store = store
    logger.info(f"Template store ready: {store.db_path}")

    yield

    # Shutdown


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title=config.get("app", {}).get("title", "Template Editor"),
    description="{{{ }}} 코드 블록을 포함한 텍스트 템플릿 편집/저장",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("cors", {}).get("allow_origins", ["http://localhost:3000"]),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(templates.router, prefix="/templates", tags=["Templates"])

# API 라우트
app.include_router(
    templates.api_router, prefix="/api/templates", tags=["Templates API"]
)
app.include_router(segments.api_router, prefix="/api/segments", tags=["Segments API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """엔드포인트 안내."""
    return {
        "message": "Template Editor",
        "endpoints": {
            "templates": "/templates",
            "templates_api": "/api/templates",
            "segments_api": "/api/segments",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server = config.get("server", {})
    uvicorn.run(
        "src.app.main:app",
        host=server.get("host", "127.0.0.1"),
        port=server.get("port", 7979),
        reload=True,
    )
