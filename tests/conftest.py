"""
Pytest fixtures for the template editor tests.

구성:
- 경로/설정 fixture
- 템플릿 저장소 fixture (tmp_path의 SQLite)
- 샘플 원문 fixture
"""

from pathlib import Path

import pytest
import yaml

from src.templates.store import TemplateStore

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """테스트용 SQLite 경로 (아직 생성 전)."""
    return tmp_path / "data" / "templates.db"


@pytest.fixture
def store(db_path: Path) -> TemplateStore:
    """초기화된 TemplateStore."""
    template_store = TemplateStore(db_path)
    template_store.initialize()
    return template_store


# =============================================================================
# Content Fixtures
# =============================================================================

@pytest.fixture
def sample_content() -> str:
    """
    텍스트 + 편집 가능 블록 + 읽기 전용 블록.

    decode 결과:
        0: Text("Review this:\\n")
        1: Code(python, editable, "print(1)\\n")
        2: Text("\\nRules:\\n")
        3: Code(text, read-only, "be nice\\n")
    """
    return (
        "Review this:\n"
        "{{{python\nprint(1)\n}}}"
        "\nRules:\n"
        "{{{text [readonly]\nbe nice\n}}}"
    )
