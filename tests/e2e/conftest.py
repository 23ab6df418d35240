"""
E2E 테스트용 FastAPI TestClient 설정.

- TEMPLATES_DB_PATH를 tmp_path로 지정해 테스트마다 빈 DB 사용
- lifespan 실행을 위해 컨텍스트 매니저로 TestClient 생성
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.main import app
from src.domain.constants import DB_PATH_ENV_VAR


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """빈 DB를 가진 FastAPI TestClient."""
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(tmp_path / "api" / "templates.db"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def created_template(client: TestClient, sample_content: str) -> dict:
    """샘플 원문으로 생성한 템플릿."""
    response = client.post(
        "/api/templates",
        json={"name": "code review", "content": sample_content},
    )
    assert response.status_code == 200
    return response.json()
