"""
템플릿 저장소: SQLite CRUD.

규칙:
- name은 비어 있을 수 없고 중복 불가 (fail-fast)
- content는 원문 그대로 저장 (세그먼트는 저장하지 않음)
- 연산마다 짧은 커넥션: 성공 시 commit, 실패 시 rollback
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from src.core.editor import EditorMode, EditorSession
from src.domain.constants import TEMPLATE_NAME_MAX_LENGTH
from src.domain.errors import ErrorCodes, TemplateError
from src.templates.schema import SCHEMA

logger = logging.getLogger(__name__)


# =============================================================================
# Validation
# =============================================================================

def validate_template_name(name: Any) -> str:
    """
    템플릿 이름 검증.

    규칙:
    - 문자열
    - 앞뒤 공백 제거 후 비어 있지 않음
    - 최대 200자

    Args:
        name: 검증할 이름

    Returns:
        앞뒤 공백이 제거된 이름

    Raises:
        TemplateError: INVALID_TEMPLATE_NAME
    """
    if not isinstance(name, str):
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            "Template name must be a string",
        )

    name = name.strip()
    if not name:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            "Template name cannot be empty",
        )

    if len(name) > TEMPLATE_NAME_MAX_LENGTH:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            f"Template name exceeds {TEMPLATE_NAME_MAX_LENGTH} characters",
            length=len(name),
        )

    return name


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class Template:
    """저장된 템플릿."""
    id: int
    name: str
    content: str
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Template":
        return cls(
            id=row["id"],
            name=row["name"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


# =============================================================================
# Template Store
# =============================================================================

class TemplateStore:
    """SQLite 기반 템플릿 저장소."""

    def __init__(self, db_path: Path | str):
        """
        Args:
            db_path: SQLite 파일 경로
        """
        self.db_path = Path(db_path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """DB 커넥션 컨텍스트."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize(self) -> None:
        """DB 파일 디렉터리와 스키마 생성 (멱등)."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    # =========================================================================
    # Read
    # =========================================================================

    def list_templates(self) -> list[Template]:
        """전체 템플릿 목록 (id 순)."""
        with self.connection() as conn:
            rows = conn.execute(
                "SELECT id, name, content, created_at, updated_at FROM templates ORDER BY id"
            ).fetchall()
        return [Template.from_row(row) for row in rows]

    def get(self, template_id: int) -> Template:
        """
        템플릿 조회.

        Raises:
            TemplateError: TEMPLATE_NOT_FOUND
        """
        with self.connection() as conn:
            row = conn.execute(
                "SELECT id, name, content, created_at, updated_at FROM templates WHERE id = ?",
                (template_id,),
            ).fetchone()

        if row is None:
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"Template {template_id} not found",
                template_id=template_id,
            )
        return Template.from_row(row)

    # =========================================================================
    # Create / Update / Delete
    # =========================================================================

    def create(self, name: str, content: str) -> Template:
        """
        새 템플릿 저장.

        Args:
            name: 템플릿 이름 (중복 불가)
            content: 원문

        Returns:
            저장된 Template (id 포함)

        Raises:
            TemplateError: INVALID_TEMPLATE_NAME, TEMPLATE_EXISTS
        """
        name = validate_template_name(name)
        now = datetime.now(UTC).isoformat()

        try:
            with self.connection() as conn:
                cursor = conn.execute(
                    """INSERT INTO templates (name, content, created_at, updated_at)
                       VALUES (?, ?, ?, ?)""",
                    (name, content, now, now),
                )
                template_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            logger.warning(f"Template name already exists: {name!r}")
            raise TemplateError(
                ErrorCodes.TEMPLATE_EXISTS,
                f"Template '{name}' already exists",
                name=name,
            ) from e

        logger.info(f"Created template {template_id} ({name!r})")
        return Template(
            id=template_id,
            name=name,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def update(self, template_id: int, name: str, content: str) -> Template:
        """
        템플릿 이름/원문 수정 (updated_at 갱신).

        Raises:
            TemplateError: INVALID_TEMPLATE_NAME, TEMPLATE_NOT_FOUND, TEMPLATE_EXISTS
        """
        name = validate_template_name(name)
        now = datetime.now(UTC).isoformat()

        try:
            with self.connection() as conn:
                cursor = conn.execute(
                    "UPDATE templates SET name = ?, content = ?, updated_at = ? WHERE id = ?",
                    (name, content, now, template_id),
                )
                updated = cursor.rowcount
        except sqlite3.IntegrityError as e:
            logger.warning(f"Template name already exists: {name!r}")
            raise TemplateError(
                ErrorCodes.TEMPLATE_EXISTS,
                f"Template '{name}' already exists",
                name=name,
                template_id=template_id,
            ) from e

        if updated == 0:
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"Template {template_id} not found",
                template_id=template_id,
            )

        logger.info(f"Updated template {template_id} ({name!r})")
        return self.get(template_id)

    def delete(self, template_id: int) -> None:
        """
        템플릿 삭제.

        Raises:
            TemplateError: TEMPLATE_NOT_FOUND
        """
        with self.connection() as conn:
            cursor = conn.execute("DELETE FROM templates WHERE id = ?", (template_id,))
            deleted = cursor.rowcount

        if deleted == 0:
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"Template {template_id} not found",
                template_id=template_id,
            )

        logger.info(f"Deleted template {template_id}")

    # =========================================================================
    # Segment Edit
    # =========================================================================

    def update_segment(self, template_id: int, index: int, content: str) -> Template:
        """
        저장된 원문의 코드 블록 하나만 수정.

        raw 모드 EditorSession으로 대상 블록만 splice → 저장
        (다른 세그먼트의 저장 바이트는 그대로)

        Raises:
            TemplateError: TEMPLATE_NOT_FOUND
            SegmentEditError: SEGMENT_INDEX_OUT_OF_RANGE, SEGMENT_NOT_CODE,
                SEGMENT_READ_ONLY
        """
        template = self.get(template_id)

        session = EditorSession(template.content, mode=EditorMode.RAW)
        session.update_segment(index, content)

        return self.update(template.id, template.name, session.get_raw_text())
