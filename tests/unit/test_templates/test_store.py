"""
test_store.py - 템플릿 저장소 테스트

검증:
- 이름 필수, 중복 이름 생성/수정 시 에러 (fail-fast)
- content는 원문 그대로 저장
- 없는 id 조회/수정/삭제 → TEMPLATE_NOT_FOUND
- update_segment: 코드 블록 하나만 수정 후 저장
"""

from pathlib import Path

import pytest

from src.domain.errors import ErrorCodes, SegmentEditError, TemplateError
from src.templates.store import (
    Template,
    TemplateStore,
    validate_template_name,
)

# =============================================================================
# validate_template_name 테스트
# =============================================================================


class TestValidateTemplateName:
    """템플릿 이름 검증."""

    def test_valid_name_is_stripped(self):
        assert validate_template_name("  code review  ") == "code review"

    @pytest.mark.parametrize("name", ["", "   ", None, 123])
    def test_invalid_names(self, name):
        with pytest.raises(TemplateError) as exc_info:
            validate_template_name(name)

        assert exc_info.value.code == ErrorCodes.INVALID_TEMPLATE_NAME

    def test_too_long_name(self):
        with pytest.raises(TemplateError) as exc_info:
            validate_template_name("a" * 201)

        assert "200" in exc_info.value.message
        assert exc_info.value.context["length"] == 201

    def test_max_length_name(self):
        assert validate_template_name("a" * 200) == "a" * 200


# =============================================================================
# 초기화
# =============================================================================


class TestInitialize:
    """스키마 생성."""

    def test_creates_parent_directory(self, db_path: Path):
        store = TemplateStore(db_path)

        store.initialize()

        assert db_path.exists()

    def test_initialize_is_idempotent(self, store: TemplateStore):
        store.create("a", "x")

        store.initialize()

        assert [t.name for t in store.list_templates()] == ["a"]


# =============================================================================
# CRUD
# =============================================================================


class TestCreate:
    """템플릿 생성."""

    def test_create_returns_template(self, store: TemplateStore):
        template = store.create("greeting", "Hello {{{py\nprint(1)}}}")

        assert isinstance(template, Template)
        assert template.id > 0
        assert template.name == "greeting"
        assert template.content == "Hello {{{py\nprint(1)}}}"
        assert template.created_at == template.updated_at != ""

    def test_content_stored_verbatim(self, store: TemplateStore):
        """비정규 원문도 그대로 저장 (decode/encode 하지 않음)."""
        raw = "{{{  python[readonly]\nunterminated"

        template = store.create("raw", raw)

        assert store.get(template.id).content == raw

    def test_empty_content_allowed(self, store: TemplateStore):
        assert store.create("empty", "").content == ""

    def test_duplicate_name_rejected(self, store: TemplateStore):
        store.create("dup", "a")

        with pytest.raises(TemplateError) as exc_info:
            store.create("dup", "b")

        assert exc_info.value.code == ErrorCodes.TEMPLATE_EXISTS
        assert len(store.list_templates()) == 1

    def test_empty_name_rejected(self, store: TemplateStore):
        with pytest.raises(TemplateError) as exc_info:
            store.create("", "a")

        assert exc_info.value.code == ErrorCodes.INVALID_TEMPLATE_NAME


class TestRead:
    """템플릿 조회."""

    def test_list_is_ordered_by_id(self, store: TemplateStore):
        store.create("b", "")
        store.create("a", "")

        assert [t.name for t in store.list_templates()] == ["b", "a"]

    def test_list_empty(self, store: TemplateStore):
        assert store.list_templates() == []

    def test_get_not_found(self, store: TemplateStore):
        with pytest.raises(TemplateError) as exc_info:
            store.get(999)

        assert exc_info.value.code == ErrorCodes.TEMPLATE_NOT_FOUND
        assert exc_info.value.context["template_id"] == 999

    def test_to_dict(self, store: TemplateStore):
        template = store.create("t", "c")

        assert store.get(template.id).to_dict() == {
            "id": template.id,
            "name": "t",
            "content": "c",
            "created_at": template.created_at,
            "updated_at": template.updated_at,
        }


class TestUpdate:
    """템플릿 수정."""

    def test_update_name_and_content(self, store: TemplateStore):
        template = store.create("old", "a")

        updated = store.update(template.id, "new", "b")

        assert updated.name == "new"
        assert updated.content == "b"
        assert updated.created_at == template.created_at
        assert updated.updated_at >= template.updated_at

    def test_update_not_found(self, store: TemplateStore):
        with pytest.raises(TemplateError) as exc_info:
            store.update(42, "x", "y")

        assert exc_info.value.code == ErrorCodes.TEMPLATE_NOT_FOUND

    def test_update_to_existing_name(self, store: TemplateStore):
        store.create("taken", "")
        template = store.create("mine", "keep")

        with pytest.raises(TemplateError) as exc_info:
            store.update(template.id, "taken", "changed")

        assert exc_info.value.code == ErrorCodes.TEMPLATE_EXISTS
        assert store.get(template.id).content == "keep"

    def test_update_keeps_same_name(self, store: TemplateStore):
        template = store.create("same", "a")

        assert store.update(template.id, "same", "b").content == "b"


class TestDelete:
    """템플릿 삭제."""

    def test_delete(self, store: TemplateStore):
        template = store.create("gone", "")

        store.delete(template.id)

        assert store.list_templates() == []

    def test_delete_not_found(self, store: TemplateStore):
        with pytest.raises(TemplateError) as exc_info:
            store.delete(7)

        assert exc_info.value.code == ErrorCodes.TEMPLATE_NOT_FOUND

    def test_name_reusable_after_delete(self, store: TemplateStore):
        template = store.create("again", "")
        store.delete(template.id)

        assert store.create("again", "x").name == "again"


# =============================================================================
# update_segment
# =============================================================================


class TestUpdateSegment:
    """저장된 원문의 코드 블록 수정."""

    def test_updates_code_block(self, store: TemplateStore, sample_content: str):
        template = store.create("review", sample_content)

        updated = store.update_segment(template.id, 1, "print(2)\n")

        assert updated.content == sample_content.replace("print(1)", "print(2)")
        assert store.get(template.id).content == updated.content

    def test_read_only_block_rejected(self, store: TemplateStore, sample_content: str):
        template = store.create("review", sample_content)

        with pytest.raises(SegmentEditError) as exc_info:
            store.update_segment(template.id, 3, "x")

        assert exc_info.value.code == ErrorCodes.SEGMENT_READ_ONLY
        assert store.get(template.id).content == sample_content

    def test_missing_template(self, store: TemplateStore):
        with pytest.raises(TemplateError) as exc_info:
            store.update_segment(1, 0, "x")

        assert exc_info.value.code == ErrorCodes.TEMPLATE_NOT_FOUND

    def test_non_canonical_neighbours_keep_stored_bytes(self, store: TemplateStore):
        """대상 블록만 교체, 비정규 이웃 블록의 저장 바이트는 그대로."""
        raw = "{{{sql[readonly]\nSELECT 1}}}mid{{{py\nx}}}tail{{{note}}}"
        template = store.create("mixed", raw)

        updated = store.update_segment(template.id, 2, "y")

        assert updated.content == "{{{sql[readonly]\nSELECT 1}}}mid{{{py\ny}}}tail{{{note}}}"

    def test_unterminated_neighbour_stays_open(self, store: TemplateStore):
        """뒤쪽 미종결 블록은 닫히지 않음."""
        template = store.create("open", "{{{py\nx}}} {{{draft\nwip")

        updated = store.update_segment(template.id, 0, "z")

        assert updated.content == "{{{py\nz}}} {{{draft\nwip"
