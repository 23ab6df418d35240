"""
Templates layer: 템플릿 저장소 모듈.

역할:
- 템플릿 CRUD (store.py, SQLite)
- 스키마 정의 (schema.py)
"""

from .store import (
    Template,
    TemplateStore,
    validate_template_name,
)

__all__ = [
    "Template",
    "TemplateStore",
    "validate_template_name",
]
