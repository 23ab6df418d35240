"""Database schema for the template store."""

SCHEMA = """
-- Templates table: 이름별 템플릿 원문 ({{{ }}} 코드 블록 포함)
CREATE TABLE IF NOT EXISTS templates (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""
