#!/usr/bin/env python3
"""
export_template.py - 저장된 템플릿의 복사용 텍스트 출력

에디터의 "Copy Raw Text"와 같은 변환:
1. [readonly] 마커 제거
2. --fence markdown 지정 시 {{{ }}} → ```

사용법:
    # id로 조회
    uv run python scripts/export_template.py --id 3

    # 이름으로 조회 + markdown fence
    uv run python scripts/export_template.py --name "code review" --fence markdown

    # 목록
    uv run python scripts/export_template.py --list
"""

import argparse
import logging
import sys
from pathlib import Path

# src 패키지 임포트를 위한 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.export import export_text, resolve_fence  # noqa: E402
from src.domain.errors import EditorError, ErrorCodes, TemplateError  # noqa: E402
from src.templates.store import Template, TemplateStore  # noqa: E402

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def find_template(store: TemplateStore, template_id: int | None, name: str | None) -> Template:
    """
    id 또는 이름으로 템플릿 조회.

    Raises:
        TemplateError: TEMPLATE_NOT_FOUND
    """
    if template_id is not None:
        return store.get(template_id)

    for template in store.list_templates():
        if template.name == name:
            return template

    raise TemplateError(
        ErrorCodes.TEMPLATE_NOT_FOUND,
        f"Template '{name}' not found",
        name=name,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="저장된 템플릿의 복사용 텍스트 출력",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--id", type=int, dest="template_id", help="템플릿 id")
    target.add_argument("--name", type=str, help="템플릿 이름")
    target.add_argument("--list", action="store_true", help="템플릿 목록 출력")
    parser.add_argument(
        "--db",
        type=str,
        default="data/templates.db",
        help="SQLite 경로 (기본: data/templates.db, 프로젝트 루트 기준)",
    )
    parser.add_argument(
        "--fence",
        type=str,
        default=None,
        help="대체 구분자 (예: markdown)",
    )

    args = parser.parse_args(argv)

    db_path = Path(args.db)
    if not db_path.is_absolute():
        db_path = Path(__file__).parent.parent / db_path

    if not db_path.exists():
        logger.error(f"DB 없음: {db_path}")
        return 1

    store = TemplateStore(db_path)

    if args.list:
        for template in store.list_templates():
            print(f"{template.id}\t{template.name}")
        return 0

    try:
        fence = resolve_fence(args.fence)
        template = find_template(store, args.template_id, args.name)
    except EditorError as e:
        logger.error(f"{e.code}: {e.message}")
        return 1

    sys.stdout.write(export_text(template.content, fence=fence))
    return 0


if __name__ == "__main__":
    exit(main())
