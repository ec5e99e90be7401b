"""
문서 병합(reconciliation) 모듈

copilot-instructions.md 를 섹션 단위로 파싱하고,
사용자가 직접 수정한 섹션을 유지하면서 새 문서와 병합합니다.
"""

from .section_parser import (
    Section,
    parse_sections,
    build_section_lookup,
    join_sections,
)

from .preserved_extractor import (
    PreservedData,
    extract_preserved_data,
    ABOUT_HEADER,
    ARCHITECTURE_RULES_HEADER,
    PENDING_TODOS_HEADER,
)

from .content_merger import (
    DEFAULT_PRESERVED_SECTIONS,
    merge_documents,
)

from .timestamp_updater import update_timestamp

__all__ = [
    'Section',
    'parse_sections',
    'build_section_lookup',
    'join_sections',
    'PreservedData',
    'extract_preserved_data',
    'ABOUT_HEADER',
    'ARCHITECTURE_RULES_HEADER',
    'PENDING_TODOS_HEADER',
    'DEFAULT_PRESERVED_SECTIONS',
    'merge_documents',
    'update_timestamp',
]
