"""
문서 병합 모듈

기존 문서와 새로 생성된 문서를 섹션 단위로 병합합니다.

병합 규칙:
    - 섹션 순서는 항상 새 문서(정규 템플릿)를 따릅니다.
    - 보존 대상 섹션은 기존 문서에 있으면 기존 내용을 그대로 사용합니다.
    - 나머지 섹션은 새로 생성된 내용으로 교체합니다.
    - 새 템플릿에 없는 기존 섹션(사용자 추가 섹션)은 맨 뒤에 붙입니다.
"""

from typing import AbstractSet, List

from .preserved_extractor import ABOUT_HEADER, ARCHITECTURE_RULES_HEADER, PENDING_TODOS_HEADER
from .section_parser import Section, build_section_lookup, join_sections, parse_sections


DEFAULT_PRESERVED_SECTIONS = frozenset({
    ABOUT_HEADER,
    PENDING_TODOS_HEADER,
    ARCHITECTURE_RULES_HEADER,
})


def merge_documents(
    existing_content: str,
    new_content: str,
    preserved_headers: AbstractSet[str] = DEFAULT_PRESERVED_SECTIONS,
) -> str:
    """
    기존 문서와 새 문서를 병합

    Args:
        existing_content: 이전에 기록된 문서 (없으면 빈 문자열)
        new_content: 이번 실행에서 생성된 문서
        preserved_headers: 기존 내용을 유지할 섹션 헤더 집합

    Returns:
        병합된 문서 (섹션 사이 빈 줄 하나, 마지막 줄바꿈 포함)
    """
    existing_sections = parse_sections(existing_content or '')
    new_sections = parse_sections(new_content or '')
    existing_lookup = build_section_lookup(existing_sections)

    final_sections: List[Section] = []
    for section in new_sections:
        if section.header in preserved_headers:
            final_sections.append(existing_lookup.get(section.header, section))
        else:
            final_sections.append(section)

    # 템플릿에 없는 사용자 추가 섹션
    template_headers = {s.header for s in new_sections}
    for section in existing_sections:
        if section.header not in template_headers:
            final_sections.append(section)

    return join_sections(final_sections)
