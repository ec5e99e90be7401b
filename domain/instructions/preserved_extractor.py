"""
보존 데이터 추출 모듈

기존 문서에서 사용자가 직접 작성한 정보(프로젝트 설명, 아키텍처 규칙, TODO)를
추출하여 다음 실행의 질문 단계에 초기값으로 넘겨줍니다.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .section_parser import Section, build_section_lookup, parse_sections


ABOUT_HEADER = 'About This Project'
ARCHITECTURE_RULES_HEADER = 'Architecture Rules'
PENDING_TODOS_HEADER = 'Pending TODOs'

RULE_PREFIX = '- '
TODO_PATTERN = re.compile(r'^- \[[ x]\]\s*(.+)$')


@dataclass(frozen=True)
class PreservedData:
    """기존 문서에서 추출한 사용자 작성 데이터"""
    description: str = ''
    architecture_rules: Tuple[str, ...] = ()
    todos: Tuple[str, ...] = ()


def _section_lines(section: Optional[Section]) -> List[str]:
    return section.content.split('\n') if section else []


def extract_description(section: Optional[Section]) -> str:
    """헤딩 줄을 제외한 본문"""
    return '\n'.join(_section_lines(section)[1:]).strip()


def extract_rules(section: Optional[Section]) -> Tuple[str, ...]:
    """'- '로 시작하는 목록 항목"""
    rules = []
    for line in _section_lines(section):
        stripped = line.strip()
        if stripped.startswith(RULE_PREFIX):
            rules.append(stripped[len(RULE_PREFIX):].strip())
    return tuple(rules)


def extract_todos(section: Optional[Section]) -> Tuple[str, ...]:
    """'- [ ] text' / '- [x] text' 체크박스 항목"""
    todos = []
    for line in _section_lines(section):
        m = TODO_PATTERN.match(line.strip())
        if m and m.group(1).strip():
            todos.append(m.group(1).strip())
    return tuple(todos)


def extract_preserved_data(existing_content: str) -> PreservedData:
    """기존 문서에서 About / Architecture Rules / Pending TODOs 데이터 추출"""
    lookup = build_section_lookup(parse_sections(existing_content))
    return PreservedData(
        description=extract_description(lookup.get(ABOUT_HEADER)),
        architecture_rules=extract_rules(lookup.get(ARCHITECTURE_RULES_HEADER)),
        todos=extract_todos(lookup.get(PENDING_TODOS_HEADER)),
    )
