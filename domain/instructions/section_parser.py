"""
마크다운 섹션 파싱 모듈

헤딩(#~######)을 기준으로 문서를 섹션 목록으로 분리하고,
헤더 이름으로 섹션을 찾는 조회 테이블을 제공합니다.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


# 헤딩 문법: 1~6개의 '#' + 공백/탭 + 제목 (줄 전체)
HEADING_PATTERN = re.compile(r'(#{1,6})[ \t]+(.+)')


@dataclass(frozen=True)
class Section:
    """헤딩으로 구분되는 문서 블록"""
    header: str   # '#'과 앞뒤 공백을 제거한 제목 (문서 내 식별 키)
    level: int    # '#' 개수 (1~6)
    content: str  # 헤딩 줄 + 다음 헤딩 전까지의 본문 (끝 공백 제거)


def match_heading(line: str) -> Optional[re.Match]:
    """줄 전체가 헤딩 문법과 일치하면 Match 반환"""
    return HEADING_PATTERN.fullmatch(line)


def parse_sections(text: str) -> List[Section]:
    """
    문서를 등장 순서대로 섹션 목록으로 파싱

    - 첫 헤딩 이전의 텍스트(preamble)는 버려집니다.
    - 같은 제목의 헤딩이 여러 번 나오면 모두 별도의 섹션으로 반환됩니다.
    - 헤딩이 하나도 없으면 빈 리스트를 반환합니다.
    """
    sections: List[Section] = []
    header: Optional[str] = None
    level = 0
    buffer: List[str] = []

    for line in text.split('\n'):
        m = match_heading(line)
        if m:
            if header is not None:
                sections.append(Section(header, level, '\n'.join(buffer).rstrip()))
            header = m.group(2).strip()
            level = len(m.group(1))
            buffer = [line]
        elif header is not None:
            buffer.append(line)

    if header is not None:
        sections.append(Section(header, level, '\n'.join(buffer).rstrip()))

    return sections


def build_section_lookup(sections: Iterable[Section]) -> Dict[str, Section]:
    """
    헤더 -> 섹션 조회 테이블 생성

    앞에서부터 순서대로 채우므로 중복 헤더는 마지막 섹션이 이깁니다.
    """
    lookup: Dict[str, Section] = {}
    for section in sections:
        lookup[section.header] = section
    return lookup


def join_sections(sections: Iterable[Section]) -> str:
    """섹션 본문을 빈 줄 하나로 연결하고 마지막에 줄바꿈 추가"""
    return '\n\n'.join(s.content for s in sections) + '\n'
