"""
배너 타임스탬프 갱신
"""

import re

BANNER_PATTERN = re.compile(r'(> Auto-generated by flight-dispatcher on ).+?(\. Re-run)')


def update_timestamp(content: str, date: str) -> str:
    """배너의 날짜 부분만 교체 (첫 번째 배너만, 없으면 원문 그대로)"""
    return BANNER_PATTERN.sub(lambda m: f"{m.group(1)}{date}{m.group(2)}", content, count=1)
