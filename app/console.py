"""
터미널 입출력 헬퍼

진행 상황 출력(print)과 input() 기반 대화형 질문을 제공합니다.
"""
from typing import List, Optional, Sequence, Tuple, Union

COLOR_CODES = {
    'cyan': '36', 'green': '32', 'yellow': '33', 'red': '31',
    'blue': '34', 'dim': '2', 'bold': '1',
}

# (값, 표시 문구) 또는 값 문자열
Choice = Union[str, Tuple[str, str]]


class PromptAborted(Exception):
    """사용자가 입력을 중단함 (Ctrl+C / EOF)"""


def color(text: str, name: str) -> str:
    code = COLOR_CODES.get(name)
    return f"\033[{code}m{text}\033[0m" if code else text


def info(msg: str) -> None:
    print(color('  ℹ', 'cyan'), msg)


def success(msg: str) -> None:
    print(color('  ✔', 'green'), msg)


def warn(msg: str) -> None:
    print(color('  ⚠', 'yellow'), msg)


def error(msg: str) -> None:
    print(color('  ✖', 'red'), msg)


def dim(msg: str) -> None:
    print(color(f'  {msg}', 'dim'))


def blank() -> None:
    print('')


def section(title: str) -> None:
    print('')
    print(color(f'  {title}', 'bold'))
    print(color('  ' + '─' * len(title), 'dim'))


def banner() -> None:
    print('')
    print(color('  ✈  flight-dispatcher', 'blue'))
    print(color('  Auto-generate .github/copilot-instructions.md', 'dim'))
    print('')


# ============================================================
# 대화형 질문
# ============================================================

def _read(prompt: str) -> str:
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptAborted('Prompt cancelled by user') from e


def ask_text(message: str, default: str = '', required: bool = False) -> str:
    """한 줄 입력 (빈 입력이면 기본값)"""
    suffix = f' [{default}]' if default else ''
    while True:
        answer = _read(f'  ? {message}{suffix} ').strip() or default
        if answer or not required:
            return answer
        warn('A value is required.')


def ask_confirm(message: str, default: bool = False) -> bool:
    hint = 'Y/n' if default else 'y/N'
    while True:
        answer = _read(f'  ? {message} ({hint}) ').strip().lower()
        if not answer:
            return default
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False
        warn('Please answer y or n.')


def _normalize(choices: Sequence[Choice]) -> List[Tuple[str, str]]:
    return [c if isinstance(c, tuple) else (c, c) for c in choices]


def ask_choice(message: str, choices: Sequence[Choice], default: Optional[str] = None) -> str:
    """번호로 선택 (빈 입력이면 기본값, 기본값이 없으면 첫 항목)"""
    options = _normalize(choices)
    values = [value for value, _ in options]
    default_value = default if default in values else values[0]

    print(f'  ? {message}')
    for idx, (value, label) in enumerate(options, start=1):
        marker = color('›', 'cyan') if value == default_value else ' '
        print(f'    {marker} {idx}) {label}')

    while True:
        answer = _read(f'  Select 1-{len(options)} [{values.index(default_value) + 1}]: ').strip()
        if not answer:
            return default_value
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return values[int(answer) - 1]
        if answer in values:
            return answer
        warn(f'Please enter a number between 1 and {len(options)}.')


def ask_multi_choice(message: str, choices: Sequence[Choice]) -> List[str]:
    """쉼표로 구분된 번호 여러 개 선택 (빈 입력이면 선택 없음)"""
    options = _normalize(choices)
    print(f'  ? {message}')
    for idx, (_, label) in enumerate(options, start=1):
        print(f'      {idx}) {label}')

    while True:
        answer = _read('  Select numbers separated by commas (blank for none): ').strip()
        if not answer:
            return []
        picks = [p.strip() for p in answer.split(',') if p.strip()]
        if all(p.isdigit() and 1 <= int(p) <= len(options) for p in picks):
            selected = sorted({int(p) for p in picks})
            return [options[i - 1][0] for i in selected]
        warn(f'Please enter numbers between 1 and {len(options)}.')


def ask_list(label: str, existing: Optional[Sequence[str]] = None) -> List[str]:
    """한 줄에 하나씩 입력받아 빈 입력에서 종료"""
    items = list(existing or [])
    while True:
        item = _read(f'    {label} {len(items) + 1} (blank to finish): ').strip()
        if not item:
            return items
        items.append(item)
