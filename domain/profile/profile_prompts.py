"""
프로필 대화형 설정
"""
from typing import Optional

from app import console
from .schemas import CodeStyle, Profile, utc_now_iso

LANGUAGE_CHOICES = [
    'TypeScript', 'JavaScript', 'Python', 'Go', 'Rust',
    'PHP', 'Ruby', 'Java', 'Kotlin', 'Other',
]

TEST_FRAMEWORK_CHOICES = [
    'Jest', 'Vitest', 'Mocha', 'pytest', 'Go test', 'RSpec', 'PHPUnit', 'None / Not sure',
]
NO_TEST_FRAMEWORK = 'None / Not sure'

COMMENT_STYLE_CHOICES = [
    'Inline comments for complex logic only',
    'JSDoc/docstrings on all public functions',
    'Minimal — self-documenting code preferred',
    'Verbose — comment everything',
]


def show_profile_summary(profile: Profile) -> None:
    """저장된 프로필 요약 출력"""
    style = profile.code_style
    console.section('Developer Profile (loaded from ~/.flight-dispatcher/profile.json)')
    if profile.name:
        console.dim(f'Name:        {profile.name}')
    console.dim(f'Language:    {profile.language_preference}')
    console.dim(
        f'Code style:  {style.indentation}, {style.quotes} quotes, '
        f"{'semicolons' if style.semicolons else 'no semicolons'}"
    )
    console.dim(f'Commits:     {profile.commit_style}')
    console.dim(f'Verbosity:   {profile.verbosity}')
    if profile.test_framework:
        console.dim(f'Tests:       {profile.test_framework}')
    if profile.custom_rules:
        console.dim(f'Custom rules: {len(profile.custom_rules)} rule(s)')
    console.blank()


def prompt_for_profile(existing: Optional[Profile] = None) -> Profile:
    """
    프로필 설정 질문

    Args:
        existing: 기존 프로필 (있으면 각 질문의 기본값으로 사용)
    """
    console.section('Developer Profile Setup')
    console.dim('This is saved globally and reused across all projects.')
    console.blank()

    base = existing.code_style if existing else CodeStyle()
    now = utc_now_iso()

    name = console.ask_text(
        'Your name (optional, used for instructions tone):',
        default=(existing.name or '') if existing else '',
    )
    language = console.ask_choice(
        'Preferred primary language:',
        LANGUAGE_CHOICES,
        default=existing.language_preference if existing else 'TypeScript',
    )
    indentation = console.ask_choice(
        'Indentation style:',
        [('2spaces', '2 spaces'), ('4spaces', '4 spaces'), ('tabs', 'Tabs')],
        default=base.indentation,
    )
    quotes = console.ask_choice(
        'Quote style:',
        [('single', "Single quotes (')"), ('double', 'Double quotes (")')],
        default=base.quotes,
    )
    semicolons = console.ask_confirm('Use semicolons?', default=base.semicolons)
    test_framework = console.ask_choice(
        'Preferred test framework:',
        TEST_FRAMEWORK_CHOICES,
        default=(existing.test_framework if existing else None) or 'Vitest',
    )
    commit_style = console.ask_choice(
        'Git commit style:',
        [
            ('conventional', 'Conventional commits (feat:, fix:, chore:...)'),
            ('freeform', 'Freeform / descriptive'),
        ],
        default=existing.commit_style if existing else 'conventional',
    )
    verbosity = console.ask_choice(
        'Copilot explanation verbosity:',
        [
            ('concise', 'Concise — minimal explanation, focus on code'),
            ('detailed', 'Detailed — explain reasoning and patterns'),
        ],
        default=existing.verbosity if existing else 'concise',
    )
    comment_style = console.ask_choice(
        'Comment style preference:',
        COMMENT_STYLE_CHOICES,
        default=(existing.comment_style if existing else None) or COMMENT_STYLE_CHOICES[0],
    )

    print(console.color('\n  Custom global rules', 'cyan')
          + console.color(' (e.g. "Never use `any` in TypeScript"). One per line, blank to finish:', 'dim'))
    custom_rules = console.ask_list('Rule', existing.custom_rules if existing else None)

    return Profile(
        name=name.strip() or None,
        language_preference=language,
        code_style=CodeStyle(indentation=indentation, quotes=quotes, semicolons=semicolons),
        test_framework=None if test_framework == NO_TEST_FRAMEWORK else test_framework,
        commit_style=commit_style,
        verbosity=verbosity,
        comment_style=comment_style,
        custom_rules=custom_rules,
        created_at=existing.created_at if existing else now,
        updated_at=now,
    )


def offer_profile_edit(profile: Profile) -> Profile:
    """기존 프로필 수정 여부 확인"""
    if console.ask_confirm('Edit developer profile?', default=False):
        return prompt_for_profile(profile)
    return profile
