"""
프로젝트 질문 모듈

감지 결과와 기존 문서에서 추출한 데이터를 기본값으로 사용하여
프로젝트 설명, 배포 대상, 아키텍처 규칙, TODO 등을 질문합니다.
"""
from typing import Optional

from app import console
from domain.instructions import PreservedData
from domain.project import DetectionResult
from .schemas import DispatchFlags, ProjectAnswers

DEPLOY_CHOICES = [
    'Vercel',
    'VPS / Linux server',
    'Docker / Docker Compose',
    'Railway',
    'Fly.io',
    'Netlify',
    'Cloudflare Pages / Workers',
    'AWS',
    'GCP',
    'Azure',
    'Not sure yet',
]

ALL_WORKSPACES = 'All workspaces equally'


def default_deployment_target(detected: DetectionResult) -> Optional[str]:
    """감지된 플랫폼 기반 배포 대상 기본값"""
    for platform in ('Vercel', 'Railway', 'Fly.io', 'Netlify'):
        if platform in detected.ci_platforms:
            return platform
    if detected.has_docker_compose:
        return 'Docker / Docker Compose'
    return None


def ask_project_questions(
    detected: DetectionResult,
    flags: DispatchFlags,
    preserved: Optional[PreservedData] = None,
) -> ProjectAnswers:
    """
    프로젝트 질문

    Args:
        detected: 프로젝트 감지 결과
        flags: CLI 플래그 (silent 이면 질문 없이 기존 값 사용)
        preserved: 기존 문서에서 추출한 데이터

    Returns:
        ProjectAnswers
    """
    preserved = preserved or PreservedData()

    if flags.silent:
        return ProjectAnswers(
            description=preserved.description,
            deployment_target='Unknown',
            architecture_rules=list(preserved.architecture_rules),
            todos=list(preserved.todos),
        )

    console.section('Project Questions')
    console.dim('Answer a few questions to improve the generated instructions.')
    console.blank()

    # 1. 프로젝트 설명
    description = console.ask_text(
        'What does this project do? (1–2 sentences):',
        default=preserved.description,
        required=True,
    )

    # 2. 배포 대상
    deployment_target = console.ask_choice(
        'What is the deployment target?',
        DEPLOY_CHOICES,
        default=default_deployment_target(detected) or 'Not sure yet',
    )

    # 3. 아키텍처 규칙 (기존 규칙에 이어서 추가)
    print(console.color('\n  Architecture rules', 'cyan')
          + console.color(' Copilot must always follow. One per line, blank to finish:', 'dim'))
    architecture_rules = console.ask_list('Rule', preserved.architecture_rules)

    answers = ProjectAnswers(
        description=description,
        deployment_target=deployment_target,
        architecture_rules=architecture_rules,
    )

    # 조건부: Prisma
    if detected.has_prisma:
        answers.prisma_schema_command = console.ask_text(
            'How do you apply Prisma schema changes?',
            default='npx prisma db push --accept-data-loss',
        )

    # 조건부: i18n 기본 로케일
    if detected.has_i18n and detected.i18n_locales and not detected.i18n_default_locale:
        answers.i18n_default_locale = console.ask_choice(
            'What is the default locale?',
            detected.i18n_locales,
        )
    else:
        answers.i18n_default_locale = detected.i18n_default_locale

    # 조건부: 모노레포 워크스페이스
    if detected.is_monorepo and detected.workspaces:
        focus = console.ask_choice(
            'Which workspace is the main focus?',
            detected.workspaces + [ALL_WORKSPACES],
        )
        answers.monorepo_focus = None if focus == ALL_WORKSPACES else focus

    # 조건부: 테스트 프레임워크 없음
    if not detected.test_runner:
        answers.want_tests = console.ask_confirm(
            'No test framework detected. Should Copilot suggest tests?',
            default=True,
        )

    # 4. TODO (기존 TODO 섹션은 병합 단계에서 그대로 유지됨)
    print(console.color('\n  Pending TODOs', 'cyan')
          + console.color(' to add to the instructions. One per line, blank to finish:', 'dim'))
    if flags.update and preserved.todos:
        console.dim('(Existing TODOs preserved — add new ones below)')
    answers.todos = console.ask_list('TODO')

    return answers
