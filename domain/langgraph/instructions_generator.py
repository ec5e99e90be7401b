"""
copilot-instructions.md 생성기

프로필, 감지 결과, 질문 응답, 훅 설정을 고정된 섹션 템플릿으로 렌더링합니다.
생성된 문서는 병합 단계에서 정규 템플릿(섹션 구성과 순서의 기준)으로 사용됩니다.
"""
from typing import Iterable, List, Optional

from domain.hooks import HooksConfig, summarize_hooks
from domain.instructions import ABOUT_HEADER, ARCHITECTURE_RULES_HEADER, PENDING_TODOS_HEADER
from domain.profile import Profile
from domain.project import DetectionResult
from .schemas import ProjectAnswers

UPDATE_COMMAND = "flight-dispatcher --update"

# 정규 템플릿 섹션 순서
SECTION_ORDER = [
    ABOUT_HEADER,
    "Developer Preferences",
    "Tech Stack",
    "Project Structure",
    ARCHITECTURE_RULES_HEADER,
    "Copilot Behavior",
    "Deployment",
    "Git Hooks",
    PENDING_TODOS_HEADER,
    "Known Conventions",
]

INDENTATION_LABELS = {"2spaces": "2 spaces", "4spaces": "4 spaces", "tabs": "tabs"}


def render_banner(date: str) -> str:
    return f"> Auto-generated by flight-dispatcher on {date}. Re-run `{UPDATE_COMMAND}` to update."


def _bullets(items: List[str], placeholder: str) -> List[str]:
    # 플레이스홀더는 목록 문법('- ')을 쓰지 않음 (다음 실행에서 규칙으로 추출되지 않도록)
    return [f"- {item}" for item in items] if items else [f"_{placeholder}_"]


def _join(items: Iterable[str]) -> str:
    return ", ".join(items)


# ============================================================
# 섹션별 렌더링
# ============================================================

def _about(answers: ProjectAnswers) -> List[str]:
    return [answers.description or "_No description yet. Describe what this project does._"]


def _developer_preferences(profile: Profile) -> List[str]:
    style = profile.code_style
    lines = []
    if profile.name:
        lines.append(f"- Developer: {profile.name}")
    lines += [
        f"- Preferred language: {profile.language_preference}",
        f"- Indentation: {INDENTATION_LABELS.get(style.indentation, style.indentation)}",
        f"- Quotes: {style.quotes}",
        f"- Semicolons: {'yes' if style.semicolons else 'no'}",
        "- Commit style: "
        + ("Conventional commits (`feat:`, `fix:`, `chore:`...)" if profile.commit_style == "conventional" else "Freeform / descriptive"),
        f"- Explanations: {profile.verbosity}",
    ]
    if profile.test_framework:
        lines.append(f"- Test framework: {profile.test_framework}")
    if profile.comment_style:
        lines.append(f"- Comments: {profile.comment_style}")
    lines += [f"- {rule}" for rule in profile.custom_rules]
    return lines


def _database_line(detected: DetectionResult) -> Optional[str]:
    if detected.has_prisma:
        line = f"Prisma ({detected.prisma_db_provider})" if detected.prisma_db_provider else "Prisma"
        if detected.prisma_models:
            line += f" — models: {_join(detected.prisma_models)}"
        return line
    if detected.has_drizzle:
        return f"Drizzle ORM ({detected.database_type})" if detected.database_type else "Drizzle ORM"
    return detected.database_type


def _tech_stack(detected: DetectionResult) -> List[str]:
    language = detected.primary_language
    if detected.has_typescript and detected.ts_strict_mode:
        language += " (strict mode)"

    tooling = [name for flag, name in [
        (detected.has_eslint, "ESLint"),
        (detected.has_prettier, "Prettier"),
        (detected.has_biome, "Biome"),
    ] if flag]
    other_stacks = (
        detected.python_stack + detected.php_stack + detected.ruby_stack
        + detected.java_stack + detected.go_modules + detected.rust_crates
    )
    i18n = None
    if detected.has_i18n:
        i18n = _join(detected.i18n_locales) or "detected"
        if detected.i18n_default_locale:
            i18n += f" (default: {detected.i18n_default_locale})"

    facts = [
        ("Language", language),
        ("Package manager", detected.package_manager),
        ("Node", detected.node_version),
        ("Frameworks", _join(detected.frameworks)),
        ("Router", f"Next.js {detected.next_router} router" if detected.next_router else None),
        ("Next.js features", _join(detected.next_features)),
        ("UI", _join(detected.ui_libraries)),
        ("Backend", _join(detected.backend_frameworks)),
        ("Database", _database_line(detected)),
        ("Auth", detected.auth_type),
        ("State management", _join(detected.state_management)),
        ("Libraries", _join(detected.libraries)),
        ("Styling", "Tailwind CSS" if detected.has_tailwind else None),
        ("Build tool", detected.build_tool),
        ("Testing", f"{detected.test_runner} ({detected.test_config})" if detected.test_runner and detected.test_config else detected.test_runner),
        ("Linting / formatting", _join(tooling)),
        ("i18n", i18n),
        ("Other", _join(other_stacks)),
    ]
    return [f"- **{label}:** {value}" for label, value in facts if value]


def _project_structure(detected: DetectionResult, answers: ProjectAnswers) -> List[str]:
    lines = [f"- `{entry.path}/` — {entry.description}" for entry in detected.project_structure]
    if detected.is_monorepo:
        lines.append(f"- Monorepo workspaces: {_join(detected.workspaces) or 'detected'}")
        if answers.monorepo_focus:
            lines.append(f"- Main focus: `{answers.monorepo_focus}`")
    if detected.ts_path_aliases:
        lines.append(f"- Path aliases: {_join(f'`{a}`' for a in detected.ts_path_aliases)}")
    return lines or ["_No well-known directories detected._"]


def _copilot_behavior(profile: Profile, detected: DetectionResult, answers: ProjectAnswers) -> List[str]:
    lines = []
    if profile.verbosity == "detailed":
        lines.append("- Explain the reasoning and patterns behind suggestions.")
    else:
        lines.append("- Keep explanations short; focus on code.")
    lines.append(f"- Write code in {detected.primary_language if detected.primary_language != 'Unknown' else profile.language_preference} and match the existing code style.")
    lines.append("- Follow the Architecture Rules above before suggesting structural changes.")

    test_tool = detected.test_runner or profile.test_framework
    if detected.test_runner:
        lines.append(f"- Add or update {test_tool} tests alongside code changes.")
    elif answers.want_tests is False:
        lines.append("- Do not suggest tests unless asked.")
    elif answers.want_tests:
        lines.append(f"- Suggest tests for new code{f' using {test_tool}' if test_tool else ''}.")

    if answers.prisma_schema_command:
        lines.append(f"- Apply Prisma schema changes with `{answers.prisma_schema_command}`.")
    if answers.i18n_default_locale:
        lines.append(f"- Add user-facing strings to the translation files; default locale is `{answers.i18n_default_locale}`.")
    if answers.monorepo_focus:
        lines.append(f"- Prefer changes inside `{answers.monorepo_focus}` unless told otherwise.")
    return lines


def _deployment(detected: DetectionResult, answers: ProjectAnswers) -> List[str]:
    lines = [f"- Target: {answers.deployment_target}"]
    if detected.ci_platforms:
        lines.append(f"- CI/CD: {_join(detected.ci_platforms)}")
    if detected.docker_services:
        lines.append(f"- Docker Compose services: {_join(detected.docker_services)}")
    elif detected.has_docker_compose:
        lines.append("- Docker Compose: detected")
    if detected.env_vars:
        lines.append(f"- Environment variables: {_join(f'`{v}`' for v in detected.env_vars)}")
    return lines


def _known_conventions(profile: Profile, detected: DetectionResult) -> List[str]:
    lines = []
    if detected.commit_style_detected:
        lines.append(f"- Commit history style: {detected.commit_style_detected} (detected from git log)")
    else:
        lines.append(f"- Commit style: {profile.commit_style}")
    if detected.prettier_rules:
        rules = _join(f"`{k}: {v}`" for k, v in detected.prettier_rules.items())
        lines.append(f"- Prettier: {rules}")
    if detected.available_scripts:
        lines.append(f"- npm scripts: {_join(f'`{s}`' for s in detected.available_scripts)}")
    if detected.git_repo_name:
        lines.append(f"- Repository: {detected.git_repo_name}")
    return lines


# ============================================================
# 메인 생성 함수
# ============================================================

def generate_instructions(
    profile: Profile,
    detected: DetectionResult,
    answers: ProjectAnswers,
    hooks_config: HooksConfig,
    date: str,
) -> str:
    """
    정규 템플릿으로 전체 문서 생성

    Returns:
        H1 제목 + 배너 + SECTION_ORDER 순서의 H2 섹션 (마지막 줄바꿈 포함)
    """
    bodies = {
        ABOUT_HEADER: _about(answers),
        "Developer Preferences": _developer_preferences(profile),
        "Tech Stack": _tech_stack(detected),
        "Project Structure": _project_structure(detected, answers),
        ARCHITECTURE_RULES_HEADER: _bullets(answers.architecture_rules, "No architecture rules defined yet."),
        "Copilot Behavior": _copilot_behavior(profile, detected, answers),
        "Deployment": _deployment(detected, answers),
        "Git Hooks": _bullets(summarize_hooks(hooks_config), "No git hooks configured."),
        PENDING_TODOS_HEADER: [f"- [ ] {todo}" for todo in answers.todos] or ["_No pending TODOs._"],
        "Known Conventions": _known_conventions(profile, detected),
    }

    blocks = [f"# Copilot Instructions — {detected.project_name}\n\n{render_banner(date)}"]
    for header in SECTION_ORDER:
        blocks.append(f"## {header}\n\n" + "\n".join(bodies[header]))
    return "\n\n".join(blocks) + "\n"
