"""
Git 훅 스크립트 생성 모듈

선택된 훅을 트리거별로 묶어 .git/hooks/<trigger> 셸 스크립트로 기록합니다.
"""
from pathlib import Path
from typing import Dict, List, Union

from app.logging_config import get_logger
from .schemas import HookEntry, HooksConfig, PresetHook

logger = get_logger("hook_writer")

PRESET_HOOKS: List[PresetHook] = [
    PresetHook(trigger="pre-push", label="Build before push", command="npm run build", requires_script="build"),
    PresetHook(trigger="pre-commit", label="Lint before commit", command="npm run lint", requires_script="lint"),
    PresetHook(trigger="pre-push", label="Run tests before push", command="npm run test", requires_script="test"),
    PresetHook(trigger="pre-commit", label="Type-check before commit", command="npx tsc --noEmit"),
    PresetHook(trigger="pre-commit", label="Format files before commit", command="npm run format", requires_script="format"),
    PresetHook(trigger="pre-push", label="Security audit before push", command="npm audit --audit-level=high"),
    PresetHook(
        trigger="pre-commit",
        label="Run database migrations before commit",
        command="npm run db:migrate",
        requires_script="db:migrate",
    ),
]


def relevant_presets(available_scripts: List[str]) -> List[PresetHook]:
    """필요한 npm 스크립트가 있는 프리셋만"""
    return [p for p in PRESET_HOOKS if not p.requires_script or p.requires_script in available_scripts]


def generate_hook_script(trigger: str, entries: List[HookEntry]) -> str:
    """트리거 하나에 대한 /bin/sh 스크립트"""
    block_word = {"pre-push": "Push", "pre-commit": "Commit"}.get(trigger, "Operation")

    lines = [
        "#!/bin/sh",
        f"# Generated by flight-dispatcher — {trigger}",
        "# Re-run `flight-dispatcher --update` to regenerate",
        "",
    ]
    for entry in entries:
        lines += [
            f"# ── {entry.label} ──",
            f'echo "Running: {entry.label}..."',
            entry.command,
            "if [ $? -ne 0 ]; then",
            '  echo ""',
            f'  echo "✖  {entry.label} failed. {block_word} aborted."',
            "  exit 1",
            "fi",
            "",
        ]
    lines.append("exit 0")
    return "\n".join(lines) + "\n"


def write_hooks(config: HooksConfig, repo_dir: Union[str, Path]) -> List[Path]:
    """
    훅 파일 기록

    Args:
        config: 선택된 훅 목록
        repo_dir: git 저장소 루트

    Returns:
        기록된 훅 파일 경로 목록 (.git/hooks 가 없으면 빈 리스트)
    """
    if not config.hooks:
        return []

    hooks_dir = Path(repo_dir) / ".git" / "hooks"
    if not hooks_dir.is_dir():
        logger.warning(".git/hooks not found, skipping hook generation", extra={"repo_dir": str(repo_dir)})
        return []

    # 트리거별 그룹 (첫 등장 순서 유지)
    by_trigger: Dict[str, List[HookEntry]] = {}
    for hook in config.hooks:
        by_trigger.setdefault(hook.trigger, []).append(hook)

    written = []
    for trigger, entries in by_trigger.items():
        hook_path = hooks_dir / trigger
        hook_path.write_text(generate_hook_script(trigger, entries), encoding="utf-8")
        hook_path.chmod(0o755)
        logger.info("Git hook written", extra={"trigger": trigger, "hooks": len(entries)})
        written.append(hook_path)
    return written


def summarize_hooks(config: HooksConfig) -> List[str]:
    """문서의 Git Hooks 섹션용 요약"""
    return [f"`{h.trigger}`: {h.label} (`{h.command}`)" for h in config.hooks]
