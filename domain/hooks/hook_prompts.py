"""
Git 훅 선택 질문
"""
from typing import List

from app import console
from .hook_writer import relevant_presets
from .schemas import HookEntry, HooksConfig

CUSTOM_HOOK_CHOICE = "__custom__"

TRIGGER_CHOICES = [
    ("pre-commit", "pre-commit  (before every git commit)"),
    ("pre-push", "pre-push    (before every git push)"),
    ("commit-msg", "commit-msg  (validate commit message)"),
    ("post-merge", "post-merge  (after git merge/pull)"),
    ("post-checkout", "post-checkout (after branch switch)"),
]


def ask_hook_questions(available_scripts: List[str], silent: bool = False) -> HooksConfig:
    """
    자동화할 git 훅 선택

    silent 모드에서는 질문 없이 훅을 만들지 않습니다.
    """
    if silent:
        return HooksConfig()

    presets = relevant_presets(available_scripts)

    console.section("Git Hook Automations")
    console.dim("Automations that run automatically on git events.")
    console.blank()

    choices = [
        (str(idx), f"{p.label}  " + console.color(f"({p.trigger}: {p.command})", "dim"))
        for idx, p in enumerate(presets)
    ]
    choices.append((CUSTOM_HOOK_CHOICE, "+ Add custom hook..."))
    selected = console.ask_multi_choice("Select automations to enable:", choices)

    hooks: List[HookEntry] = [
        HookEntry(trigger=p.trigger, label=p.label, command=p.command)
        for idx, p in enumerate(presets)
        if str(idx) in selected
    ]

    if CUSTOM_HOOK_CHOICE in selected:
        print(console.color("\n  Custom hooks", "cyan") + console.color(" — add your own automations:\n", "dim"))
        while True:
            trigger = console.ask_choice("When should this run?", TRIGGER_CHOICES)
            label = console.ask_text('Description (e.g. "Run security scan"):', required=True)
            command = console.ask_text('Command to run (e.g. "npm run security:scan"):', required=True)
            hooks.append(HookEntry(trigger=trigger, label=label, command=command, is_custom=True))
            if not console.ask_confirm("Add another custom hook?", default=False):
                break

    return HooksConfig(hooks=hooks)
