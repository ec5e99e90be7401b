"""
Git 훅 자동화 모듈
"""
from .schemas import HookEntry, HooksConfig, PresetHook
from .hook_writer import PRESET_HOOKS, generate_hook_script, relevant_presets, summarize_hooks, write_hooks
from .hook_prompts import ask_hook_questions

__all__ = [
    "HookEntry",
    "HooksConfig",
    "PresetHook",
    "PRESET_HOOKS",
    "generate_hook_script",
    "relevant_presets",
    "summarize_hooks",
    "write_hooks",
    "ask_hook_questions",
]
