"""
Git 훅 설정 Pydantic 스키마
"""
from pydantic import BaseModel
from typing import List, Literal, Optional

HookTrigger = Literal["pre-commit", "pre-push", "commit-msg", "post-merge", "post-checkout"]


class HookEntry(BaseModel):
    """훅 하나 (트리거 + 실행 명령)"""
    trigger: HookTrigger
    label: str
    command: str
    is_custom: bool = False


class PresetHook(HookEntry):
    """기본 제공 훅 (requires_script 가 있으면 해당 npm 스크립트가 있을 때만 제안)"""
    requires_script: Optional[str] = None


class HooksConfig(BaseModel):
    hooks: List[HookEntry] = []
