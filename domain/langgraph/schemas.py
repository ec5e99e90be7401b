"""
실행 옵션 / 프로젝트 질문 응답 Pydantic 스키마
"""
from pydantic import BaseModel
from typing import List, Optional


class DispatchFlags(BaseModel):
    """CLI 플래그"""
    update: bool = False
    dry_run: bool = False
    silent: bool = False
    reset_profile: bool = False


class ProjectAnswers(BaseModel):
    """프로젝트 질문 응답"""
    description: str = ""
    deployment_target: str = "Unknown"
    architecture_rules: List[str] = []
    prisma_schema_command: Optional[str] = None
    i18n_default_locale: Optional[str] = None
    monorepo_focus: Optional[str] = None
    want_tests: Optional[bool] = None
    todos: List[str] = []
