"""
개발자 프로필 Pydantic 스키마

profile.json 은 camelCase 키(languagePreference, codeStyle, ...)로 저장됩니다.
"""
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class CodeStyle(BaseModel):
    """코드 스타일 선호"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    indentation: Literal["tabs", "2spaces", "4spaces"] = "2spaces"
    quotes: Literal["single", "double"] = "single"
    semicolons: bool = False


class Profile(BaseModel):
    """전역 개발자 프로필 (~/.flight-dispatcher/profile.json)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    language_preference: str = "TypeScript"
    code_style: CodeStyle = CodeStyle()
    test_framework: Optional[str] = None
    verbosity: Literal["concise", "detailed"] = "concise"
    custom_rules: List[str] = []
    comment_style: Optional[str] = None
    commit_style: str = "conventional"
    created_at: str
    updated_at: str
