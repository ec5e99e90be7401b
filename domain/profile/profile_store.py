"""
프로필 저장소

전역 개발자 프로필을 JSON 파일로 읽고 씁니다.
"""
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from app.logging_config import get_logger
from .schemas import CodeStyle, Profile, utc_now_iso

logger = get_logger("profile_store")


def create_default_profile() -> Profile:
    """질문 없이 사용할 기본 프로필"""
    now = utc_now_iso()
    return Profile(
        language_preference="TypeScript",
        code_style=CodeStyle(indentation="2spaces", quotes="single", semicolons=False),
        commit_style="conventional",
        verbosity="concise",
        custom_rules=[],
        created_at=now,
        updated_at=now,
    )


def load_profile(path: Path) -> Optional[Profile]:
    """
    프로필 로드

    파일이 없거나 읽을 수 없으면 None 을 반환합니다.
    """
    if not path.exists():
        return None
    try:
        return Profile.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable profile: {e}", extra={"path": str(path)})
        return None


def save_profile(profile: Profile, path: Path) -> Profile:
    """updated_at 을 갱신하고 저장"""
    profile.updated_at = utc_now_iso()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(profile.model_dump_json(indent=2, by_alias=True, exclude_none=True), encoding="utf-8")
    logger.info("Profile saved", extra={"path": str(path)})
    return profile
