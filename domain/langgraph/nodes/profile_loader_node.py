"""
① 프로필 로더 노드

전역 개발자 프로필을 로드하거나 새로 만드는 노드
"""
from pathlib import Path

from app import console
from app.console import PromptAborted
from app.logging_config import get_logger
from domain.profile import (
    create_default_profile,
    load_profile,
    offer_profile_edit,
    prompt_for_profile,
    save_profile,
    show_profile_summary,
)
from ..dispatch_state import DispatchState

logger = get_logger("profile_loader_node")

PROFILE_DISPLAY_PATH = "~/.flight-dispatcher/profile.json"


def profile_loader_node(state: DispatchState) -> DispatchState:
    """
    프로필 로더 노드

    역할:
        - --reset-profile: 프로필 질문을 다시 진행하고 저장
        - 프로필 없음: silent 면 기본 프로필, 아니면 최초 설정 질문
        - 프로필 있음: 요약 출력 후 (update/silent 가 아니면) 수정 여부 확인

    출력:
        - profile: Profile
        - status: "detecting"
    """
    try:
        flags = state["flags"]
        profile_path = Path(state["profile_path"])
        profile = load_profile(profile_path)

        if flags.reset_profile and not flags.silent:
            console.info("Resetting developer profile...")
            profile = save_profile(prompt_for_profile(profile), profile_path)
            console.success(f"Profile saved to {PROFILE_DISPLAY_PATH}")
        elif profile is None:
            if flags.silent:
                profile = save_profile(create_default_profile(), profile_path)
                console.info("No profile found — using defaults (run without --silent to configure).")
            else:
                console.info("No developer profile found. Let's set one up (one-time only).")
                profile = save_profile(prompt_for_profile(None), profile_path)
                console.success(f"Profile saved to {PROFILE_DISPLAY_PATH}")
        else:
            show_profile_summary(profile)
            if not flags.update and not flags.silent:
                edited = offer_profile_edit(profile)
                if edited is not profile:
                    profile = save_profile(edited, profile_path)

        logger.info("Profile ready", extra={"language": profile.language_preference})
        state["profile"] = profile
        state["status"] = "detecting"
        return state

    except PromptAborted:
        raise
    except Exception as e:
        logger.error(f"Profile loader failed: {e}", exc_info=True)
        state["error"] = f"Profile loader failed: {str(e)}"
        state["status"] = "error"
        return state
