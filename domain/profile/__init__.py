"""
개발자 프로필 모듈
"""
from .schemas import CodeStyle, Profile
from .profile_store import create_default_profile, load_profile, save_profile
from .profile_prompts import offer_profile_edit, prompt_for_profile, show_profile_summary

__all__ = [
    "CodeStyle",
    "Profile",
    "create_default_profile",
    "load_profile",
    "save_profile",
    "offer_profile_edit",
    "prompt_for_profile",
    "show_profile_summary",
]
