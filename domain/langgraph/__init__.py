"""
Langgraph 도메인 모듈
copilot-instructions.md 생성/업데이트 워크플로우
"""
from .dispatch_workflow import DispatchWorkflow
from .instructions_generator import SECTION_ORDER, generate_instructions, render_banner
from .schemas import DispatchFlags, ProjectAnswers

__all__ = [
    "DispatchWorkflow",
    "SECTION_ORDER",
    "generate_instructions",
    "render_banner",
    "DispatchFlags",
    "ProjectAnswers",
]
