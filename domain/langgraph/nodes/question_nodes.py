"""
④⑤ 질문 노드

프로젝트 질문과 git 훅 선택 질문을 진행하는 노드
"""
from app import console
from app.console import PromptAborted
from app.logging_config import get_logger
from domain.hooks import ask_hook_questions
from ..dispatch_state import DispatchState
from ..project_questions import ask_project_questions

logger = get_logger("question_nodes")


def project_questions_node(state: DispatchState) -> DispatchState:
    """프로젝트 질문 -> answers"""
    try:
        state["answers"] = ask_project_questions(state["detected"], state["flags"], state.get("preserved"))
        console.blank()
        state["status"] = "asking_hooks"
        return state

    except PromptAborted:
        raise
    except Exception as e:
        logger.error(f"Project questions failed: {e}", exc_info=True)
        state["error"] = f"Project questions failed: {str(e)}"
        state["status"] = "error"
        return state


def hook_questions_node(state: DispatchState) -> DispatchState:
    """git 훅 선택 -> hooks_config"""
    try:
        detected = state["detected"]
        state["hooks_config"] = ask_hook_questions(detected.available_scripts, silent=state["flags"].silent)
        console.blank()
        state["status"] = "generating"
        return state

    except PromptAborted:
        raise
    except Exception as e:
        logger.error(f"Hook questions failed: {e}", exc_info=True)
        state["error"] = f"Hook questions failed: {str(e)}"
        state["status"] = "error"
        return state
