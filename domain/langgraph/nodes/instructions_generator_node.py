"""
⑥ 문서 생성 노드
"""
from app import console
from app.logging_config import get_logger
from ..dispatch_state import DispatchState
from ..instructions_generator import generate_instructions

logger = get_logger("instructions_generator_node")


def instructions_generator_node(state: DispatchState) -> DispatchState:
    """
    문서 생성 노드

    역할:
        - 프로필/감지 결과/응답/훅 설정으로 정규 템플릿 문서 생성

    출력:
        - generated_content: 새 문서
        - status: "merging"
    """
    try:
        console.section("Generating Instructions")
        state["generated_content"] = generate_instructions(
            state["profile"],
            state["detected"],
            state["answers"],
            state["hooks_config"],
            state["today"],
        )
        state["status"] = "merging"
        return state

    except Exception as e:
        logger.error(f"Instructions generator failed: {e}", exc_info=True)
        state["error"] = f"Instructions generator failed: {str(e)}"
        state["status"] = "error"
        return state
