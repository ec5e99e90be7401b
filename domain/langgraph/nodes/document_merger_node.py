"""
⑦ 문서 병합 노드

--update 이고 기존 문서가 있으면 새 문서와 섹션 단위로 병합하는 노드
"""
from app import console
from app.logging_config import get_logger
from domain.instructions import merge_documents, update_timestamp
from ..dispatch_state import DispatchState

logger = get_logger("document_merger_node")


def document_merger_node(state: DispatchState) -> DispatchState:
    """
    문서 병합 노드

    로직:
        - flags.update == True 이고 existing_content 가 있으면:
            * merge_documents(기존, 새 문서)
            * 배너 날짜를 오늘 날짜로 갱신
        - 그 외:
            * 새 문서를 그대로 사용
    """
    try:
        generated = state["generated_content"]
        existing = state.get("existing_content")

        if existing and state["flags"].update:
            final_content = update_timestamp(merge_documents(existing, generated), state["today"])
            state["merged"] = True
            console.success("Merged with existing file (preserved: About, Architecture Rules, TODOs)")
            logger.info("Merged with existing document", extra={"length": len(final_content)})
        else:
            final_content = generated
            state["merged"] = False

        state["final_content"] = final_content
        state["status"] = "writing"
        return state

    except Exception as e:
        logger.error(f"Document merger failed: {e}", exc_info=True)
        state["error"] = f"Document merger failed: {str(e)}"
        state["status"] = "error"
        return state
