"""
③ 보존 데이터 노드

--update 실행 시 기존 copilot-instructions.md 를 읽고
사용자가 작성한 데이터를 추출하는 노드
"""
from pathlib import Path

from app import console
from app.logging_config import get_logger
from domain.instructions import PreservedData, extract_preserved_data
from ..dispatch_state import DispatchState

logger = get_logger("preserved_data_node")


def preserved_data_node(state: DispatchState) -> DispatchState:
    """
    보존 데이터 노드

    입력:
        - flags.update: 업데이트 모드 여부
        - output_path: 기존 문서 경로

    출력:
        - existing_content: 기존 문서 (없거나 비어 있으면 None)
        - preserved: PreservedData (없으면 빈 값)
        - status: "asking"
    """
    try:
        output_path = Path(state["output_path"])
        existing_content = None
        preserved = PreservedData()

        if state["flags"].update and output_path.is_file():
            existing_content = output_path.read_text(encoding="utf-8") or None
            if existing_content:
                preserved = extract_preserved_data(existing_content)
                console.info("Found existing copilot-instructions.md — preserved sections will be kept.")
                console.blank()
                logger.info("Existing document loaded", extra={
                    "rules": len(preserved.architecture_rules),
                    "todos": len(preserved.todos),
                })

        state["existing_content"] = existing_content
        state["preserved"] = preserved
        state["status"] = "asking"
        return state

    except Exception as e:
        logger.error(f"Preserved data extraction failed: {e}", exc_info=True)
        state["error"] = f"Preserved data extraction failed: {str(e)}"
        state["status"] = "error"
        return state
