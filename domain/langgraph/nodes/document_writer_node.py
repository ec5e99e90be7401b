"""
⑧ 문서 기록 노드

최종 문서를 파일로 기록하고 선택된 git 훅을 생성하는 노드
(--dry-run 이면 미리보기만 출력)
"""
from pathlib import Path

from app import console
from app.logging_config import get_logger
from domain.hooks import write_hooks
from ..dispatch_state import DispatchState

logger = get_logger("document_writer_node")


def document_writer_node(state: DispatchState) -> DispatchState:
    """
    문서 기록 노드

    출력:
        - action: "written" 또는 "previewed"
        - written_hooks: 생성된 훅 파일 경로 목록
        - status: "completed"
    """
    try:
        content = state["final_content"]
        output_path = Path(state["output_path"])

        if state["flags"].dry_run:
            console.section("Preview (--dry-run, nothing written)")
            print("")
            print(console.color("─" * 60, "dim"))
            print(content)
            print(console.color("─" * 60, "dim"))
            print("")
            console.info("Use without --dry-run to write the file.")
            state["action"] = "previewed"
            state["written_hooks"] = []
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
            console.success(f"Written to {console.color(str(output_path), 'bold')}")
            logger.info("Instructions written", extra={"path": str(output_path)})

            hooks_config = state.get("hooks_config")
            written = write_hooks(hooks_config, state["cwd"]) if hooks_config else []
            if hooks_config and hooks_config.hooks and not written:
                console.warn(".git/hooks/ not found — skipping hook generation (is this a git repo?)")
            for hook_path in written:
                console.success(f"Git hook written: .git/hooks/{hook_path.name}")

            console.blank()
            console.dim("Open VS Code → Copilot Chat → your project context is now active.")
            console.dim("Re-run `flight-dispatcher --update` as your project evolves.")
            state["action"] = "written"
            state["written_hooks"] = [str(p) for p in written]

        state["status"] = "completed"
        return state

    except Exception as e:
        logger.error(f"Document writer failed: {e}", exc_info=True)
        state["error"] = f"Document writer failed: {str(e)}"
        state["status"] = "error"
        return state
