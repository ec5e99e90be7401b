from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from langgraph.graph import StateGraph, END

from app.config import Settings, get_settings
from app.logging_config import get_logger
from .dispatch_state import DispatchState
from .schemas import DispatchFlags
from .nodes import (
    profile_loader_node,
    project_detector_node,
    preserved_data_node,
    project_questions_node,
    hook_questions_node,
    instructions_generator_node,
    document_merger_node,
    document_writer_node,
)

logger = get_logger("dispatch_workflow")

# 실행 순서
NODE_SEQUENCE = [
    ("profile_loader", profile_loader_node),
    ("project_detector", project_detector_node),
    ("preserved_data", preserved_data_node),
    ("project_questions", project_questions_node),
    ("hook_questions", hook_questions_node),
    ("instructions_generator", instructions_generator_node),
    ("document_merger", document_merger_node),
    ("document_writer", document_writer_node),
]


def _continue_or_end(next_node: str) -> Callable[[DispatchState], str]:
    """에러 상태면 END, 아니면 다음 노드로"""
    def route(state: DispatchState) -> str:
        return END if state.get("status") == "error" else next_node
    return route


#LangGraph 워크플로우 메인 클래스
class DispatchWorkflow:
    """
    copilot-instructions.md 생성/업데이트 워크플로우

    8개 노드로 구성:
        1. profile_loader: 전역 프로필 로드/생성
        2. project_detector: 프로젝트 감지
        3. preserved_data: 기존 문서에서 사용자 데이터 추출
        4. project_questions: 프로젝트 질문
        5. hook_questions: git 훅 선택
        6. instructions_generator: 새 문서 생성
        7. document_merger: 기존 문서와 병합
        8. document_writer: 파일 기록 / 미리보기
    """

    def __init__(self, cwd: Union[str, Path], settings: Optional[Settings] = None):
        """
        Args:
            cwd: 프로젝트 루트 디렉터리
            settings: 실행 설정 (없으면 환경변수에서 생성)
        """
        self.cwd = Path(cwd).resolve()
        self.settings = settings or get_settings()
        self.workflow = self._build_workflow()

    def _build_workflow(self):
        """LangGraph 워크플로우 구성"""
        workflow = StateGraph(DispatchState)

        for name, node in NODE_SEQUENCE:
            workflow.add_node(name, node)

        workflow.set_entry_point(NODE_SEQUENCE[0][0])
        for (current, _), (following, _) in zip(NODE_SEQUENCE, NODE_SEQUENCE[1:]):
            workflow.add_conditional_edges(
                current,
                _continue_or_end(following),
                {following: following, END: END},
            )
        workflow.add_edge(NODE_SEQUENCE[-1][0], END)

        return workflow.compile()

    @property
    def output_path(self) -> Path:
        return self.cwd / self.settings.output_file

    def run(self, flags: DispatchFlags, today: Optional[str] = None) -> Dict[str, Any]:
        """
        워크플로우 실행

        Args:
            flags: CLI 플래그
            today: 배너 날짜 (YYYY-MM-DD, 기본값은 오늘)

        Returns:
            {
                "success": True/False,
                "output_path": str,
                "action": "written" | "previewed",
                "merged": bool,
                "content": str,
                "error": str  # 실패 시
            }
        """
        initial_state: DispatchState = {
            "cwd": str(self.cwd),
            "flags": flags,
            "profile_path": str(self.settings.profile_path),
            "output_path": str(self.output_path),
            "today": today or date.today().isoformat(),
            "status": "profiling",
            "merged": False,
        }

        logger.info("Dispatch started", extra={"cwd": str(self.cwd), "flags": flags.model_dump()})
        result = self.workflow.invoke(initial_state)

        if result.get("status") == "completed":
            return {
                "success": True,
                "output_path": result.get("output_path"),
                "action": result.get("action"),
                "merged": result.get("merged", False),
                "content": result.get("final_content"),
            }
        else:
            return {
                "success": False,
                "error": result.get("error", "Unknown error"),
            }
