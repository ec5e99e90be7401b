"""
LangGraph 워크플로우 상태 정의

copilot-instructions.md 생성/업데이트 워크플로우의 상태를 관리합니다.
"""
from typing import TypedDict, List, Optional

from domain.hooks import HooksConfig
from domain.instructions import PreservedData
from domain.profile import Profile
from domain.project import DetectionResult
from .schemas import DispatchFlags, ProjectAnswers


class DispatchState(TypedDict, total=False):
    """
    LangGraph 워크플로우 상태

    워크플로우 단계:
    1. ProfileLoader: 전역 개발자 프로필 로드/생성
    2. ProjectDetector: 프로젝트 디렉터리 감지
    3. PreservedData: 기존 문서에서 사용자 작성 데이터 추출 (--update)
    4. ProjectQuestions: 프로젝트 질문
    5. HookQuestions: git 훅 선택
    6. InstructionsGenerator: 새 문서 생성
    7. DocumentMerger: 기존 문서와 병합 (--update)
    8. DocumentWriter: 파일 기록 또는 미리보기 (--dry-run)
    """

    # ========== 입력 데이터 ==========
    cwd: str  # 프로젝트 루트
    flags: DispatchFlags
    profile_path: str  # ~/.flight-dispatcher/profile.json
    output_path: str  # <cwd>/.github/copilot-instructions.md
    today: str  # YYYY-MM-DD

    # ========== 수집된 데이터 ==========
    profile: Optional[Profile]
    detected: Optional[DetectionResult]
    existing_content: Optional[str]  # 기존 문서 (--update 이고 파일이 있는 경우)
    preserved: Optional[PreservedData]
    answers: Optional[ProjectAnswers]
    hooks_config: Optional[HooksConfig]

    # ========== 문서 생성 결과 ==========
    generated_content: Optional[str]  # 템플릿으로 새로 생성한 문서
    final_content: Optional[str]  # 병합/타임스탬프 갱신 후 최종 문서
    merged: bool

    # ========== 기록 결과 ==========
    action: Optional[str]  # "written" 또는 "previewed"
    written_hooks: List[str]

    # ========== 상태 및 에러 ==========
    status: str  # "profiling", "detecting", ..., "completed", "error"
    error: Optional[str]  # 에러 메시지
