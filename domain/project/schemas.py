"""
프로젝트 감지 결과 Pydantic 스키마
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class StructureEntry(BaseModel):
    """주요 디렉터리 설명"""
    path: str
    description: str


class DetectionResult(BaseModel):
    """프로젝트 디렉터리에서 감지한 사실 목록"""
    # 기본 정보
    project_name: str
    primary_language: str = "Unknown"

    # JavaScript / TypeScript
    has_package_json: bool = False
    package_manager: Optional[str] = None  # npm | yarn | pnpm | bun
    node_version: Optional[str] = None
    has_typescript: bool = False
    ts_strict_mode: bool = False
    ts_path_aliases: List[str] = []

    # 프레임워크 / 라이브러리
    frameworks: List[str] = []
    libraries: List[str] = []
    ui_libraries: List[str] = []
    state_management: List[str] = []

    # Next.js
    has_next_js: bool = False
    next_version: Optional[str] = None
    next_router: Optional[str] = None  # app | pages | both
    next_features: List[str] = []

    # 백엔드 / DB
    backend_frameworks: List[str] = []
    has_prisma: bool = False
    prisma_db_provider: Optional[str] = None
    prisma_models: List[str] = []
    has_drizzle: bool = False
    database_type: Optional[str] = None

    # 테스트 / 도구
    test_runner: Optional[str] = None
    test_config: Optional[str] = None
    has_eslint: bool = False
    has_prettier: bool = False
    prettier_rules: Dict[str, Any] = {}
    has_tailwind: bool = False
    has_biome: bool = False

    # 빌드
    build_tool: Optional[str] = None
    has_vite: bool = False
    has_docker_compose: bool = False
    docker_services: List[str] = []

    auth_type: Optional[str] = None

    # i18n
    has_i18n: bool = False
    i18n_locales: List[str] = []
    i18n_default_locale: Optional[str] = None

    # 구조
    project_structure: List[StructureEntry] = []
    is_monorepo: bool = False
    workspaces: List[str] = []

    # CI/CD
    has_ci: bool = False
    ci_platforms: List[str] = []

    # Git
    git_remote: Optional[str] = None
    git_repo_name: Optional[str] = None
    commit_style_detected: Optional[str] = None  # conventional | freeform

    available_scripts: List[str] = []
    env_vars: List[str] = []

    # 기타 언어
    python_stack: List[str] = []
    php_stack: List[str] = []
    go_modules: List[str] = []
    rust_crates: List[str] = []
    ruby_stack: List[str] = []
    java_stack: List[str] = []
