"""
프로젝트 감지기

현재 디렉터리의 설정 파일들을 읽어서 언어, 프레임워크, 도구, 구조 등의
정보를 DetectionResult 로 수집합니다. 프로젝트 코드는 실행하지 않으며,
외부 프로세스는 git CLI 만 사용합니다.
"""
import json
import re
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from app.logging_config import get_logger
from .schemas import DetectionResult, StructureEntry

logger = get_logger("detector")


# ============================================================
# 파일 헬퍼
# ============================================================

def _read(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _read_json(path: Path) -> Optional[Any]:
    content = _read(path)
    if not content:
        return None
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        logger.debug("Invalid JSON file", extra={"path": str(path)})
        return None


def _find_first(root: Path, *candidates: str) -> Optional[str]:
    """후보 중 처음으로 존재하는 파일명"""
    for candidate in candidates:
        if (root / candidate).exists():
            return candidate
    return None


def _list_dir(path: Path) -> List[str]:
    try:
        return sorted(p.name for p in path.iterdir())
    except OSError:
        return []


# ============================================================
# 언어별 감지
# ============================================================

PYTHON_CHECKS: List[Tuple[str, str]] = [
    ("django", "Django"),
    ("fastapi", "FastAPI"),
    ("flask", "Flask"),
    ("sqlalchemy", "SQLAlchemy"),
    ("alembic", "Alembic"),
    ("pydantic", "Pydantic"),
    ("celery", "Celery"),
    ("pytest", "pytest"),
    ("uvicorn", "Uvicorn"),
    ("gunicorn", "Gunicorn"),
    ("asyncpg", "asyncpg (PostgreSQL)"),
    ("psycopg", "psycopg (PostgreSQL)"),
    ("redis", "Redis"),
    ("httpx", "HTTPX"),
    ("requests", "Requests"),
]


def _set_language_if_unknown(result: DetectionResult, language: str) -> None:
    if result.primary_language == "Unknown":
        result.primary_language = language


def _collect_python_deps(root: Path) -> List[str]:
    combined = ((_read(root / "requirements.txt") or "") + (_read(root / "pyproject.toml") or "")).lower()
    return [label for keyword, label in PYTHON_CHECKS if keyword in combined]


def _detect_languages(root: Path, result: DetectionResult) -> None:
    # Python
    if _find_first(root, "requirements.txt", "pyproject.toml", "setup.py", "Pipfile"):
        result.python_stack = _collect_python_deps(root)
        _set_language_if_unknown(result, "Python")

    # PHP
    if (root / "composer.json").exists():
        composer = _read_json(root / "composer.json")
        require = composer.get("require") if isinstance(composer, dict) else None
        if isinstance(require, dict):
            for package, label in [("laravel/framework", "Laravel"), ("symfony/symfony", "Symfony"), ("slim/slim", "Slim")]:
                if package in require:
                    result.php_stack.append(label)
        _set_language_if_unknown(result, "PHP")

    # Go
    if (root / "go.mod").exists():
        go_mod = _read(root / "go.mod") or ""
        m = re.search(r"^require\s*\(([^)]+)\)", go_mod, re.MULTILINE)
        if m:
            lines = [line.strip() for line in m.group(1).split("\n")]
            result.go_modules = [line for line in lines if line][:10]
        _set_language_if_unknown(result, "Go")

    # Rust
    if (root / "Cargo.toml").exists():
        cargo = _read(root / "Cargo.toml") or ""
        m = re.search(r"\[dependencies\]([\s\S]*?)(?=\[|\Z)", cargo)
        if m:
            crates = [line.split("=")[0].strip() for line in m.group(1).split("\n")]
            result.rust_crates = [c for c in crates if c][:8]
        _set_language_if_unknown(result, "Rust")

    # Ruby
    if (root / "Gemfile").exists():
        gemfile = _read(root / "Gemfile") or ""
        for gem, label in [("rails", "Rails"), ("sinatra", "Sinatra")]:
            if f"gem '{gem}'" in gemfile or f'gem "{gem}"' in gemfile:
                result.ruby_stack.append(label)
        _set_language_if_unknown(result, "Ruby")

    # Java / Kotlin
    if _find_first(root, "pom.xml", "build.gradle", "build.gradle.kts"):
        gradle = _read(root / "build.gradle") or _read(root / "build.gradle.kts") or ""
        combined = (_read(root / "pom.xml") or "") + gradle
        if "spring-boot" in combined or "spring-framework" in combined:
            result.java_stack.append("Spring Boot")
        if "quarkus" in combined:
            result.java_stack.append("Quarkus")
        if "micronaut" in combined:
            result.java_stack.append("Micronaut")
        if (root / "build.gradle.kts").exists() or "kotlin" in combined:
            result.primary_language = "Kotlin"
        else:
            _set_language_if_unknown(result, "Java")


# ============================================================
# package.json 감지
# ============================================================

# (패키지 후보들, 대상 필드, 라벨)
DEPENDENCY_TABLE: List[Tuple[Tuple[str, ...], str, str]] = [
    (("@remix-run/node", "@remix-run/react"), "frameworks", "Remix"),
    (("astro",), "frameworks", "Astro"),
    (("express",), "backend_frameworks", "Express"),
    (("fastify",), "backend_frameworks", "Fastify"),
    (("@nestjs/core",), "backend_frameworks", "NestJS"),
    (("hono",), "backend_frameworks", "Hono"),
    (("koa",), "backend_frameworks", "Koa"),
    (("elysia",), "backend_frameworks", "Elysia (Bun)"),
    (("mongoose",), "libraries", "Mongoose (MongoDB)"),
    (("sequelize",), "libraries", "Sequelize"),
    (("typeorm",), "libraries", "TypeORM"),
    (("kysely",), "libraries", "Kysely"),
    (("zod",), "libraries", "Zod"),
    (("yup",), "libraries", "Yup"),
    (("valibot",), "libraries", "Valibot"),
    (("@trpc/server", "@trpc/client"), "libraries", "tRPC"),
    (("@tanstack/react-query", "react-query"), "libraries", "TanStack Query"),
    (("@mui/material", "@material-ui/core"), "ui_libraries", "Material UI"),
    (("@chakra-ui/react",), "ui_libraries", "Chakra UI"),
    (("@radix-ui/react-dialog", "@radix-ui/themes"), "ui_libraries", "Radix UI"),
    (("shadcn-ui", "@shadcn/ui"), "ui_libraries", "shadcn/ui"),
    (("zustand",), "state_management", "Zustand"),
    (("jotai",), "state_management", "Jotai"),
    (("@reduxjs/toolkit", "redux"), "state_management", "Redux Toolkit"),
    (("mobx",), "state_management", "MobX"),
    (("@swc/core", "@swc/cli"), "libraries", "SWC"),
    (("next-intl",), "libraries", "next-intl"),
    (("i18next", "react-i18next"), "libraries", "i18next"),
    (("stripe",), "libraries", "Stripe"),
    (("resend",), "libraries", "Resend (email)"),
    (("nodemailer",), "libraries", "Nodemailer"),
    (("ioredis", "redis"), "libraries", "Redis client"),
    (("axios",), "libraries", "Axios"),
    (("sharp",), "libraries", "Sharp (image processing)"),
    (("uploadthing",), "libraries", "UploadThing"),
    (("@aws-sdk/client-s3", "aws-sdk"), "libraries", "AWS SDK"),
    (("openai",), "libraries", "OpenAI SDK"),
    (("@anthropic-ai/sdk",), "libraries", "Anthropic SDK"),
]

# 먼저 일치하는 항목 하나만 사용
AUTH_PRIORITY: List[Tuple[Tuple[str, ...], str]] = [
    (("next-auth", "@auth/core"), "NextAuth.js"),
    (("lucia",), "Lucia"),
    (("@clerk/nextjs", "@clerk/clerk-sdk-node"), "Clerk"),
    (("better-auth",), "Better Auth"),
]

TEST_RUNNER_PRIORITY: List[Tuple[str, str]] = [
    ("vitest", "Vitest"),
    ("jest", "Jest"),
    ("mocha", "Mocha"),
    ("@playwright/test", "Playwright"),
    ("cypress", "Cypress"),
]


def _detect_package_json(root: Path, result: DetectionResult) -> None:
    if not (root / "package.json").exists():
        return
    result.has_package_json = True

    pkg = _read_json(root / "package.json")
    if not isinstance(pkg, dict):
        return

    if pkg.get("name"):
        result.project_name = pkg["name"]
    engines = pkg.get("engines") or {}
    if isinstance(engines, dict) and engines.get("node"):
        result.node_version = engines["node"]

    scripts = pkg.get("scripts")
    if isinstance(scripts, dict):
        result.available_scripts = list(scripts.keys())

    # 패키지 매니저 (lock 파일 기준)
    for lock_file, manager in [("pnpm-lock.yaml", "pnpm"), ("yarn.lock", "yarn"), ("bun.lockb", "bun"), ("package-lock.json", "npm")]:
        if (root / lock_file).exists():
            result.package_manager = manager
            break

    # 모노레포
    workspaces: Union[list, dict, None] = pkg.get("workspaces")
    if workspaces:
        result.is_monorepo = True
        if isinstance(workspaces, list):
            result.workspaces = [str(w) for w in workspaces]
        elif isinstance(workspaces, dict) and isinstance(workspaces.get("packages"), list):
            result.workspaces = [str(w) for w in workspaces["packages"]]
    if _find_first(root, "turbo.json", "nx.json", "lerna.json"):
        result.is_monorepo = True

    deps: Dict[str, str] = {}
    for key in ("dependencies", "devDependencies"):
        if isinstance(pkg.get(key), dict):
            deps.update(pkg[key])
    _classify_dependencies(deps, result)


def _classify_dependencies(deps: Dict[str, str], result: DetectionResult) -> None:
    def has(*names: str) -> bool:
        return any(name in deps for name in names)

    if has("typescript", "@types/node"):
        result.has_typescript = True
        result.primary_language = "TypeScript"
    elif result.primary_language == "Unknown" and result.has_package_json:
        result.primary_language = "JavaScript"

    if has("next"):
        result.has_next_js = True
        result.next_version = deps["next"]
        result.frameworks.append(f"Next.js {deps['next'] or ''}".strip())
    if has("react"):
        result.ui_libraries.append(f"React {deps['react'] or ''}".strip())
    if has("vue"):
        result.ui_libraries.append(f"Vue {deps['vue'] or ''}".strip())
    if has("svelte", "@sveltejs/kit"):
        result.frameworks.append("SvelteKit")
        result.primary_language = "TypeScript" if result.has_typescript else "JavaScript"

    for names, attr, label in DEPENDENCY_TABLE:
        if has(*names):
            getattr(result, attr).append(label)

    if has("@prisma/client", "prisma"):
        result.has_prisma = True
    if has("drizzle-orm"):
        result.has_drizzle = True

    for names, label in AUTH_PRIORITY:
        if has(*names):
            result.auth_type = label
            break

    for name, label in TEST_RUNNER_PRIORITY:
        if has(name):
            result.test_runner = label
            break

    if has("vite", "@vitejs/plugin-react"):
        result.has_vite = True
        result.build_tool = "Vite"
    if has("esbuild") and not result.build_tool:
        result.build_tool = "esbuild"
    if has("turbopack"):
        result.build_tool = "Turbopack"

    if has("next-intl", "i18next", "react-i18next", "@formatjs/intl"):
        result.has_i18n = True
    if has("tailwindcss"):
        result.has_tailwind = True
    if has("eslint", "@eslint/js"):
        result.has_eslint = True
    if has("prettier"):
        result.has_prettier = True
    if has("@biomejs/biome"):
        result.has_biome = True


# ============================================================
# 설정 파일 기반 감지
# ============================================================

def _detect_typescript(root: Path, result: DetectionResult) -> None:
    ts_config = _read_json(root / "tsconfig.json")
    if not isinstance(ts_config, dict):
        return

    result.has_typescript = True
    if result.primary_language in ("Unknown", "JavaScript"):
        result.primary_language = "TypeScript"

    opts = ts_config.get("compilerOptions") or {}
    result.ts_strict_mode = opts.get("strict") is True or (
        opts.get("noImplicitAny") is True and opts.get("strictNullChecks") is True
    )
    if isinstance(opts.get("paths"), dict):
        result.ts_path_aliases = list(opts["paths"].keys())[:8]


def _detect_next_js(root: Path, result: DetectionResult) -> None:
    if not result.has_next_js:
        return

    has_app = (root / "src" / "app").is_dir() or (root / "app").is_dir()
    has_pages = (root / "src" / "pages").is_dir() or (root / "pages").is_dir()
    if has_app and has_pages:
        result.next_router = "both"
    elif has_app:
        result.next_router = "app"
    elif has_pages:
        result.next_router = "pages"

    config_file = _find_first(root, "next.config.ts", "next.config.mjs", "next.config.js")
    if config_file:
        content = _read(root / config_file) or ""
        if "i18n" in content:
            result.next_features.append("i18n config")
        if "experimental" in content:
            result.next_features.append("experimental features")
        if "images" in content:
            result.next_features.append("image optimization")
        if "rewrites" in content or "redirects" in content:
            result.next_features.append("custom routes")


def _detect_prisma(root: Path, result: DetectionResult) -> None:
    schema_path = root / "prisma" / "schema.prisma"
    if not result.has_prisma and not schema_path.exists():
        return
    result.has_prisma = True

    schema = _read(schema_path)
    if not schema:
        return

    # datasource 블록의 provider 우선
    datasource = re.search(r"datasource\s+\w+\s*\{([^}]*)\}", schema)
    provider = re.search(r"provider\s*=\s*[\"']([^\"']+)[\"']", datasource.group(1) if datasource else schema)
    if provider:
        result.prisma_db_provider = provider.group(1)
    result.prisma_models = re.findall(r"^model\s+(\w+)\s*\{", schema, re.MULTILINE)[:15]


def _detect_drizzle(root: Path, result: DetectionResult) -> None:
    if not result.has_drizzle:
        return
    config_file = _find_first(root, "drizzle.config.ts", "drizzle.config.js")
    if not config_file:
        return
    content = _read(root / config_file) or ""
    if "postgres" in content or "pg" in content:
        result.database_type = "PostgreSQL"
    elif "mysql" in content:
        result.database_type = "MySQL"
    elif "sqlite" in content:
        result.database_type = "SQLite"


def _detect_tooling(root: Path, result: DetectionResult) -> None:
    if not result.has_prettier and _find_first(
        root, ".prettierrc", ".prettierrc.json", ".prettierrc.js", ".prettierrc.cjs",
        ".prettierrc.yaml", ".prettierrc.yml", "prettier.config.js", "prettier.config.cjs",
        "prettier.config.ts",
    ):
        result.has_prettier = True

    prettier_file = _find_first(root, ".prettierrc", ".prettierrc.json")
    if prettier_file:
        rules = _read_json(root / prettier_file)
        if isinstance(rules, dict):
            result.prettier_rules = rules

    if not result.has_eslint and _find_first(
        root, ".eslintrc", ".eslintrc.json", ".eslintrc.js", ".eslintrc.cjs", ".eslintrc.yaml",
        ".eslintrc.yml", "eslint.config.js", "eslint.config.mjs", "eslint.config.cjs", "eslint.config.ts",
    ):
        result.has_eslint = True

    if not result.has_tailwind and _find_first(
        root, "tailwind.config.js", "tailwind.config.ts", "tailwind.config.cjs", "tailwind.config.mjs",
    ):
        result.has_tailwind = True

    if not result.has_vite and _find_first(root, "vite.config.ts", "vite.config.js", "vite.config.mts"):
        result.has_vite = True
        if not result.build_tool:
            result.build_tool = "Vite"

    result.test_config = _find_first(
        root, "jest.config.ts", "jest.config.js", "jest.config.cjs", "vitest.config.ts", "vitest.config.js",
    )


def _detect_docker(root: Path, result: DetectionResult) -> None:
    compose_file = _find_first(root, "docker-compose.yml", "docker-compose.yaml", "compose.yml", "compose.yaml")
    if not compose_file:
        return

    result.has_docker_compose = True
    content = _read(root / compose_file) or ""

    services = re.findall(r"^ {2}(\w[\w-]+):[ \t]*$", content, re.MULTILINE)
    result.docker_services = [s for s in services if s not in ("services", "volumes", "networks")]

    # DB 종류 추정 (이미 감지된 값이 우선)
    if "postgres" in content:
        result.database_type = result.database_type or "PostgreSQL"
    if "mysql" in content or "mariadb" in content:
        result.database_type = result.database_type or "MySQL"
    if "redis" in content:
        result.libraries.append("Redis")
    if "mongodb" in content:
        result.database_type = result.database_type or "MongoDB"


def _detect_i18n(root: Path, result: DetectionResult) -> None:
    messages_dir = root / "messages"
    if messages_dir.is_dir():
        files = [f for f in _list_dir(messages_dir) if f.endswith(".json")]
        if files:
            result.has_i18n = True
            result.i18n_locales = [f[:-len(".json")] for f in files]

    locales_dir = root / "locales"
    if not result.has_i18n and locales_dir.is_dir():
        entries = _list_dir(locales_dir)
        if entries:
            result.has_i18n = True
            result.i18n_locales = [
                f[:-len(".json")] if f.endswith(".json") else f
                for f in entries
                if f.endswith(".json") or (locales_dir / f).is_dir()
            ]

    config_file = _find_first(root, "i18n.ts", "i18n.js", "i18n/request.ts")
    if config_file:
        content = _read(root / config_file) or ""
        m = re.search(r"defaultLocale['\":\s]+['\"]([a-z]{2}(-[A-Z]{2})?)['\"]", content)
        if m:
            result.i18n_default_locale = m.group(1)


# 관심 디렉터리 목록 (경로, 설명)
INTERESTING_DIRS: List[Tuple[str, str]] = [
    ("src/app", "Next.js App Router pages and layouts"),
    ("app", "Next.js App Router pages and layouts"),
    ("src/pages", "Next.js Pages Router"),
    ("pages", "Next.js Pages Router"),
    ("src/components", "Shared React components"),
    ("components", "Shared React components"),
    ("src/lib", "Utility functions and helpers"),
    ("lib", "Utility functions and helpers"),
    ("src/hooks", "Custom React hooks"),
    ("src/api", "API routes / server handlers"),
    ("src/server", "Server-side code"),
    ("src/utils", "Utility functions"),
    ("src/types", "TypeScript type definitions"),
    ("src/styles", "Global styles"),
    ("src/context", "React contexts / providers"),
    ("src/store", "State management"),
    ("src/config", "Configuration files"),
    ("src/services", "Service layer / external API clients"),
    ("src/middleware", "Middleware functions"),
    ("prisma", "Prisma schema and migrations"),
    ("public", "Static assets"),
    ("messages", "i18n translation files"),
    ("locales", "i18n translation files"),
    ("scripts", "Build and utility scripts"),
    ("docs", "Documentation"),
    ("tests", "Test files"),
    ("__tests__", "Test files"),
    ("e2e", "End-to-end tests"),
]


def _detect_project_structure(root: Path, result: DetectionResult) -> None:
    result.project_structure = [
        StructureEntry(path=dir_path, description=description)
        for dir_path, description in INTERESTING_DIRS
        if (root / dir_path).is_dir()
    ]


def _detect_ci(root: Path, result: DetectionResult) -> None:
    ci_checks = [
        ((root / ".github" / "workflows").is_dir(), "GitHub Actions"),
        ((root / ".gitlab-ci.yml").exists(), "GitLab CI"),
        ((root / "Jenkinsfile").exists(), "Jenkins"),
        ((root / ".circleci" / "config.yml").exists(), "CircleCI"),
    ]
    for found, platform in ci_checks:
        if found:
            result.has_ci = True
            result.ci_platforms.append(platform)

    # 배포 플랫폼 (CI 여부와는 별개)
    hosting_checks = [
        (_find_first(root, "vercel.json", ".vercel"), "Vercel"),
        (_find_first(root, "railway.json", "railway.toml"), "Railway"),
        (_find_first(root, "fly.toml"), "Fly.io"),
        (_find_first(root, "netlify.toml"), "Netlify"),
    ]
    for found, platform in hosting_checks:
        if found:
            result.ci_platforms.append(platform)


CONVENTIONAL_COMMIT_PATTERN = re.compile(
    r"^[0-9a-f]+ (feat|fix|chore|docs|style|refactor|test|build|ci|perf)(\(.+\))?!?:"
)


def _git(root: Path, *args: str) -> Optional[str]:
    """git 명령 실행 (실패 시 None)"""
    try:
        completed = subprocess.run(
            ["git", *args],
            cwd=str(root),
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git {' '.join(args)} failed: {e}")
        return None
    return completed.stdout.strip()


def _detect_git(root: Path, result: DetectionResult) -> None:
    remote = _git(root, "remote", "get-url", "origin")
    if remote:
        result.git_remote = remote
        m = re.search(r"[:/]([^/]+/[^/]+?)(?:\.git)?$", remote)
        if m:
            result.git_repo_name = m.group(1)

    commits = _git(root, "log", "--oneline", "-10")
    if commits:
        lines = commits.split("\n")
        conventional = sum(1 for line in lines if CONVENTIONAL_COMMIT_PATTERN.match(line))
        result.commit_style_detected = "conventional" if conventional >= len(lines) * 0.5 else "freeform"


def _detect_env_vars(root: Path, result: DetectionResult) -> None:
    env_file = _find_first(root, ".env.example", ".env.sample", ".env.template")
    if not env_file:
        return
    names = []
    for line in (_read(root / env_file) or "").split("\n"):
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            names.append(line.split("=")[0].strip())
    result.env_vars = names[:20]


# 확장자 기반 fallback (먼저 일치하는 언어)
EXTENSION_FALLBACK: List[Tuple[Tuple[str, ...], str]] = [
    ((".ts", ".tsx"), "TypeScript"),
    ((".js", ".jsx"), "JavaScript"),
    ((".py",), "Python"),
    ((".go",), "Go"),
    ((".rs",), "Rust"),
]


def _determine_primary_language(root: Path, result: DetectionResult) -> None:
    if result.primary_language != "Unknown":
        return
    files = _list_dir(root)
    for extensions, language in EXTENSION_FALLBACK:
        if any(f.endswith(extensions) for f in files):
            result.primary_language = language
            return


# ============================================================
# 메인 감지 함수
# ============================================================

def detect(cwd: Union[str, Path]) -> DetectionResult:
    """
    프로젝트 디렉터리 감지

    Args:
        cwd: 프로젝트 루트 디렉터리

    Returns:
        DetectionResult
    """
    root = Path(cwd).resolve()
    result = DetectionResult(project_name=root.name)

    _detect_languages(root, result)
    _detect_package_json(root, result)
    _detect_typescript(root, result)
    _detect_next_js(root, result)
    _detect_prisma(root, result)
    _detect_drizzle(root, result)
    _detect_tooling(root, result)
    _detect_docker(root, result)
    _detect_i18n(root, result)
    _detect_project_structure(root, result)
    _detect_ci(root, result)
    _detect_git(root, result)
    _detect_env_vars(root, result)
    _determine_primary_language(root, result)

    logger.info("Project detected", extra={
        "project": result.project_name,
        "language": result.primary_language,
        "frameworks": result.frameworks,
    })
    return result
