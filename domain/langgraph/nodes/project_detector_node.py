"""
② 프로젝트 감지 노드
"""
from app import console
from app.logging_config import get_logger
from domain.project import DetectionResult, detect
from ..dispatch_state import DispatchState

logger = get_logger("project_detector_node")


def show_detection_summary(detected: DetectionResult) -> None:
    console.success(f"Project: {console.color(detected.project_name, 'bold')}")
    console.success(f"Language: {detected.primary_language}")
    if detected.frameworks:
        console.success(f"Frameworks: {', '.join(detected.frameworks)}")
    if detected.backend_frameworks:
        console.success(f"Backend: {', '.join(detected.backend_frameworks)}")
    if detected.has_prisma:
        models = f" ({len(detected.prisma_models)} models)" if detected.prisma_models else ""
        console.success(f"Prisma: {detected.prisma_db_provider or 'detected'}{models}")
    if detected.has_i18n:
        console.success(f"i18n: {', '.join(detected.i18n_locales) or 'detected'}")
    if detected.test_runner:
        console.success(f"Tests: {detected.test_runner}")
    if detected.has_docker_compose:
        console.success("Docker Compose: detected")
    console.blank()


def project_detector_node(state: DispatchState) -> DispatchState:
    """프로젝트 디렉터리를 감지하여 detected 에 저장"""
    try:
        console.section("Detecting Project")
        detected = detect(state["cwd"])
        show_detection_summary(detected)

        state["detected"] = detected
        state["status"] = "extracting"
        return state

    except Exception as e:
        logger.error(f"Project detector failed: {e}", exc_info=True)
        state["error"] = f"Project detector failed: {str(e)}"
        state["status"] = "error"
        return state
