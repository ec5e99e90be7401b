"""
프로젝트 감지 모듈
"""
from .schemas import DetectionResult, StructureEntry
from .detector import detect

__all__ = [
    "DetectionResult",
    "StructureEntry",
    "detect",
]
