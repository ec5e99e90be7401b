"""
로깅 설정

표준 logging 모듈을 감싸서 flight-dispatcher 전용 로거와
구조화된(extra 필드) 로그 출력을 제공합니다.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER_NAME = "flight_dispatcher"

# LogRecord 기본 속성 (extra 필드 추출 시 제외)
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


class JSONFormatter(logging.Formatter):
    """한 줄 JSON 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_obj.update(_extra_fields(record))
        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """사람이 읽기 쉬운 포맷 + extra 필드"""

    def __init__(self):
        super().__init__("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        extra = _extra_fields(record)
        if extra:
            text += " | " + " ".join(f"{k}={v}" for k, v in extra.items())
        return text


def setup_logging(level: str = "WARNING", log_format: str = "text") -> logging.Logger:
    """
    루트 로거 초기화

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, ...)
        log_format: "text" 또는 "json"
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # 중복 핸들러 방지
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def setup_logging_from_env(level_override: Optional[str] = None) -> logging.Logger:
    """환경변수(LOG_LEVEL, LOG_FORMAT) 기반 로깅 초기화"""
    from app.config import get_settings

    settings = get_settings()
    return setup_logging(level_override or settings.log_level, settings.log_format)


def get_logger(name: str) -> logging.Logger:
    """모듈별 하위 로거 반환"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
