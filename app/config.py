"""
애플리케이션 설정

.env 파일과 환경변수에서 flight-dispatcher 설정을 읽어옵니다.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_OUTPUT_FILE = os.path.join(".github", "copilot-instructions.md")


@dataclass(frozen=True)
class Settings:
    """실행 설정"""
    home_dir: Path
    output_file: str
    log_level: str
    log_format: str

    @property
    def profile_path(self) -> Path:
        return self.home_dir / "profile.json"


def get_settings() -> Settings:
    """환경변수 기반 설정 생성 (호출 시점의 환경변수를 반영)"""
    home = os.getenv("FLIGHT_DISPATCHER_HOME")
    return Settings(
        home_dir=Path(home) if home else Path.home() / ".flight-dispatcher",
        output_file=os.getenv("FLIGHT_DISPATCHER_OUTPUT", DEFAULT_OUTPUT_FILE),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        log_format=os.getenv("LOG_FORMAT", "text").lower(),
    )
