"""
flight-dispatcher CLI

.github/copilot-instructions.md 를 생성하거나 (--update) 기존 문서와 병합합니다.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from app import console
from app.console import PromptAborted
from app.logging_config import get_logger, setup_logging_from_env
from domain.langgraph import DispatchFlags, DispatchWorkflow

logger = get_logger("main")

EPILOG = """\
Output:
  .github/copilot-instructions.md

Global profile:
  ~/.flight-dispatcher/profile.json
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-dispatcher",
        description="Generate .github/copilot-instructions.md",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--update", action="store_true", help="Re-detect + merge, preserve manual edits")
    parser.add_argument("--dry-run", action="store_true", help="Preview output without writing anything")
    parser.add_argument("--silent", action="store_true", help="No questions, auto-detect only")
    parser.add_argument("--reset-profile", action="store_true", help="Redo global developer profile")
    parser.add_argument("--cwd", type=Path, default=Path.cwd(), help="Project directory (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 실행 함수"""
    args = build_parser().parse_args(argv)
    setup_logging_from_env("DEBUG" if args.verbose else None)

    flags = DispatchFlags(
        update=args.update,
        dry_run=args.dry_run,
        silent=args.silent,
        reset_profile=args.reset_profile,
    )

    console.banner()
    try:
        result = DispatchWorkflow(args.cwd).run(flags)
    except PromptAborted:
        print("\n")
        console.warn("Aborted by user.")
        return 0

    console.blank()
    if not result["success"]:
        console.error(f"Error: {result['error']}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
