"""
Tests for the command line entry point
"""
from pathlib import Path
from unittest.mock import patch

import pytest

import main
from app.console import PromptAborted


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("FLIGHT_DISPATCHER_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("FLIGHT_DISPATCHER_OUTPUT", raising=False)
    return tmp_path / "home"


class TestParser:

    def test_flags(self, tmp_path):
        args = main.build_parser().parse_args(["--update", "--dry-run", "--silent", "--cwd", str(tmp_path), "-v"])

        assert args.update and args.dry_run and args.silent and args.verbose
        assert args.reset_profile is False
        assert args.cwd == tmp_path

    def test_defaults(self):
        args = main.build_parser().parse_args([])

        assert not any([args.update, args.dry_run, args.silent, args.reset_profile, args.verbose])
        assert isinstance(args.cwd, Path)


class TestMain:

    def test_silent_run_exits_zero(self, project_dir, isolated_home, no_git):
        exit_code = main.main(["--silent", "--cwd", str(project_dir)])

        assert exit_code == 0
        assert (project_dir / ".github" / "copilot-instructions.md").exists()
        assert (isolated_home / "profile.json").exists()

    def test_failure_exits_one(self, tmp_path, isolated_home, capsys):
        with patch.object(main.DispatchWorkflow, "run", return_value={"success": False, "error": "boom"}):
            exit_code = main.main(["--silent", "--cwd", str(tmp_path)])

        assert exit_code == 1
        assert "Error: boom" in capsys.readouterr().out

    def test_abort_exits_zero(self, tmp_path, isolated_home, capsys):
        with patch.object(main.DispatchWorkflow, "run", side_effect=PromptAborted()):
            exit_code = main.main(["--cwd", str(tmp_path)])

        assert exit_code == 0
        assert "Aborted by user." in capsys.readouterr().out
