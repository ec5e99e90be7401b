"""
Tests for git hook generation
"""
import stat

from domain.hooks import (
    HookEntry,
    HooksConfig,
    ask_hook_questions,
    generate_hook_script,
    relevant_presets,
    summarize_hooks,
    write_hooks,
)


def _entry(trigger="pre-commit", label="Lint", command="npm run lint", **kwargs):
    return HookEntry(trigger=trigger, label=label, command=command, **kwargs)


class TestPresets:
    """Test preset filtering by npm scripts."""

    def test_presets_require_matching_script(self):
        labels = [p.label for p in relevant_presets(["build", "lint"])]

        assert labels == [
            "Build before push",
            "Lint before commit",
            "Type-check before commit",
            "Security audit before push",
        ]

    def test_presets_without_scripts(self):
        labels = [p.label for p in relevant_presets([])]

        assert labels == ["Type-check before commit", "Security audit before push"]


class TestGenerateHookScript:
    """Test shell script rendering."""

    def test_script_structure(self):
        script = generate_hook_script("pre-push", [_entry("pre-push", "Build", "npm run build")])

        assert script.startswith("#!/bin/sh\n")
        assert "\nnpm run build\n" in script
        assert 'echo "Running: Build..."' in script
        assert "Build failed. Push aborted." in script
        assert script.endswith("exit 0\n")

    def test_abort_message_per_trigger(self):
        assert "Commit aborted." in generate_hook_script("pre-commit", [_entry()])
        assert "Operation aborted." in generate_hook_script("commit-msg", [_entry("commit-msg")])

    def test_one_guarded_block_per_entry(self):
        script = generate_hook_script("pre-commit", [_entry(label="A", command="a"), _entry(label="B", command="b")])

        assert script.count("exit 1") == 2
        assert script.index("Running: A") < script.index("Running: B")


class TestWriteHooks:
    """Test writing hook files into .git/hooks."""

    def test_groups_by_trigger(self, tmp_path):
        (tmp_path / ".git" / "hooks").mkdir(parents=True)
        config = HooksConfig(hooks=[
            _entry("pre-commit", "Lint", "npm run lint"),
            _entry("pre-push", "Test", "npm test"),
            _entry("pre-commit", "Types", "npx tsc --noEmit"),
        ])

        written = write_hooks(config, tmp_path)

        assert [p.name for p in written] == ["pre-commit", "pre-push"]
        pre_commit = (tmp_path / ".git" / "hooks" / "pre-commit").read_text()
        assert "npm run lint" in pre_commit
        assert "npx tsc --noEmit" in pre_commit
        assert "npm test" not in pre_commit

    def test_hooks_are_executable(self, tmp_path):
        (tmp_path / ".git" / "hooks").mkdir(parents=True)

        written = write_hooks(HooksConfig(hooks=[_entry()]), tmp_path)

        assert stat.S_IMODE(written[0].stat().st_mode) == 0o755

    def test_missing_hooks_dir_is_skipped(self, tmp_path):
        written = write_hooks(HooksConfig(hooks=[_entry()]), tmp_path)

        assert written == []
        assert not (tmp_path / ".git").exists()

    def test_empty_config_writes_nothing(self, tmp_path):
        (tmp_path / ".git" / "hooks").mkdir(parents=True)

        assert write_hooks(HooksConfig(), tmp_path) == []
        assert list((tmp_path / ".git" / "hooks").iterdir()) == []


class TestHookSummaryAndQuestions:
    """Test summary lines and hook selection prompts."""

    def test_summarize_hooks(self):
        config = HooksConfig(hooks=[_entry("pre-push", "Build before push", "npm run build")])

        assert summarize_hooks(config) == ["`pre-push`: Build before push (`npm run build`)"]

    def test_silent_mode_selects_nothing(self):
        assert ask_hook_questions(["build", "lint"], silent=True).hooks == []

    def test_preset_and_custom_selection(self, scripted_input):
        # presets for ["build"]: Build, Type-check, Security audit, then custom
        scripted_input("1,4", "3", "Check message", "./scripts/check-msg.sh", "")

        config = ask_hook_questions(["build"])

        assert [(h.trigger, h.label, h.is_custom) for h in config.hooks] == [
            ("pre-push", "Build before push", False),
            ("commit-msg", "Check message", True),
        ]
        assert config.hooks[1].command == "./scripts/check-msg.sh"

    def test_blank_selection(self, scripted_input):
        scripted_input("")

        assert ask_hook_questions(["build"]).hooks == []
