"""
Test configuration and fixtures
"""
import json
import pytest
from pathlib import Path

from app.config import Settings
from domain.project import detector


EXISTING_DOCUMENT = """# Copilot Instructions — demo

> Auto-generated by flight-dispatcher on 2025-01-01. Re-run `flight-dispatcher --update` to update.

## About This Project

A hand-written description of the demo project.

## Tech Stack

- **Language:** JavaScript

## Architecture Rules

- Keep controllers thin
- Never import from `internal/` outside its package

## Pending TODOs

- [ ] Add rate limiting
- [x] Migrate to pnpm

## Team Notes

Custom section written by a human.
"""


@pytest.fixture
def existing_document():
    """Previously written document with hand edits and a custom section."""
    return EXISTING_DOCUMENT


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the real home directory."""
    return Settings(
        home_dir=tmp_path / "home",
        output_file=".github/copilot-instructions.md",
        log_level="WARNING",
        log_format="text",
    )


@pytest.fixture
def project_dir(tmp_path):
    """Minimal Next.js + Prisma project on disk."""
    root = tmp_path / "demo-app"
    root.mkdir()
    (root / "package.json").write_text(json.dumps({
        "name": "demo-app",
        "scripts": {"build": "next build", "lint": "eslint .", "test": "vitest"},
        "dependencies": {"next": "14.2.0", "react": "18.3.0", "@prisma/client": "5.0.0", "zod": "3.0.0"},
        "devDependencies": {"typescript": "5.4.0", "vitest": "1.0.0", "tailwindcss": "3.4.0"},
    }))
    (root / "tsconfig.json").write_text(json.dumps({
        "compilerOptions": {"strict": True, "paths": {"@/*": ["./src/*"]}},
    }))
    (root / "pnpm-lock.yaml").write_text("")
    (root / "prisma").mkdir()
    (root / "prisma" / "schema.prisma").write_text(
        'generator client {\n  provider = "prisma-client-js"\n}\n\n'
        'datasource db {\n  provider = "postgresql"\n  url = env("DATABASE_URL")\n}\n\n'
        "model User {\n  id Int @id\n}\n\nmodel Post {\n  id Int @id\n}\n"
    )
    (root / "src" / "app").mkdir(parents=True)
    (root / "src" / "components").mkdir()
    (root / ".env.example").write_text("# comment\nDATABASE_URL=postgres://\nNEXTAUTH_SECRET=\n")
    return root


@pytest.fixture
def no_git(monkeypatch):
    """Disable git subprocess calls in the detector."""
    monkeypatch.setattr(detector, "_git", lambda root, *args: None)


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed prepared answers to input(); raises EOFError when exhausted."""
    def _install(*answers):
        remaining = list(answers)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return remaining

    return _install


@pytest.fixture
def camel_case_profile():
    """profile.json as written by earlier releases (camelCase keys)."""
    return {
        "name": "Grace",
        "pronouns": "they/them",
        "languagePreference": "Go",
        "codeStyle": {"indentation": "tabs", "quotes": "double", "semicolons": True},
        "testFramework": "Go test",
        "verbosity": "detailed",
        "customRules": ["Return errors, never panic"],
        "commentStyle": "Inline comments for complex logic only",
        "commitStyle": "freeform",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-01T10:00:00.000Z",
    }
