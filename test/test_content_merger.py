"""
Tests for content_merger and timestamp_updater modules
"""
from domain.instructions import (
    DEFAULT_PRESERVED_SECTIONS,
    join_sections,
    merge_documents,
    parse_sections,
    update_timestamp,
)


NEW_DOCUMENT = """# Copilot Instructions — demo

> Auto-generated by flight-dispatcher on 2026-03-04. Re-run `flight-dispatcher --update` to update.

## About This Project

_No description yet. Describe what this project does._

## Tech Stack

- **Language:** TypeScript

## Architecture Rules

_No architecture rules defined yet._

## Pending TODOs

_No pending TODOs._
"""


class TestMergeDocuments:
    """Test section-level merge policy."""

    def test_preserved_section_comes_from_existing(self):
        existing = "## About This Project\nHello"
        new = "## About This Project\nGoodbye\n\n## Tech Stack\n- Python"

        merged = merge_documents(existing, new)

        assert "## About This Project\nHello" in merged
        assert "Goodbye" not in merged
        assert "## Tech Stack\n- Python" in merged

    def test_fresh_sections_win(self):
        existing = "## Tech Stack\n- JavaScript\n\n## Deployment\n- Target: VPS"
        new = "## Tech Stack\n- TypeScript\n\n## Deployment\n- Target: Vercel"

        merged = merge_documents(existing, new)

        assert merged == "## Tech Stack\n- TypeScript\n\n## Deployment\n- Target: Vercel\n"

    def test_template_governs_order(self):
        existing = "## Pending TODOs\n- [ ] t\n\n## Architecture Rules\n- r\n\n## About This Project\nmine"
        new = "## About This Project\nx\n\n## Architecture Rules\ny\n\n## Pending TODOs\nz"

        merged = merge_documents(existing, new)

        assert [s.header for s in parse_sections(merged)] == [
            "About This Project",
            "Architecture Rules",
            "Pending TODOs",
        ]
        assert merged == "## About This Project\nmine\n\n## Architecture Rules\n- r\n\n## Pending TODOs\n- [ ] t\n"

    def test_preserved_header_missing_from_existing_uses_new(self):
        merged = merge_documents("## Tech Stack\nold", "## Architecture Rules\n- fresh rule")

        assert merged.startswith("## Architecture Rules\n- fresh rule")

    def test_custom_sections_are_appended_in_existing_order(self):
        existing = "## Team Notes\nnotes\n\n## Tech Stack\nold\n\n## Glossary\nterms"
        new = "## Tech Stack\nnew\n\n## Deployment\nd"

        merged = merge_documents(existing, new)

        assert [s.header for s in parse_sections(merged)] == ["Tech Stack", "Deployment", "Team Notes", "Glossary"]
        assert merged.endswith("## Team Notes\nnotes\n\n## Glossary\nterms\n")

    def test_duplicate_preserved_header_uses_last_existing(self):
        existing = "## About This Project\nfirst\n\n## About This Project\nsecond"
        new = "## About This Project\nnew"

        assert merge_documents(existing, new) == "## About This Project\nsecond\n"

    def test_first_run_equals_parse_and_rejoin(self):
        expected = join_sections(parse_sections(NEW_DOCUMENT))

        assert merge_documents("", NEW_DOCUMENT) == expected
        assert merge_documents("no headings at all", NEW_DOCUMENT) == expected

    def test_malformed_input_never_raises(self):
        assert merge_documents("", "") == "\n"
        assert merge_documents("garbage", "more garbage") == "\n"
        assert merge_documents("## Custom\nkeep", "") == "## Custom\nkeep\n"

    def test_custom_policy(self):
        existing = "## Tech Stack\nhand tuned\n\n## About This Project\nmine"
        new = "## Tech Stack\ngenerated\n\n## About This Project\ngenerated"

        merged = merge_documents(existing, new, preserved_headers={"Tech Stack"})

        assert merged == "## Tech Stack\nhand tuned\n\n## About This Project\ngenerated\n"

    def test_default_policy(self):
        assert DEFAULT_PRESERVED_SECTIONS == {"About This Project", "Pending TODOs", "Architecture Rules"}

    def test_merge_output_is_stable_under_reparse(self, existing_document):
        merged = merge_documents(existing_document, NEW_DOCUMENT)

        assert join_sections(parse_sections(merged)) == merged
        assert merge_documents(merged, NEW_DOCUMENT) == merged

    def test_real_documents(self, existing_document):
        merged = merge_documents(existing_document, NEW_DOCUMENT)

        assert "A hand-written description of the demo project." in merged
        assert "- Keep controllers thin" in merged
        assert "- [ ] Add rate limiting" in merged
        assert "- **Language:** TypeScript" in merged
        assert "- **Language:** JavaScript" not in merged
        assert "on 2026-03-04" in merged
        assert merged.rstrip().endswith("## Team Notes\n\nCustom section written by a human.")


class TestUpdateTimestamp:
    """Test banner timestamp rewriting."""

    def test_replaces_date(self):
        text = "# T\n\n> Auto-generated by flight-dispatcher on 2025-01-01. Re-run `x` to update.\n"

        updated = update_timestamp(text, "2026-01-01")

        assert updated == "# T\n\n> Auto-generated by flight-dispatcher on 2026-01-01. Re-run `x` to update.\n"

    def test_no_banner_is_noop(self):
        assert update_timestamp("no banner here", "2026-01-01") == "no banner here"

    def test_only_first_banner_is_replaced(self):
        banner = "> Auto-generated by flight-dispatcher on {}. Re-run `x` to update."
        text = banner.format("2025-01-01") + "\n\n" + banner.format("2024-05-05")

        updated = update_timestamp(text, "2026-01-01")

        assert updated == banner.format("2026-01-01") + "\n\n" + banner.format("2024-05-05")

    def test_other_re_run_mentions_untouched(self):
        text = "Re-run the tests. Re-run again.\n> Auto-generated by flight-dispatcher on old. Re-run `x`."

        updated = update_timestamp(text, "2026-02-02")

        assert updated.startswith("Re-run the tests. Re-run again.\n")
        assert updated.endswith("on 2026-02-02. Re-run `x`.")

    def test_date_is_inserted_literally(self):
        text = "> Auto-generated by flight-dispatcher on 2025-01-01. Re-run"

        assert update_timestamp(text, r"\1-odd") == r"> Auto-generated by flight-dispatcher on \1-odd. Re-run"
