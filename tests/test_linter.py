"""End-to-end tests for linter.py and the rule driver in rules/base.py.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from intllint import LintConfig, Linter, LintResult, SourceError
from intllint.diagnostics import DiagnosticCode
from intllint.enums import SourceLanguage
from intllint.linter import read_source
from intllint.rules import RULES, NoCamelCase

IMPORT = "import {defineMessage, FormattedMessage} from 'react-intl'\n"


def _messages(result: LintResult) -> list[str]:
    return [d.message for d in result.diagnostics]


@pytest.fixture
def linter() -> Linter:
    return Linter()


# ============================================================================
# Scenarios
# ============================================================================


class TestScenarios:
    """The canonical behaviours of the two default rules."""

    def test_camel_case_placeholder(self, linter: Linter) -> None:
        result = linter.lint_source(
            IMPORT + "defineMessage({defaultMessage: 'Hello {userName}'})", "a.js"
        )
        (diagnostic,) = result.diagnostics
        assert diagnostic.message == "Camel case arguments are not allowed"
        assert diagnostic.rule == "no-camel-case"
        assert diagnostic.filename == "a.js"
        assert diagnostic.span is not None
        # Anchored at the defaultMessage string literal
        assert (diagnostic.span.line, diagnostic.span.column) == (2, 32)

    def test_lower_case_placeholder_is_clean(self, linter: Linter) -> None:
        result = linter.lint_source(IMPORT + "defineMessage({defaultMessage: 'Hello {name}'})")
        assert result.is_clean

    def test_single_plural_is_clean(self, linter: Linter) -> None:
        source = (
            "intl.formatMessage({defaultMessage: "
            "'{count, plural, one {1 item} other {many items}}'})"
        )
        assert linter.lint_source(source).is_clean

    def test_nested_plural(self, linter: Linter) -> None:
        source = (
            "intl.formatMessage({defaultMessage: "
            "'{a, plural, one {{b, plural, one {x} other {y}}} other {z}}'})"
        )
        assert _messages(linter.lint_source(source)) == [
            "Cannot specify more than 1 plural rules"
        ]

    def test_unimported_define_message_is_ignored(self, linter: Linter) -> None:
        result = linter.lint_source("defineMessage({defaultMessage: 'Hi {userName}'})")
        assert result.is_clean

    def test_malformed_message_reported_by_each_rule(self, linter: Linter) -> None:
        result = linter.lint_source("formatMessage({defaultMessage: 'Hello {name'})")
        assert _messages(result) == ["EXPECT_ARGUMENT_CLOSING_BRACE"] * 2
        assert {d.rule for d in result.diagnostics} == {"no-camel-case", "no-multiple-plurals"}
        assert all(d.code is DiagnosticCode.ICU_SYNTAX_ERROR for d in result.diagnostics)
        assert all(d.error_kind == "EXPECT_ARGUMENT_CLOSING_BRACE" for d in result.diagnostics)

    def test_non_static_message_is_skipped(self, linter: Linter) -> None:
        assert linter.lint_source("formatMessage({defaultMessage: `Hi ${userName}`})").is_clean

    def test_empty_message_is_skipped(self, linter: Linter) -> None:
        assert linter.lint_source("formatMessage({defaultMessage: ''})").is_clean

    def test_jsx_element(self, linter: Linter) -> None:
        source = IMPORT + '<FormattedMessage defaultMessage="Hi {firstName}" />'
        result = linter.lint_source(source, "a.jsx")
        assert _messages(result) == ["Camel case arguments are not allowed"]


# ============================================================================
# Driver behaviour
# ============================================================================


class TestDriver:
    """Per-file state, ordering and import replacement."""

    def test_second_import_replaces_tracked_set(self, linter: Linter) -> None:
        source = (
            "import {defineMessage} from 'react-intl'\n"
            "import {FormattedMessage} from 'react-intl'\n"
            "defineMessage({defaultMessage: 'Hi {userName}'})\n"
        )
        # The second import replaced the first, so defineMessage is untracked
        assert linter.lint_source(source).is_clean

    def test_import_of_other_module_keeps_tracked_set(self, linter: Linter) -> None:
        source = (
            "import {defineMessage} from 'react-intl'\n"
            "import React from 'react'\n"
            "defineMessage({defaultMessage: 'Hi {userName}'})\n"
        )
        assert not linter.lint_source(source).is_clean

    def test_passes_are_independent(self, linter: Linter) -> None:
        first = linter.lint_source(IMPORT + "x()", "first.js")
        second = linter.lint_source("defineMessage({defaultMessage: 'Hi {userName}'})", "b.js")
        assert first.is_clean
        assert second.is_clean

    def test_diagnostics_sorted_by_position(self, linter: Linter) -> None:
        source = (
            "formatMessage({defaultMessage: '{a, plural, other {x}} {b, plural, other {y}}'})\n"
            "formatMessage({defaultMessage: 'Hi {userName}'})\n"
        )
        result = linter.lint_source(source)
        assert [d.rule for d in result.diagnostics] == ["no-multiple-plurals", "no-camel-case"]
        lines = [d.span.line for d in result.diagnostics if d.span is not None]
        assert lines == sorted(lines)

    def test_one_diagnostic_per_message_per_rule(self, linter: Linter) -> None:
        source = "formatMessage({defaultMessage: '{fooBar} {bazQux}'})"
        assert len(linter.lint_source(source).diagnostics) == 1

    def test_syntax_errors_in_source_do_not_raise(
        self, linter: Linter, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="intllint.linter"):
            result = linter.lint_source(
                "formatMessage({defaultMessage: 'Hi {userName}'})\nconst = ;"
            )
        assert isinstance(result, LintResult)
        assert "Syntax errors" in caplog.text

    def test_non_ascii_positions_are_characters(self, linter: Linter) -> None:
        source = "const s = 'ünïcödé'; formatMessage({defaultMessage: 'Hi {userName}'})"
        (diagnostic,) = linter.lint_source(source).diagnostics
        assert diagnostic.span is not None
        assert diagnostic.span.start == source.index("'Hi")
        assert diagnostic.span.column == source.index("'Hi") + 1


# ============================================================================
# Rule selection and configuration
# ============================================================================


class TestConfiguration:
    """Rules are chosen and configured through LintConfig."""

    def test_default_rules(self, linter: Linter) -> None:
        assert [rule.id for rule in linter.rules] == ["no-camel-case", "no-multiple-plurals"]
        assert isinstance(linter.rules[0], NoCamelCase)

    def test_unknown_rule(self) -> None:
        with pytest.raises(ValueError, match="Unknown rule"):
            Linter(LintConfig(rules=("no-such-rule",)))

    def test_registry(self) -> None:
        assert set(RULES) == {
            "no-camel-case",
            "no-multiple-plurals",
            "no-offset",
            "enforce-plural-rules",
        }
        for rule_id, rule in RULES.items():
            assert rule.meta.id == rule_id
            assert rule.meta.fixable == "code"
            assert rule.meta.url.endswith(f"#{rule_id}")

    def test_no_offset_rule(self) -> None:
        linter = Linter(LintConfig(rules=("no-offset",)))
        result = linter.lint_source(
            "formatMessage({defaultMessage: '{n, plural, offset:1 other {#}}'})"
        )
        assert _messages(result) == ["offset are not allowed in plural rules"]

    def test_enforce_plural_rules_with_locale(self) -> None:
        linter = Linter(LintConfig(rules=("enforce-plural-rules",), locale="pl"))
        result = linter.lint_source(
            "formatMessage({defaultMessage: '{n, plural, one {#} other {#}}'})"
        )
        assert _messages(result) == ['Missing plural rule "few"']

    def test_enforce_plural_rules_forbidden(self) -> None:
        config = LintConfig(rules=("enforce-plural-rules",), forbidden_plural_rules=("zero",))
        result = Linter(config).lint_source(
            "formatMessage({defaultMessage: '{n, plural, zero {none} other {#}}'})"
        )
        assert _messages(result) == ['Plural rule "zero" is forbidden']

    def test_enforce_plural_rules_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            Linter(LintConfig(rules=("enforce-plural-rules",), locale="xx-invalid-zz"))

    def test_requires_other_clause_off(self) -> None:
        source = "formatMessage({defaultMessage: '{n, plural, one {#}}'})"
        assert not Linter().lint_source(source).is_clean
        assert Linter(LintConfig(requires_other_clause=False)).lint_source(source).is_clean

    def test_custom_framework_module(self) -> None:
        source = (
            "import {defineMessage} from '@my/i18n'\n"
            "defineMessage({defaultMessage: 'Hi {userName}'})"
        )
        assert Linter().lint_source(source).is_clean
        assert not Linter(LintConfig(framework_module="@my/i18n")).lint_source(source).is_clean


# ============================================================================
# Host errors
# ============================================================================


class TestHostErrors:
    """Host problems become diagnostics instead of exceptions."""

    def test_unsupported_extension(self, linter: Linter) -> None:
        (diagnostic,) = linter.lint_source("x", "notes.md").diagnostics
        assert diagnostic.code is DiagnosticCode.SOURCE_UNSUPPORTED
        assert diagnostic.severity == "warning"

    def test_language_override(self, linter: Linter) -> None:
        result = linter.lint_source(
            "formatMessage({defaultMessage: 'Hi {userName}'})",
            "snippet.txt",
            language=SourceLanguage.JAVASCRIPT,
        )
        assert result.error_count == 1

    def test_source_too_large(self) -> None:
        linter = Linter(LintConfig(max_source_size=10))
        (diagnostic,) = linter.lint_source("const x = 'long enough'", "a.js").diagnostics
        assert diagnostic.code is DiagnosticCode.SOURCE_TOO_LARGE

    def test_missing_file(self, linter: Linter, tmp_path: Path) -> None:
        (diagnostic,) = linter.lint_file(tmp_path / "missing.js").diagnostics
        assert diagnostic.code is DiagnosticCode.SOURCE_UNREADABLE

    def test_undecodable_file(self, linter: Linter, tmp_path: Path) -> None:
        path = tmp_path / "bad.js"
        path.write_bytes(b"\xff\xfe\x00bad")
        (diagnostic,) = linter.lint_file(path).diagnostics
        assert diagnostic.code is DiagnosticCode.SOURCE_UNREADABLE

    def test_read_source_raises_source_error(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError) as exc_info:
            read_source(tmp_path / "missing.js")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_UNREADABLE


# ============================================================================
# Files and directories
# ============================================================================


class TestPaths:
    """lint_file and lint_paths."""

    def test_lint_file(self, linter: Linter, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text(
            "const m: string = intl.formatMessage({defaultMessage: 'Hi {userName}'})\n",
            encoding="utf-8",
        )
        result = linter.lint_file(path)
        assert result.filename == str(path)
        assert result.error_count == 1

    def test_lint_paths_walks_directories(self, linter: Linter, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "node_modules" / "lib").mkdir(parents=True)
        (tmp_path / "src" / "a.js").write_text("formatMessage({defaultMessage: 'x'})")
        (tmp_path / "src" / "b.tsx").write_text("formatMessage({defaultMessage: '{aB}'})")
        (tmp_path / "src" / "notes.md").write_text("# notes")
        (tmp_path / "node_modules" / "lib" / "c.js").write_text("x")

        results = list(linter.lint_paths([tmp_path]))
        names = [Path(r.filename).name for r in results]
        assert names == ["a.js", "b.tsx"]
        assert [r.error_count for r in results] == [0, 1]

    def test_explicit_file_is_always_linted(self, linter: Linter, tmp_path: Path) -> None:
        path = tmp_path / "notes.md"
        path.write_text("# notes")
        (result,) = linter.lint_paths([path])
        assert result.warning_count == 1
