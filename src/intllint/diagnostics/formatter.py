"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .result import LintResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format, one diagnostic per line
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate long text to prevent leaking message content
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum text length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        src/App.tsx:12:22: error: Camel case arguments are not allowed [no-camel-case]
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics
        """
        separator = "\n\n" if self.output_format == OutputFormat.RUST else "\n"
        return separator.join(self.format(d) for d in diagnostics)

    def format_result(self, result: "LintResult") -> str:
        """Format a LintResult with a summary line.

        Args:
            result: LintResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_clean:
            return f"{result.filename}: no problems"
        summary = (
            f"{result.filename}: {result.error_count} error(s), "
            f"{result.warning_count} warning(s)"
        )
        return f"{summary}\n{self.format_all(result.diagnostics)}"

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str | None:
        if diagnostic.span is None:
            return diagnostic.filename
        position = f"{diagnostic.span.line}:{diagnostic.span.column}"
        if diagnostic.filename:
            return f"{diagnostic.filename}:{position}"
        return f"line {diagnostic.span.line}, column {diagnostic.span.column}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[CAMEL_CASE_ARGUMENT]: Camel case arguments are not allowed
              --> src/App.tsx:12:22
              = rule: no-camel-case
              = help: Rename placeholder 'firstName' to lower case
              = note: see https://formatjs.io/docs/tooling/linter#no-camel-case
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.rule:
            parts.append(f"  = rule: {diagnostic.rule}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            src/App.tsx:12:22: error: Camel case arguments are not allowed [no-camel-case]
        """
        message = self._maybe_sanitize(diagnostic.message)
        location = self._location(diagnostic)
        prefix = f"{location}: " if location else ""
        suffix = f" [{diagnostic.rule}]" if diagnostic.rule else f" [{diagnostic.code.name}]"
        return f"{prefix}{diagnostic.severity}: {message}{suffix}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MULTIPLE_PLURALS", "message": "...", "severity": "error", ...}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.rule:
            data["rule"] = diagnostic.rule

        if diagnostic.filename:
            data["filename"] = diagnostic.filename

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.error_kind:
            data["error_kind"] = diagnostic.error_kind

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
