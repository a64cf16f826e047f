"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Rule violations (structural checks on parsed messages)
        3000-3999: ICU syntax errors (message parser failures)
        4000-4999: Host errors (file access, grammar selection, input limits)
    """

    # Rule violations (1000-1999)
    CAMEL_CASE_ARGUMENT = 1001
    MULTIPLE_PLURALS = 1002
    PLURAL_OFFSET = 1003
    MISSING_PLURAL_RULE = 1004
    FORBIDDEN_PLURAL_RULE = 1005

    # ICU syntax errors (3000-3999)
    ICU_SYNTAX_ERROR = 3001
    ICU_NESTING_DEPTH_EXCEEDED = 3002

    # Host errors (4000-4999)
    SOURCE_UNREADABLE = 4001
    SOURCE_UNSUPPORTED = 4002
    SOURCE_TOO_LARGE = 4003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Tree-sitter reports byte offsets; the host layer converts
        them before building a span.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Produced by ErrorTemplate without a position; the rule driver attaches
    the anchor span, rule id and filename with dataclasses.replace().

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        span: Source location of the anchor node (None until reported)
        rule: Id of the rule that reported it (None for host errors)
        filename: File the diagnostic belongs to
        hint: Suggestion for fixing the problem
        help_url: Documentation URL for the rule
        error_kind: ICU parser error kind (syntax errors only)
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    rule: str | None = None
    filename: str | None = None
    hint: str | None = None
    help_url: str | None = None
    error_kind: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CAMEL_CASE_ARGUMENT]: Camel case arguments are not allowed
              --> src/App.tsx:12:22
              = rule: no-camel-case
              = help: Rename the placeholder to lower case
              = note: see https://formatjs.io/docs/tooling/linter#no-camel-case

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
