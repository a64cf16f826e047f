"""Lint result aggregate for one file pass.

Python 3.13+.
"""

from collections import defaultdict
from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["LintResult"]


@dataclass(frozen=True, slots=True)
class LintResult:
    """Immutable diagnostics collected for one source file.

    Diagnostics are ordered by position; host diagnostics without a span
    come first.

    Attributes:
        filename: File the diagnostics belong to
        diagnostics: Reported diagnostics

    Example:
        >>> result = linter.lint_source('const x = 1', "a.js")
        >>> result.is_clean
        True
        >>> result.error_count
        0
    """

    filename: str
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True when nothing was reported."""
        return len(self.diagnostics) == 0

    @property
    def error_count(self) -> int:
        """Number of error-severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == "error")

    @property
    def warning_count(self) -> int:
        """Number of warning-severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == "warning")

    def by_rule(self) -> dict[str, tuple[Diagnostic, ...]]:
        """Group diagnostics by reporting rule id.

        Host diagnostics (no rule) are grouped under the empty string.

        Returns:
            Mapping of rule id to its diagnostics, in report order
        """
        grouped: defaultdict[str, list[Diagnostic]] = defaultdict(list)
        for diagnostic in self.diagnostics:
            grouped[diagnostic.rule or ""].append(diagnostic)
        return {rule: tuple(items) for rule, items in grouped.items()}

    def format(self) -> str:
        """Format result as human-readable string.

        Returns:
            Summary line followed by every diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format_result(self)

    @staticmethod
    def sort_key(diagnostic: Diagnostic) -> tuple[int, int, str]:
        """Ordering key: span start, then code value, then rule id."""
        start = diagnostic.span.start if diagnostic.span is not None else -1
        return (start, diagnostic.code.value, diagnostic.rule or "")
