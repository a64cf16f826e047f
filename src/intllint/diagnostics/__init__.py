"""Diagnostic system for intllint.

Provides structured diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DepthLimitExceededError,
    IntlLintError,
    MessageSyntaxError,
    SourceError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .result import LintResult
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IntlLintError",
    "LintResult",
    "MessageSyntaxError",
    "OutputFormat",
    "SourceError",
    "SourceSpan",
]
