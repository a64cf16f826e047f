"""intllint - ICU message linter for JavaScript, TypeScript and Vue sources.

Finds the messages an application declares through its i18n framework
(``defineMessage``, ``<FormattedMessage>``, ``intl.formatMessage`` and
friends), parses their ICU default messages and checks them against
structural rules.

Public API:
    Linter - Runs the enabled rules over sources, files and directories
    LintConfig - Immutable linter configuration
    LintResult - Diagnostics for one file
    parse_message - Parse ICU message text to an element tree

Exceptions:
    IntlLintError - Base exception class
    MessageSyntaxError - Malformed ICU message
    SourceError - Source cannot be linted

Submodules:
    intllint.icu - ICU element tree and parser
    intllint.extraction - Import tracking and message extraction
    intllint.rules - Rules, validators and the rule registry
    intllint.diagnostics - Diagnostic codes, formatting and errors
    intllint.host - Grammars, source positions, Vue components, traversal
"""

from .config import LintConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    IntlLintError,
    LintResult,
    MessageSyntaxError,
    SourceError,
)
from .icu import parse_message
from .linter import Linter
from .rules import RULES

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intllint")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "RULES",
    "Diagnostic",
    "DiagnosticFormatter",
    "IntlLintError",
    "LintConfig",
    "LintResult",
    "Linter",
    "MessageSyntaxError",
    "SourceError",
    "__version__",
    "parse_message",
]
