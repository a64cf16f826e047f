"""Shared constants for intllint.

Centralizes the names the extractor recognizes and the limits shared by
the ICU parser, validators and host layer. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Framework names: module specifier, declaration functions, components
- Descriptor keys: property and attribute names of a message descriptor
- Depth limits: Recursion protection for ICU parsing and validation
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Framework names
    "FRAMEWORK_MODULE",
    "DEFINE_MESSAGE",
    "DEFINE_MESSAGES",
    "FORMATTED_MESSAGE",
    "FORMAT_FUNCTION_NAMES",
    "INTL_OBJECT_NAMES",
    # Descriptor keys
    "DESCRIPTOR_ID",
    "DESCRIPTOR_DEFAULT_MESSAGE",
    "DESCRIPTOR_DESCRIPTION",
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Documentation
    "DOCS_BASE_URL",
]

# ============================================================================
# FRAMEWORK NAMES
# ============================================================================

# Module specifier whose imports are tracked.
FRAMEWORK_MODULE: str = "react-intl"

# Imported names that declare messages. Only recognized through a tracked import.
DEFINE_MESSAGE: str = "defineMessage"
DEFINE_MESSAGES: str = "defineMessages"
FORMATTED_MESSAGE: str = "FormattedMessage"

# Format functions matched by bare name (hooks, Vue plugins, injected props).
FORMAT_FUNCTION_NAMES: frozenset[str] = frozenset({"formatMessage", "$formatMessage", "$t"})

# Receiver names for `intl.formatMessage(...)` member calls.
INTL_OBJECT_NAMES: frozenset[str] = frozenset({"intl", "$intl"})

# ============================================================================
# DESCRIPTOR KEYS
# ============================================================================

DESCRIPTOR_ID: str = "id"
DESCRIPTOR_DEFAULT_MESSAGE: str = "defaultMessage"
DESCRIPTOR_DESCRIPTION: str = "description"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: ICU parser (nested plural/select/tag), structural validators.
# 100 levels of nesting is almost certainly adversarial or malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DOCUMENTATION
# ============================================================================

DOCS_BASE_URL: str = "https://formatjs.io/docs/tooling/linter"
