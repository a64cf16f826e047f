"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from intllint.constants import DOCS_BASE_URL

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable messages
        - Consistent formatting
        - Documentation of all reportable cases
    """

    @staticmethod
    def rule_url(rule_id: str) -> str:
        """Documentation URL of a rule."""
        return f"{DOCS_BASE_URL}#{rule_id}"

    # ========================================================================
    # RULE VIOLATIONS
    # ========================================================================

    @staticmethod
    def camel_case_argument(name: str) -> Diagnostic:
        """Placeholder name contains an upper-case character.

        Args:
            name: The offending placeholder name

        Returns:
            Diagnostic for CAMEL_CASE_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.CAMEL_CASE_ARGUMENT,
            message="Camel case arguments are not allowed",
            hint=f"Rename placeholder '{name}' to lower case",
            help_url=ErrorTemplate.rule_url("no-camel-case"),
        )

    @staticmethod
    def multiple_plurals() -> Diagnostic:
        """Message contains more than one plural construct.

        Returns:
            Diagnostic for MULTIPLE_PLURALS
        """
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_PLURALS,
            message="Cannot specify more than 1 plural rules",
            hint="Split the message or move shared text into a single plural",
            help_url=ErrorTemplate.rule_url("no-multiple-plurals"),
        )

    @staticmethod
    def plural_offset(name: str, offset: int) -> Diagnostic:
        """Plural construct declares a non-zero offset.

        Args:
            name: Placeholder name of the plural
            offset: The declared offset

        Returns:
            Diagnostic for PLURAL_OFFSET
        """
        return Diagnostic(
            code=DiagnosticCode.PLURAL_OFFSET,
            message="offset are not allowed in plural rules",
            hint=f"Remove 'offset:{offset}' from plural '{name}'",
            help_url=ErrorTemplate.rule_url("no-offset"),
        )

    @staticmethod
    def missing_plural_rule(keyword: str) -> Diagnostic:
        """Plural construct lacks a required selector keyword.

        Args:
            keyword: The missing plural category

        Returns:
            Diagnostic for MISSING_PLURAL_RULE
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURAL_RULE,
            message=f'Missing plural rule "{keyword}"',
            hint=f"Add a '{keyword} {{...}}' option",
            help_url=ErrorTemplate.rule_url("enforce-plural-rules"),
        )

    @staticmethod
    def forbidden_plural_rule(keyword: str) -> Diagnostic:
        """Plural construct uses a forbidden selector keyword.

        Args:
            keyword: The forbidden plural category

        Returns:
            Diagnostic for FORBIDDEN_PLURAL_RULE
        """
        return Diagnostic(
            code=DiagnosticCode.FORBIDDEN_PLURAL_RULE,
            message=f'Plural rule "{keyword}" is forbidden',
            help_url=ErrorTemplate.rule_url("enforce-plural-rules"),
        )

    # ========================================================================
    # ICU SYNTAX ERRORS
    # ========================================================================

    @staticmethod
    def icu_syntax_error(kind: str, offset: int) -> Diagnostic:
        """ICU parser rejected the message.

        Args:
            kind: Parser error kind
            offset: Character offset in the message text

        Returns:
            Diagnostic for ICU_SYNTAX_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.ICU_SYNTAX_ERROR,
            message=kind,
            hint=f"Malformed ICU message at character {offset}",
            help_url="https://formatjs.io/docs/core-concepts/icu-syntax",
            error_kind=kind,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """ICU nesting exceeded the depth limit.

        Args:
            max_depth: The configured maximum depth

        Returns:
            Diagnostic for ICU_NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.ICU_NESTING_DEPTH_EXCEEDED,
            message=f"Maximum nesting depth ({max_depth}) exceeded",
            hint="Flatten nested plural, select or tag constructs",
        )

    # ========================================================================
    # HOST ERRORS
    # ========================================================================

    @staticmethod
    def source_unreadable(filename: str, reason: str) -> Diagnostic:
        """Source file could not be read or decoded.

        Args:
            filename: Path of the file
            reason: Underlying OS or decoding error text

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=f"Cannot read '{filename}': {reason}",
            filename=filename,
        )

    @staticmethod
    def source_unsupported(filename: str) -> Diagnostic:
        """No grammar is registered for the file extension.

        Args:
            filename: Path of the file

        Returns:
            Diagnostic for SOURCE_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNSUPPORTED,
            message=f"No grammar for '{filename}'",
            filename=filename,
            hint="Supported extensions: .js .jsx .mjs .cjs .ts .mts .cts .tsx .vue",
            severity="warning",
        )

    @staticmethod
    def source_too_large(filename: str, size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            filename: Path of the file
            size: Source size in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"Source '{filename}' has {size} characters, limit is {limit}",
            filename=filename,
            severity="warning",
        )
