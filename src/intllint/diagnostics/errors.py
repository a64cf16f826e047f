"""intllint exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Rule handlers convert them back into reported diagnostics; none of them
escape a file pass.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class IntlLintError(Exception):
    """Base exception for all intllint errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlLintError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageSyntaxError(IntlLintError):
    """Malformed ICU message content.

    Raised by the ICU parser. The rule driver reports it at the message's
    anchor node with the parser's own description.

    Attributes:
        kind: Parser error kind (e.g. "EXPECT_ARGUMENT_CLOSING_BRACE")
        offset: Character offset in the message text where parsing failed
        original_message: The message text that failed to parse
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: str = "",
        offset: int = 0,
        original_message: str = "",
    ) -> None:
        """Initialize MessageSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            kind: Parser error kind
            offset: Character offset in the message text
            original_message: The message text that failed to parse
        """
        super().__init__(message)
        self.kind = kind
        self.offset = offset
        self.original_message = original_message


class SourceError(IntlLintError):
    """Source file cannot be linted.

    Examples:
    - File cannot be read or decoded
    - Extension has no grammar
    - Source exceeds the configured size limit
    """


class DepthLimitExceededError(IntlLintError):
    """Raised when maximum ICU nesting depth is exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Malformed programmatic element tree construction
    """
