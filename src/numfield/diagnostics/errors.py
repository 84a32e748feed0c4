"""numfield exception hierarchy with structured diagnostics.

Only configuration raises. Event handling degrades gracefully instead:
out-of-range values clamp, unparseable text becomes "no value".

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["ConfigurationError", "FormattingError", "NumFieldError"]


class NumFieldError(Exception):
    """Base exception for all numfield errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumFieldError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(NumFieldError, ValueError):
    """Invalid number input options.

    Raised at construction and by set_options(), never while the user types.

    Examples:
    - value_range with min greater than max
    - negative precision
    - unknown ISO 4217 currency code
    - unknown option key in a mapping
    """


class FormattingError(NumFieldError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value usable in place of the rendering.

    Attributes:
        fallback_value: String to use when the formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
