"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for configuration and
formatting failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (invalid options)
        2000-2999: Formatting errors (locale-aware rendering failures)
    """

    # Configuration errors (1000-1999)
    UNKNOWN_OPTION = 1001
    INVALID_VALUE_RANGE = 1002
    INVALID_PRECISION = 1003
    UNKNOWN_CURRENCY = 1004
    INVALID_OPTION_TYPE = 1005

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        option_name: Option that caused the error (configuration errors)
        received: Offending value, rendered with repr()
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    option_name: str | None = None
    received: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[INVALID_VALUE_RANGE]: Value range minimum 10 exceeds maximum 5
              = option: value_range
              = received: min=10, max=5
              = help: Swap the bounds or widen the range

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.option_name is not None:
            lines.append(f"  = option: {self.option_name}")
        if self.received is not None:
            lines.append(f"  = received: {self.received}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
