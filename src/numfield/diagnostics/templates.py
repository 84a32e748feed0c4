"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unknown_option(option_name: str, known: tuple[str, ...]) -> Diagnostic:
        """Option mapping contains a key that is not an option.

        Args:
            option_name: The unrecognized key
            known: Accepted option names (snake_case)

        Returns:
            Diagnostic for UNKNOWN_OPTION
        """
        msg = f"Unknown option '{option_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPTION,
            message=msg,
            hint=f"Use one of: {', '.join(known)} (camelCase accepted)",
            option_name=option_name,
        )

    @staticmethod
    def invalid_option_type(option_name: str, expected: str, received: object) -> Diagnostic:
        """Option value has an unsupported type.

        Args:
            option_name: Option being configured
            expected: Description of the accepted types
            received: The offending value

        Returns:
            Diagnostic for INVALID_OPTION_TYPE
        """
        msg = f"Option '{option_name}' expects {expected}, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPTION_TYPE,
            message=msg,
            option_name=option_name,
            received=repr(received),
        )

    @staticmethod
    def invalid_value_range(minimum: object, maximum: object) -> Diagnostic:
        """Value range bounds are inverted after clamping.

        Args:
            minimum: Effective lower bound
            maximum: Effective upper bound

        Returns:
            Diagnostic for INVALID_VALUE_RANGE
        """
        msg = f"Value range minimum {minimum} exceeds maximum {maximum}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE_RANGE,
            message=msg,
            hint="Swap the bounds or widen the range",
            option_name="value_range",
            received=f"min={minimum}, max={maximum}",
        )

    @staticmethod
    def invalid_precision(minimum: object, maximum: object) -> Diagnostic:
        """Fraction digit bounds are negative or inverted.

        Args:
            minimum: Requested minimum fraction digits
            maximum: Requested maximum fraction digits

        Returns:
            Diagnostic for INVALID_PRECISION
        """
        msg = f"Invalid precision: min={minimum}, max={maximum}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PRECISION,
            message=msg,
            hint="Fraction digits must be non-negative and min must not exceed max",
            option_name="precision",
        )

    @staticmethod
    def unknown_currency(currency: str, locale_code: str) -> Diagnostic:
        """Currency code is not a CLDR currency.

        Args:
            currency: The ISO 4217 code requested
            locale_code: Locale the currency was requested for

        Returns:
            Diagnostic for UNKNOWN_CURRENCY
        """
        msg = f"Unknown currency '{currency}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CURRENCY,
            message=msg,
            hint="Use an ISO 4217 code (EUR, USD, JPY) or CustomCurrency(prefix, suffix)",
            option_name="currency",
            received=repr(currency),
        )

    @staticmethod
    def formatting_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel could not render a number.

        Args:
            value: The number that failed to format
            locale_code: Locale used for formatting
            reason: Underlying error message

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' in '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            received=repr(value),
        )
