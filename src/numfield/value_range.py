"""Inclusive numeric bounds for committed values.

ValueRange is the range validator of a number input: every committed value
(blur, set_value, set_options) passes through clamp() before it is
formatted. In-progress typing is never clamped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from numfield.constants import MAX_SAFE_INTEGER
from numfield.diagnostics import ConfigurationError, ErrorTemplate
from numfield.value_types import NumericValue, to_decimal

__all__ = ["ValueRange"]


def _to_bound(value: NumericValue, name: str) -> Decimal:
    try:
        return to_decimal(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            ErrorTemplate.invalid_option_type(f"value_range.{name}", "finite number", value)
        ) from e


def _to_safe(bound: Decimal) -> Decimal:
    return min(max(bound, -MAX_SAFE_INTEGER), MAX_SAFE_INTEGER)


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive [min, max] bounds inside the safe-integer envelope.

    Each bound is converted to Decimal and clamped independently into
    [-MAX_SAFE_INTEGER, MAX_SAFE_INTEGER] at construction. Bounds that end
    up inverted raise ConfigurationError.

    Attributes:
        min: Lower bound (default: -MAX_SAFE_INTEGER)
        max: Upper bound (default: MAX_SAFE_INTEGER)

    Example:
        >>> ValueRange(min=0).clamp(Decimal("-50"))
        Decimal('0')
        >>> ValueRange(max=10**40).max == MAX_SAFE_INTEGER
        True
    """

    min: NumericValue = -MAX_SAFE_INTEGER
    max: NumericValue = MAX_SAFE_INTEGER

    def __post_init__(self) -> None:
        """Normalize bounds to Decimal and validate their order.

        Raises:
            ConfigurationError: If a bound is not a finite number, or min
                exceeds max after clamping
        """
        lower = _to_safe(_to_bound(self.min, "min"))
        upper = _to_safe(_to_bound(self.max, "max"))
        object.__setattr__(self, "min", lower)
        object.__setattr__(self, "max", upper)
        if lower > upper:
            raise ConfigurationError(ErrorTemplate.invalid_value_range(lower, upper))

    @classmethod
    def from_bounds(
        cls,
        minimum: NumericValue | None = None,
        maximum: NumericValue | None = None,
    ) -> ValueRange:
        """Build a range where an absent bound means "unbounded"."""
        return cls(
            min=-MAX_SAFE_INTEGER if minimum is None else minimum,
            max=MAX_SAFE_INTEGER if maximum is None else maximum,
        )

    def clamp(self, value: Decimal) -> Decimal:
        """Clamp value into [min, max].

        A signed zero is committed as zero when the range excludes negatives.
        """
        if value < self.min:
            return Decimal(self.min)
        if value > self.max:
            return Decimal(self.max)
        if value.is_zero() and self.min >= 0:
            return value.copy_abs()
        return value
