"""Configuration of a number input.

Provides frozen dataclasses for every option a NumberInput accepts, plus
conversion from plain mappings so that option dictionaries written for the
JavaScript heritage API (camelCase keys) work unchanged:

    # Python (snake_case):
    NumberInputOptions(value_as_integer=True, distraction_free=False)

    # Mapping (camelCase):
    NumberInputOptions.from_mapping({"valueAsInteger": True, "distractionFree": False})

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from numfield.diagnostics import ConfigurationError, ErrorTemplate
from numfield.enums import InputMode
from numfield.value_range import ValueRange

__all__ = [
    "CustomCurrency",
    "DistractionFree",
    "NumberInputOptions",
    "PrecisionRange",
]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    """Convert camelCase option name to snake_case.

    Examples:
        >>> _to_snake_case("valueAsInteger")
        'value_as_integer'
        >>> _to_snake_case("hide_currency_symbol")
        'hide_currency_symbol'
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _snake_case_mapping(
    mapping: Mapping[str, Any],
    known: tuple[str, ...],
) -> dict[str, Any]:
    """Rename mapping keys to snake_case, rejecting keys not in known."""
    result: dict[str, Any] = {}
    for key, value in mapping.items():
        name = _to_snake_case(key)
        if name not in known:
            raise ConfigurationError(ErrorTemplate.unknown_option(key, known))
        result[name] = value
    return result


@dataclass(frozen=True, slots=True)
class CustomCurrency:
    """Free-text currency affixes for units Babel does not know.

    Attributes:
        prefix: Text before the number (e.g., "Ƀ ")
        suffix: Text after the number (e.g., " pts")
    """

    prefix: str = ""
    suffix: str = ""


@dataclass(frozen=True, slots=True)
class PrecisionRange:
    """Bounds for the number of fraction digits.

    Attributes:
        min: Minimum fraction digits (default: 0)
        max: Maximum fraction digits (None: up to 20)
    """

    min: int = 0
    max: int | None = None

    def __post_init__(self) -> None:
        """Validate digit bounds.

        Raises:
            ConfigurationError: If a bound is negative or min exceeds max
        """
        if self.min < 0 or (self.max is not None and (self.max < 0 or self.min > self.max)):
            raise ConfigurationError(ErrorTemplate.invalid_precision(self.min, self.max))


@dataclass(frozen=True, slots=True)
class DistractionFree:
    """Formatting hidden while the field has focus.

    Attributes:
        hide_currency_symbol: Drop prefix/suffix, keep a bare minus sign
        hide_negligible_decimal_digits: Drop trailing zero fraction digits
        hide_grouping_symbol: Render without thousands separators
    """

    hide_currency_symbol: bool = True
    hide_negligible_decimal_digits: bool = True
    hide_grouping_symbol: bool = True

    @property
    def any(self) -> bool:
        """True when at least one kind of formatting is hidden on focus."""
        return (
            self.hide_currency_symbol
            or self.hide_negligible_decimal_digits
            or self.hide_grouping_symbol
        )

    @classmethod
    def resolve(cls, value: bool | Mapping[str, Any] | DistractionFree | None) -> DistractionFree:
        """Resolve the ``distraction_free`` option to explicit flags.

        ``True`` hides everything, ``False``/``None`` hides nothing. A mapping
        enables only the flags it sets to a truthy value.

        Raises:
            ConfigurationError: If value has an unsupported type
        """
        if isinstance(value, DistractionFree):
            return value
        if value is None or isinstance(value, bool):
            enabled = bool(value)
            return cls(enabled, enabled, enabled)
        if isinstance(value, Mapping):
            known = tuple(f.name for f in fields(cls))
            flags = _snake_case_mapping(value, known)
            return cls(**{name: bool(flags.get(name, False)) for name in known})
        raise ConfigurationError(
            ErrorTemplate.invalid_option_type("distraction_free", "bool or mapping", value)
        )


@dataclass(frozen=True, slots=True)
class NumberInputOptions:
    """Immutable configuration for a NumberInput.

    All fields have defaults; ``NumberInputOptions()`` formats plain decimal
    numbers in the host locale with full distraction-free mode.

    Attributes:
        locale: BCP 47 locale (None: detect from the host environment)
        currency: ISO 4217 code, CustomCurrency, or None for a plain number
        value_as_integer: Expose the value scaled by 10**maximum_fraction_digits
        distraction_free: Formatting hidden on focus (bool or DistractionFree)
        precision: Fixed fraction digits or a PrecisionRange
        auto_decimal_digits: Typed digits fill the fraction from the right
        value_range: Bounds applied to committed values
        allow_negative: Accept negative numbers

    Example:
        >>> options = NumberInputOptions(locale="de-DE", currency="EUR", precision=0)
        >>> options.input_mode
        <InputMode.DECIMAL: 'decimal'>
    """

    locale: str | None = None
    currency: str | CustomCurrency | None = None
    value_as_integer: bool = False
    distraction_free: bool | DistractionFree = True
    precision: int | PrecisionRange | None = None
    auto_decimal_digits: bool = False
    value_range: ValueRange | None = None
    allow_negative: bool = True

    def __post_init__(self) -> None:
        """Validate scalar options.

        Raises:
            ConfigurationError: If precision is a negative integer
        """
        if isinstance(self.precision, int) and not isinstance(self.precision, bool):
            if self.precision < 0:
                raise ConfigurationError(
                    ErrorTemplate.invalid_precision(self.precision, self.precision)
                )
        elif self.precision is not None and not isinstance(self.precision, PrecisionRange):
            raise ConfigurationError(
                ErrorTemplate.invalid_option_type("precision", "int or PrecisionRange", self.precision)
            )

    @property
    def suppression(self) -> DistractionFree:
        """Effective distraction-free flags.

        Auto decimal digits mode always shows every fraction digit, so it
        never hides negligible decimal digits.
        """
        flags = DistractionFree.resolve(self.distraction_free)
        if self.auto_decimal_digits:
            flags = replace(flags, hide_negligible_decimal_digits=False)
        return flags

    @property
    def effective_value_range(self) -> ValueRange:
        """Effective value range (unbounded when not configured)."""
        return self.value_range if self.value_range is not None else ValueRange()

    @property
    def input_mode(self) -> InputMode:
        """Virtual keyboard hint for the host field."""
        return InputMode.NUMERIC if self.auto_decimal_digits else InputMode.DECIMAL

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> NumberInputOptions:
        """Create options from a mapping with snake_case or camelCase keys.

        Keys missing from the mapping take their defaults, so passing a
        mapping always describes the complete configuration.

        Args:
            mapping: Option mapping, e.g. ``{"currency": "EUR",
                "valueRange": {"min": 0}}``. None means all defaults.

        Returns:
            Validated NumberInputOptions

        Raises:
            ConfigurationError: On unknown keys or unsupported value types
        """
        if mapping is None:
            return cls()
        known = tuple(f.name for f in fields(cls))
        values = _snake_case_mapping(mapping, known)
        if "currency" in values:
            values["currency"] = _coerce_currency(values["currency"])
        if "distraction_free" in values and isinstance(values["distraction_free"], Mapping):
            values["distraction_free"] = DistractionFree.resolve(values["distraction_free"])
        if "precision" in values:
            values["precision"] = _coerce_precision(values["precision"])
        if "value_range" in values:
            values["value_range"] = _coerce_value_range(values["value_range"])
        return cls(**values)


def _coerce_currency(value: object) -> str | CustomCurrency | None:
    if value is None or isinstance(value, (str, CustomCurrency)):
        return value
    if isinstance(value, Mapping):
        affixes = _snake_case_mapping(value, ("prefix", "suffix"))
        return CustomCurrency(**affixes)
    raise ConfigurationError(
        ErrorTemplate.invalid_option_type("currency", "str, mapping or CustomCurrency", value)
    )


def _coerce_precision(value: object) -> int | PrecisionRange | None:
    if value is None or isinstance(value, (int, PrecisionRange)):
        return value
    if isinstance(value, Mapping):
        bounds = _snake_case_mapping(value, ("min", "max"))
        return PrecisionRange(min=bounds.get("min") or 0, max=bounds.get("max"))
    raise ConfigurationError(
        ErrorTemplate.invalid_option_type("precision", "int, mapping or PrecisionRange", value)
    )


def _coerce_value_range(value: object) -> ValueRange | None:
    if value is None or isinstance(value, ValueRange):
        return value
    if isinstance(value, Mapping):
        bounds = _snake_case_mapping(value, ("min", "max"))
        return ValueRange.from_bounds(bounds.get("min"), bounds.get("max"))
    raise ConfigurationError(
        ErrorTemplate.invalid_option_type("value_range", "mapping or ValueRange", value)
    )
