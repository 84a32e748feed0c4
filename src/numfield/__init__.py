"""numfield - Locale-aware number and currency entry for text fields.

Binds a text field to a number: the field always shows a locale-formatted
rendering of the number while the user types digits, separators and a sign
anywhere in it. Formatting is hidden on focus (distraction-free mode),
committed values are clamped into a range, and the caret stays next to the
character the user just typed.

Public API:
    NumberInput - Controller bound to a text field
    NumberInputOptions - Immutable configuration
    NumberInputValue - (number, formatted) pair reported to callers
    NumberInputCallbacks - on_input/on_change observers
    MemoryTextField - Headless text field

Exceptions:
    NumFieldError - Base exception class
    ConfigurationError - Invalid options

Submodules:
    numfield.options - Option dataclasses (DistractionFree, PrecisionRange, ...)
    numfield.formatting - NumberFormat, LocaleContext, mask strategies
    numfield.controller - Conformance, caret and focus components
    numfield.field - TextField and Scheduler protocols
    numfield.diagnostics - Error types and diagnostics
"""

# Essential Public API - Minimal exports for clean namespace
from .controller import NumberInput, NumberInputCallbacks
from .diagnostics import ConfigurationError, FormattingError, NumFieldError
from .enums import FocusState, InputMode, InputType
from .field import DeferredScheduler, ImmediateScheduler, MemoryTextField
from .options import CustomCurrency, DistractionFree, NumberInputOptions, PrecisionRange
from .value_range import ValueRange
from .value_types import NumberInputValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numfield")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CustomCurrency",
    "DeferredScheduler",
    "DistractionFree",
    "FocusState",
    "FormattingError",
    "ImmediateScheduler",
    "InputMode",
    "InputType",
    "MemoryTextField",
    "NumFieldError",
    "NumberInput",
    "NumberInputCallbacks",
    "NumberInputOptions",
    "NumberInputValue",
    "PrecisionRange",
    "ValueRange",
    "__version__",
]
