"""Pytest configuration for the numfield test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from numfield import MemoryTextField, NumberInput, NumberInputCallbacks, NumberInputValue

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    # Explicit override via env var
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    # GitHub Actions sets CI=true automatically
    if os.environ.get("CI") == "true":
        return "ci"

    # Local development
    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


class CallbackRecorder:
    """Records values passed to on_input and on_change."""

    def __init__(self) -> None:
        self.inputs: list[NumberInputValue] = []
        self.changes: list[NumberInputValue] = []

    @property
    def callbacks(self) -> NumberInputCallbacks:
        return NumberInputCallbacks(on_input=self.inputs.append, on_change=self.changes.append)

    def clear(self) -> None:
        self.inputs.clear()
        self.changes.clear()


@pytest.fixture
def recorder() -> CallbackRecorder:
    """Fresh callback recorder."""
    return CallbackRecorder()


@pytest.fixture
def make_input(
    recorder: CallbackRecorder,
) -> Callable[..., tuple[NumberInput, MemoryTextField]]:
    """Factory binding a NumberInput to a new MemoryTextField.

    Usage: ``number_input, field = make_input({"locale": "en-US"}, value="12")``
    """

    def factory(
        options: Any = None, *, value: str = "", **kwargs: Any
    ) -> tuple[NumberInput, MemoryTextField]:
        field = MemoryTextField(value)
        number_input = NumberInput(field, options, recorder.callbacks, **kwargs)
        return number_input, field

    return factory
