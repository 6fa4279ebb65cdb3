"""Dependency injection for FastAPI: the FlowValidator singleton."""

from __future__ import annotations

from maestrolint.parser.loader import FlowLoader
from maestrolint.validation.engine import FlowValidator

_validator: FlowValidator | None = None


def init_validator(validator: FlowValidator) -> None:
    """Set the global FlowValidator (called at app creation)."""
    global _validator  # noqa: PLW0603
    _validator = validator


def get_validator() -> FlowValidator:
    """FastAPI ``Depends`` provider for FlowValidator.

    Falls back to a default validator so routers work without app setup.
    """
    global _validator  # noqa: PLW0603
    if _validator is None:
        _validator = FlowValidator(FlowLoader())
    return _validator


def reset_validator() -> None:
    """Clear the global FlowValidator (for tests)."""
    global _validator  # noqa: PLW0603
    _validator = None
