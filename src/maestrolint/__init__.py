"""maestrolint: diagnostics for Maestro UI-test flow YAML."""

from maestrolint.validation.engine import FlowValidator, validate

__version__ = "0.1.0"

__all__ = ["FlowValidator", "__version__", "validate"]
