"""Flow validation engine."""

from maestrolint.validation.diagnostics import DiagnosticBuilder
from maestrolint.validation.engine import FlowValidator, validate
from maestrolint.validation.rules import CommandRules, SequencePass, SequenceRules

__all__ = [
    "CommandRules",
    "DiagnosticBuilder",
    "FlowValidator",
    "SequencePass",
    "SequenceRules",
    "validate",
]
