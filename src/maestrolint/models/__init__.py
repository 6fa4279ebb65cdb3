"""Domain models for maestrolint."""

from maestrolint.models.errors import Diagnostic, Severity, SourcePosition, SourceRange
from maestrolint.models.flow import Command, CommandSequence

__all__ = [
    "Command",
    "CommandSequence",
    "Diagnostic",
    "Severity",
    "SourcePosition",
    "SourceRange",
]
