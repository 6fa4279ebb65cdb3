"""YAML parsing with offset fidelity for Maestro flows."""

from maestrolint.parser.loader import FlowLoader, ParsedDocument, SyntaxIssue, YAMLSafetyError
from maestrolint.parser.nodes import Mapping, Scalar, Sequence, Span
from maestrolint.parser.positions import LineIndex

__all__ = [
    "FlowLoader",
    "LineIndex",
    "Mapping",
    "ParsedDocument",
    "Scalar",
    "Sequence",
    "Span",
    "SyntaxIssue",
    "YAMLSafetyError",
]
