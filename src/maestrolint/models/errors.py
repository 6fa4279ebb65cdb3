"""Diagnostic models with resolved source ranges."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Severity(StrEnum):
    """Error: Maestro cannot run the command as written. Warning: likely flaky."""

    ERROR = "error"
    WARNING = "warning"


class SourcePosition(BaseModel):
    """0-based line and character inside the flow text."""

    line: int
    character: int


class SourceRange(BaseModel):
    """Start/end positions of the node a diagnostic points at."""

    start: SourcePosition
    end: SourcePosition


class Diagnostic(BaseModel):
    """One finding against a flow.

    ``message`` is display-ready: it carries the command name (if any) and the
    1-based line number as a prefix, followed by the explanation and a fix.
    """

    level: Severity
    code: str
    message: str
    range: SourceRange
    command: str | None = None
    line: int
    suggestions: list[str] = []

    @property
    def is_error(self) -> bool:
        return self.level == Severity.ERROR
