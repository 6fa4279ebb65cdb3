"""Turns rule findings into display-ready diagnostics."""

from __future__ import annotations

from maestrolint.models.errors import Diagnostic, Severity, SourcePosition, SourceRange
from maestrolint.parser.nodes import Span
from maestrolint.parser.positions import LineIndex


class DiagnosticBuilder:
    """Resolves spans against one document and formats messages.

    The message prefix (``"tapOn at line 3: "`` / ``"Line 3: "``) is what
    editors and API clients show verbatim, so it is built here and nowhere else.
    """

    def __init__(self, text: str, index: LineIndex | None = None) -> None:
        self._text = text
        self._index = index or LineIndex(text)

    def range_for(self, span: Span | None) -> SourceRange:
        """Resolve *span* to positions, degrading to the document start."""
        if span is None:
            origin = SourcePosition(line=0, character=0)
            return SourceRange(start=origin, end=origin)
        start = self._index.clamp(span.start)
        end = max(start, self._index.clamp(span.end))
        return SourceRange(start=self._index.position(start), end=self._index.position(end))

    def build(
        self,
        level: Severity,
        code: str,
        message: str,
        span: Span | None = None,
        command: str | None = None,
        suggestions: list[str] | None = None,
    ) -> Diagnostic:
        source_range = self.range_for(span)
        line = source_range.start.line + 1
        prefix = f"{command} at line {line}: " if command else f"Line {line}: "
        return Diagnostic(
            level=level,
            code=code,
            message=f"{prefix}{message}",
            range=source_range,
            command=command,
            line=line,
            suggestions=list(suggestions or []),
        )

    def error(self, code: str, message: str, span: Span | None = None, command: str | None = None) -> Diagnostic:
        return self.build(Severity.ERROR, code, message, span, command)

    def warning(self, code: str, message: str, span: Span | None = None, command: str | None = None) -> Diagnostic:
        return self.build(Severity.WARNING, code, message, span, command)

    def at_offset(self, code: str, message: str, offset: int) -> Diagnostic:
        """An error pinned to a single offset (used for YAML syntax errors)."""
        return self.error(code, message, Span(start=offset, end=offset))
