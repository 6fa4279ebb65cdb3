"""YAML loader that keeps character offsets for every node."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from maestrolint.parser.nodes import Mapping, Pair, Scalar, Sequence, Span, YamlNode

logger = logging.getLogger("maestrolint.loader")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_DEPTH = 100

# A document marker only counts at column 0, followed by whitespace or EOL.
_DOCUMENT_MARKER_RE = re.compile(r"^---(?=[ \t\r]|$)", re.MULTILINE)

_TAG_PREFIX = "tag:yaml.org,2002:"


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: these indicate oversized or pathologically
    nested input.
    """


@dataclass(frozen=True)
class SyntaxIssue:
    """A YAML syntax problem located at an offset (or at a node's span)."""

    message: str
    offset: int = 0
    span: Span | None = None


@dataclass
class ParsedDocument:
    """One YAML document of a flow file: its root (if any) and syntax issues."""

    root: YamlNode | None = None
    errors: list[SyntaxIssue] = field(default_factory=list)


class _NodeConverter:
    """Converts a ruamel.yaml node graph to immutable variants with absolute offsets."""

    def __init__(self, base: int, max_depth: int) -> None:
        self._base = base
        self._max_depth = max_depth
        self._done: dict[int, YamlNode] = {}
        self._active: set[int] = set()
        self.issues: list[SyntaxIssue] = []

    def _span(self, node: Node) -> Span | None:
        try:
            return Span(
                start=self._base + node.start_mark.index,
                end=self._base + node.end_mark.index,
            )
        except AttributeError:
            return None

    def convert(self, node: Node | None, depth: int = 0) -> YamlNode | None:
        if node is None:
            return None
        key = id(node)
        if key in self._done:
            return self._done[key]
        if key in self._active:
            # Alias pointing back at one of its own ancestors.
            logger.debug("Dropping recursive alias at offset %s", self._span(node))
            return None
        if depth > self._max_depth:
            span = self._span(node)
            self.issues.append(
                SyntaxIssue(
                    message=f"YAML nesting exceeds maximum depth ({self._max_depth})",
                    offset=span.start if span else 0,
                    span=span,
                )
            )
            return None

        self._active.add(key)
        try:
            result = self._convert(node, depth)
        finally:
            self._active.discard(key)
        if result is not None:
            self._done[key] = result
        return result

    def _convert(self, node: Node, depth: int) -> YamlNode | None:
        if isinstance(node, ScalarNode):
            return _scalar(node, self._span(node))
        if isinstance(node, SequenceNode):
            items = tuple(self.convert(item, depth + 1) for item in node.value)
            return Sequence(items=items, span=self._span(node))
        if isinstance(node, MappingNode):
            pairs: list[Pair] = []
            seen: set[Any] = set()
            for key_node, value_node in node.value:
                key = self.convert(key_node, depth + 1)
                if key is None:
                    continue
                if isinstance(key, Scalar):
                    if key.value in seen:
                        self.issues.append(
                            SyntaxIssue(
                                message="Map keys must be unique",
                                offset=key.span.start if key.span else 0,
                                span=key.span,
                            )
                        )
                    seen.add(key.value)
                pairs.append(Pair(key=key, value=self.convert(value_node, depth + 1)))
            return Mapping(pairs=tuple(pairs), span=self._span(node))
        return None


def _scalar(node: ScalarNode, span: Span | None) -> Scalar:
    """Type a scalar from its resolved YAML tag."""
    raw: str = node.value
    tag = node.tag or ""
    kind = tag[len(_TAG_PREFIX):] if tag.startswith(_TAG_PREFIX) else "str"
    value: str | int | float | bool | None = raw
    if kind == "null":
        value = None
    elif kind == "bool":
        value = raw.lower() in ("true", "yes", "on", "y")
    elif kind == "int":
        try:
            value = int(raw.replace("_", ""), 0)
        except ValueError:
            try:
                value = int(raw.replace("_", ""))
            except ValueError:
                value = raw
    elif kind == "float":
        try:
            value = float(raw.replace("_", ""))
        except ValueError:
            # .inf / .nan spellings
            lowered = raw.lower().lstrip("+")
            if lowered in (".inf", "-.inf"):
                value = float(lowered.replace(".", ""))
            elif lowered == ".nan":
                value = float("nan")
    else:
        kind = "str"
    return Scalar(value=value, span=span, tag=kind)


def _error_offset(exc: YAMLError) -> int:
    if isinstance(exc, MarkedYAMLError):
        for mark in (exc.problem_mark, exc.context_mark):
            if mark is not None and getattr(mark, "index", None) is not None:
                return int(mark.index)
    # ReaderError (non-printable characters) carries a bare position.
    position = getattr(exc, "position", None)
    if isinstance(position, int):
        return position
    return 0


def _error_message(exc: YAMLError) -> str:
    if isinstance(exc, MarkedYAMLError):
        parts = [p for p in (exc.context, exc.problem) if p]
        if parts:
            return ", ".join(parts)
    return str(exc).strip() or exc.__class__.__name__


def _has_content(text: str) -> bool:
    """True if *text* holds anything besides blank lines, comments and directives."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(("#", "%")):
            return True
    return False


class FlowLoader:
    """Parses flow text into document trees, one per YAML document.

    Uses ruamel.yaml's composer, which preserves start/end marks (with
    character indexes) on every node. The text is split at document markers
    first, so a syntax error only costs the document it occurs in.
    """

    def __init__(
        self,
        max_document_size: int = _MAX_DOCUMENT_SIZE,
        max_depth: int = _MAX_DEPTH,
    ) -> None:
        self._max_document_size = max_document_size
        self._max_depth = max_depth

    # -- safety checks -------------------------------------------------------

    def _check_yaml_safety(self, content: str) -> None:
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def parse(self, content: str) -> list[ParsedDocument]:
        """Parse all documents in *content*. Never raises on malformed input."""
        try:
            self._check_yaml_safety(content)
        except YAMLSafetyError as exc:
            return [ParsedDocument(errors=[SyntaxIssue(message=str(exc))])]

        documents: list[ParsedDocument] = []
        for start, end in self.document_chunks(content):
            documents.extend(self._parse_chunk(content[start:end], start))
        return documents

    @staticmethod
    def document_chunks(content: str) -> list[tuple[int, int]]:
        """Split *content* into ``(start, end)`` offset ranges, one per ``---`` marker."""
        starts = [0]
        for match in _DOCUMENT_MARKER_RE.finditer(content):
            offset = match.start()
            if _has_content(content[starts[-1]:offset]):
                starts.append(offset)
        ends = starts[1:] + [len(content)]
        return list(zip(starts, ends))

    def _parse_chunk(self, chunk: str, base: int) -> list[ParsedDocument]:
        yaml = YAML()
        converter = _NodeConverter(base, self._max_depth)
        documents: list[ParsedDocument] = []
        try:
            for node in yaml.compose_all(chunk):
                converter.issues = []
                root = converter.convert(node)
                documents.append(ParsedDocument(root=root, errors=list(converter.issues)))
        except YAMLError as exc:
            issue = SyntaxIssue(
                message=_error_message(exc),
                offset=base + _error_offset(exc),
            )
            logger.debug("YAML error in document at offset %d: %s", base, issue.message)
            documents.append(ParsedDocument(errors=[issue]))
        except RecursionError:
            documents.append(
                ParsedDocument(
                    errors=[
                        SyntaxIssue(
                            message="YAML nesting is too deep to parse",
                            offset=base,
                        )
                    ]
                )
            )
        return documents
