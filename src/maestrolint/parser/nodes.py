"""Immutable YAML node variants produced by the loader.

Rules and the command extractor only ever see these three shapes, never the
underlying ruamel.yaml node classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    """Half-open character-offset interval ``[start, end)`` in the flow text."""

    start: int
    end: int


@dataclass(frozen=True)
class Scalar:
    """A scalar value: string, number, boolean, or null."""

    value: str | int | float | bool | None
    span: Span | None = None
    tag: str = "str"


@dataclass(frozen=True)
class Pair:
    """One ``key: value`` entry of a mapping. ``value`` is None when unresolvable."""

    key: YamlNode
    value: YamlNode | None


@dataclass(frozen=True)
class Mapping:
    """A mapping with its pairs in source order."""

    pairs: tuple[Pair, ...] = field(default_factory=tuple)
    span: Span | None = None


@dataclass(frozen=True)
class Sequence:
    """A sequence with its items in source order."""

    items: tuple[YamlNode | None, ...] = field(default_factory=tuple)
    span: Span | None = None


YamlNode = Scalar | Mapping | Sequence


# ---------------------------------------------------------------------------
# Narrowing helpers
# ---------------------------------------------------------------------------


def string_value(node: YamlNode | None) -> str | None:
    """Return the node's value if it is a string scalar, else None."""
    if isinstance(node, Scalar) and isinstance(node.value, str):
        return node.value
    return None


def non_blank_string(node: YamlNode | None) -> str | None:
    """Return the node's string value if it is non-blank after trimming."""
    value = string_value(node)
    if value is not None and value.strip():
        return value
    return None


def find_value(mapping: Mapping, key: str) -> YamlNode | None:
    """Return the value of the first pair whose key is the string *key*."""
    for pair in mapping.pairs:
        if string_value(pair.key) == key:
            return pair.value
    return None


def has_any_string_key(mapping: Mapping, keys: tuple[str, ...]) -> bool:
    """True if any of *keys* maps to a non-blank string scalar."""
    return any(non_blank_string(find_value(mapping, key)) is not None for key in keys)
