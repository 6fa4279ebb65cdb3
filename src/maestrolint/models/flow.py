"""Normalized command model extracted from a flow document."""

from __future__ import annotations

from dataclasses import dataclass

from maestrolint.parser.nodes import Span, YamlNode


@dataclass(frozen=True)
class Command:
    """One step of a flow, e.g. ``- tapOn: "Login"``.

    ``value`` is None for bare commands (``- launchApp``) and for the implicit
    empty value of ``- back:``.
    """

    name: str
    name_span: Span | None = None
    value_span: Span | None = None
    value: YamlNode | None = None

    @property
    def span(self) -> Span | None:
        """Span to report against: the name, falling back to the value."""
        return self.name_span or self.value_span


CommandSequence = list[Command]
