"""Command extraction: YAML sequences → ordered ``Command`` lists."""

from __future__ import annotations

import logging

from maestrolint.models.flow import Command, CommandSequence
from maestrolint.parser.nodes import Mapping, Scalar, Sequence, YamlNode, string_value

logger = logging.getLogger("maestrolint.extractor")

# Deepest mapping level searched for nested ``commands:`` blocks.
MAX_NESTING_DEPTH = 64

NESTED_COMMANDS_KEY = "commands"


def extract_commands_from_sequence(sequence: Sequence) -> CommandSequence:
    """Extract commands from list items (``- launchApp``, ``- tapOn: ...``).

    Items that are neither a non-blank string scalar nor a mapping whose
    first key is a non-blank string are skipped.
    """
    commands: CommandSequence = []
    for item in sequence.items:
        if isinstance(item, Scalar):
            name = item.value
            if isinstance(name, str) and name.strip():
                commands.append(Command(name=name, name_span=item.span))
        elif isinstance(item, Mapping):
            if not item.pairs:
                continue
            first = item.pairs[0]
            name = string_value(first.key)
            if name is None or not name.strip():
                continue
            value = first.value
            if _is_implicit_empty(value):
                value = None
            commands.append(
                Command(
                    name=name,
                    name_span=first.key.span,
                    value_span=value.span if value is not None else None,
                    value=value,
                )
            )
    return commands


def collect_document_sequences(root: YamlNode | None) -> list[CommandSequence]:
    """All command sequences of one document, in document then nesting order.

    A sequence root is the flow's top-level command list; ``commands:``
    blocks nested inside its steps (or anywhere under a mapping root) follow
    as separate sequences.
    """
    sequences: list[CommandSequence] = []
    if isinstance(root, Sequence):
        commands = extract_commands_from_sequence(root)
        if commands:
            sequences.append(commands)
        _collect_from_items(root, sequences, 0)
    elif isinstance(root, Mapping):
        collect_nested_command_sequences(root, sequences)
    return sequences


def collect_nested_command_sequences(
    mapping: Mapping,
    sequences: list[CommandSequence],
    depth: int = 0,
) -> None:
    """Append every non-empty ``commands:`` list found under *mapping*.

    Nested blocks (conditional branches, repeat bodies) become sibling
    sequences; they are never spliced into their parent.
    """
    if depth > MAX_NESTING_DEPTH:
        logger.debug("Stopped searching for nested commands at depth %d", depth)
        return
    for pair in mapping.pairs:
        value = pair.value
        if string_value(pair.key) == NESTED_COMMANDS_KEY and isinstance(value, Sequence):
            nested = extract_commands_from_sequence(value)
            if nested:
                sequences.append(nested)
        if isinstance(value, Mapping):
            collect_nested_command_sequences(value, sequences, depth + 1)
        elif isinstance(value, Sequence):
            _collect_from_items(value, sequences, depth + 1)


def _collect_from_items(
    sequence: Sequence, sequences: list[CommandSequence], depth: int
) -> None:
    for item in sequence.items:
        if isinstance(item, Mapping):
            collect_nested_command_sequences(item, sequences, depth + 1)


def _is_implicit_empty(node: object) -> bool:
    """True for the empty value of ``- back:`` (no text after the colon)."""
    if not isinstance(node, Scalar) or node.value is not None:
        return False
    span = node.span
    return span is None or span.start == span.end
