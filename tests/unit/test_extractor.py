"""Tests for command extraction and nested ``commands:`` discovery."""

from __future__ import annotations

from maestrolint.models.flow import CommandSequence
from maestrolint.parser.extractor import (
    MAX_NESTING_DEPTH,
    collect_document_sequences,
    collect_nested_command_sequences,
    extract_commands_from_sequence,
)
from maestrolint.parser.loader import FlowLoader
from maestrolint.parser.nodes import Mapping, Pair, Scalar, Sequence
from tests.conftest import NESTED_FLOW_YAML, SETUP_FLOW, lines


def _sequences(loader: FlowLoader, text: str) -> list[CommandSequence]:
    result: list[CommandSequence] = []
    for document in loader.parse(text):
        result.extend(collect_document_sequences(document.root))
    return result


def _names(sequence: CommandSequence) -> list[str]:
    return [c.name for c in sequence]


class TestExtractCommands:
    def test_scalar_and_mapping_items(self, loader: FlowLoader) -> None:
        text = lines("- launchApp", '- tapOn: "Login"', "- back")
        root = loader.parse(text)[0].root
        assert isinstance(root, Sequence)
        commands = extract_commands_from_sequence(root)
        assert _names(commands) == ["launchApp", "tapOn", "back"]
        launch, tap, _ = commands
        assert launch.value is None
        assert launch.name_span is not None
        assert text[launch.name_span.start : launch.name_span.end] == "launchApp"
        assert isinstance(tap.value, Scalar)
        assert tap.value.value == "Login"
        assert tap.value_span == tap.value.span

    def test_unusable_items_are_skipped(self, loader: FlowLoader) -> None:
        text = lines("- 42", "- ''", "- {}", "- 1: x", "- [a, b]", "- launchApp")
        root = loader.parse(text)[0].root
        assert isinstance(root, Sequence)
        assert _names(extract_commands_from_sequence(root)) == ["launchApp"]

    def test_only_first_key_names_the_command(self, loader: FlowLoader) -> None:
        text = lines("- tapOn: Login", "  optional: true")
        root = loader.parse(text)[0].root
        assert isinstance(root, Sequence)
        (command,) = extract_commands_from_sequence(root)
        assert command.name == "tapOn"

    def test_implicit_empty_value_is_absent(self, loader: FlowLoader) -> None:
        root = loader.parse(lines("- back:", "- back: ~"))[0].root
        assert isinstance(root, Sequence)
        implicit, explicit = extract_commands_from_sequence(root)
        assert implicit.value is None
        assert implicit.value_span is None
        assert isinstance(explicit.value, Scalar)
        assert explicit.value.value is None

    def test_command_span_falls_back_to_value(self, loader: FlowLoader) -> None:
        root = loader.parse(lines('- tapOn: "Login"'))[0].root
        assert isinstance(root, Sequence)
        (command,) = extract_commands_from_sequence(root)
        assert command.span == command.name_span


class TestCollectSequences:
    def test_nested_blocks_are_separate_sequences(self, loader: FlowLoader) -> None:
        sequences = _sequences(loader, NESTED_FLOW_YAML)
        assert [_names(s) for s in sequences] == [
            ["launchApp", "repeat", "conditional"],
            ["assertVisible", "scroll", "scroll"],
            ["tapOn"],
        ]

    def test_header_document_contributes_nothing(self, loader: FlowLoader) -> None:
        sequences = _sequences(loader, lines("appId: x", "tags:", "  - smoke", "---", "- launchApp"))
        assert [_names(s) for s in sequences] == [["launchApp"]]

    def test_mapping_root_with_commands(self, loader: FlowLoader) -> None:
        text = lines("appId: x", "commands:", "  - launchApp", "  - tapOn: Go")
        assert [_names(s) for s in _sequences(loader, text)] == [["launchApp", "tapOn"]]

    def test_empty_nested_commands_are_dropped(self, loader: FlowLoader) -> None:
        text = lines("- launchApp", "- repeat:", "    commands: []")
        assert [_names(s) for s in _sequences(loader, text)] == [["launchApp", "repeat"]]

    def test_deeply_nested_blocks_are_found(self, loader: FlowLoader) -> None:
        text = lines(
            "- conditional:",
            "    commands:",
            "      - repeat:",
            "          commands:",
            "            - tapOn: Deep",
        )
        assert [_names(s) for s in _sequences(loader, text)] == [
            ["conditional"],
            ["repeat"],
            ["tapOn"],
        ]

    def test_scalar_and_missing_roots(self) -> None:
        assert collect_document_sequences(None) == []
        assert collect_document_sequences(Scalar(value="launchApp")) == []

    def test_fixture_subflow(self, loader: FlowLoader) -> None:
        sequences = _sequences(loader, SETUP_FLOW.read_text())
        assert [_names(s) for s in sequences] == [["runFlow", "repeat"], ["scroll"]]


class TestNestingLimit:
    @staticmethod
    def _wrap(levels: int) -> Mapping:
        node = Mapping(
            pairs=(
                Pair(
                    key=Scalar(value="commands"),
                    value=Sequence(items=(Scalar(value="launchApp"),)),
                ),
            )
        )
        for _ in range(levels):
            node = Mapping(pairs=(Pair(key=Scalar(value="step"), value=node),))
        return node

    def test_within_limit(self) -> None:
        sequences: list[CommandSequence] = []
        collect_nested_command_sequences(self._wrap(10), sequences)
        assert [_names(s) for s in sequences] == [["launchApp"]]

    def test_beyond_limit_is_ignored(self) -> None:
        sequences: list[CommandSequence] = []
        collect_nested_command_sequences(self._wrap(MAX_NESTING_DEPTH + 5), sequences)
        assert sequences == []
