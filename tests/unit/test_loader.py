"""Tests for the offset-preserving YAML loader."""

from __future__ import annotations

from maestrolint.parser.loader import FlowLoader
from maestrolint.parser.nodes import Mapping, Scalar, Sequence, find_value
from tests.conftest import SAMPLE_FLOW_YAML, lines


class TestFlowLoader:
    def test_sequence_root(self, loader: FlowLoader) -> None:
        text = lines("- launchApp", "- tapOn: Login")
        docs = loader.parse(text)
        assert len(docs) == 1
        root = docs[0].root
        assert isinstance(root, Sequence)
        assert len(root.items) == 2
        first = root.items[0]
        assert isinstance(first, Scalar)
        assert first.value == "launchApp"
        assert first.span is not None
        assert text[first.span.start : first.span.end] == "launchApp"

    def test_header_and_commands_are_separate_documents(self, loader: FlowLoader) -> None:
        docs = loader.parse(SAMPLE_FLOW_YAML)
        assert len(docs) == 2
        assert isinstance(docs[0].root, Mapping)
        assert isinstance(docs[1].root, Sequence)
        assert all(not d.errors for d in docs)

    def test_offsets_are_absolute_across_documents(self, loader: FlowLoader) -> None:
        docs = loader.parse(SAMPLE_FLOW_YAML)
        root = docs[1].root
        assert isinstance(root, Sequence)
        tap = root.items[1]
        assert isinstance(tap, Mapping)
        key = tap.pairs[0].key
        assert key.span is not None
        assert SAMPLE_FLOW_YAML[key.span.start : key.span.end] == "tapOn"

    def test_scalar_values_are_typed(self, loader: FlowLoader) -> None:
        text = lines("a: true", "b: 3", "c: ~", "d: 'true'", "e: 1.5", "f: hello")
        root = loader.parse(text)[0].root
        assert isinstance(root, Mapping)
        values = {p.key.value: p.value.value for p in root.pairs}  # type: ignore[union-attr]
        assert values == {"a": True, "b": 3, "c": None, "d": "true", "e": 1.5, "f": "hello"}
        quoted = find_value(root, "d")
        assert isinstance(quoted, Scalar)
        assert quoted.tag == "str"

    def test_mapping_pairs_keep_source_order(self, loader: FlowLoader) -> None:
        root = loader.parse(lines("zeta: 1", "alpha: 2", "mid: 3"))[0].root
        assert isinstance(root, Mapping)
        assert [p.key.value for p in root.pairs] == ["zeta", "alpha", "mid"]  # type: ignore[union-attr]

    def test_scalar_root(self, loader: FlowLoader) -> None:
        docs = loader.parse("just text\n")
        assert isinstance(docs[0].root, Scalar)
        assert docs[0].root.value == "just text"


class TestSyntaxErrors:
    def test_error_is_reported_with_offset(self, loader: FlowLoader) -> None:
        text = lines("- tapOn: [Login", "- back")
        docs = loader.parse(text)
        errors = [e for d in docs for e in d.errors]
        assert len(errors) == 1
        assert errors[0].message
        assert 0 <= errors[0].offset <= len(text)

    def test_error_does_not_stop_later_documents(self, loader: FlowLoader) -> None:
        text = lines("appId: x", "---", "- tapOn: [a", "---", "- launchApp")
        docs = loader.parse(text)
        assert len(docs) == 3
        assert not docs[0].errors
        assert docs[1].errors
        assert docs[1].root is None
        assert docs[1].errors[0].offset >= len("appId: x\n")
        assert isinstance(docs[2].root, Sequence)

    def test_non_printable_character_located(self, loader: FlowLoader) -> None:
        text = lines("appId: x", "---", "- launchApp", "- inputText: a\x07b")
        docs = loader.parse(text)
        assert not docs[0].errors
        (issue,) = docs[1].errors
        assert issue.offset == text.index("\x07")

    def test_duplicate_keys_reported_at_second_key(self, loader: FlowLoader) -> None:
        text = lines("- tapOn:", "    text: a", "    text: b")
        docs = loader.parse(text)
        assert len(docs[0].errors) == 1
        issue = docs[0].errors[0]
        assert issue.message == "Map keys must be unique"
        assert issue.offset == text.index("text: b")
        # The document is still usable.
        assert isinstance(docs[0].root, Sequence)


class TestDocumentChunks:
    def test_split_at_document_markers(self) -> None:
        text = lines("a: 1", "---", "- b")
        assert FlowLoader.document_chunks(text) == [(0, 5), (5, len(text))]

    def test_leading_directives_stay_with_first_document(self, loader: FlowLoader) -> None:
        text = lines("%YAML 1.2", "---", "- launchApp")
        assert FlowLoader.document_chunks(text) == [(0, len(text))]
        docs = loader.parse(text)
        assert len(docs) == 1
        assert not docs[0].errors
        assert isinstance(docs[0].root, Sequence)

    def test_marker_inside_a_line_is_not_a_split(self) -> None:
        text = lines("- inputText: 'a --- b'", "----not-a-marker: 1")
        assert FlowLoader.document_chunks(text) == [(0, len(text))]


class TestSafetyLimits:
    def test_oversized_document_reported(self) -> None:
        loader = FlowLoader(max_document_size=10)
        docs = loader.parse(lines("- launchApp", "- back"))
        assert len(docs) == 1
        assert docs[0].root is None
        assert "maximum size" in docs[0].errors[0].message

    def test_deep_nesting_reported(self) -> None:
        loader = FlowLoader(max_depth=3)
        text = ""
        for i in range(6):
            text += "  " * i + f"level{i}:\n"
        text += "  " * 6 + "value: deep\n"
        docs = loader.parse(text)
        assert any("maximum depth" in e.message for e in docs[0].errors)

    def test_recursive_alias_is_dropped(self, loader: FlowLoader) -> None:
        docs = loader.parse("- &a {x: *a}\n")
        assert not docs[0].errors
        root = docs[0].root
        assert isinstance(root, Sequence)
        item = root.items[0]
        assert isinstance(item, Mapping)
        assert item.pairs[0].value is None

    def test_shared_alias_is_reused(self, loader: FlowLoader) -> None:
        text = lines("- tapOn: &login {text: Login}", "- tapOn: *login")
        root = loader.parse(text)[0].root
        assert isinstance(root, Sequence)
        first, second = root.items
        assert isinstance(first, Mapping) and isinstance(second, Mapping)
        assert first.pairs[0].value is second.pairs[0].value
