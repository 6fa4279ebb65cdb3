"""Editor helpers: flow-document detection, hover lookup, and command completion."""

from __future__ import annotations

import re
from dataclasses import dataclass

from maestrolint.flow_reference import HOVER_DOCS
from maestrolint.vocabulary import KNOWN_COMMANDS

FLOW_FILE_SUFFIXES = (".flow", ".maestro.yaml", ".maestro.yml")

_KEY_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9]*)\s*:")
_WORD_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")
_WORD_BEFORE_COLON_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9]*)\s*:?\s*$")
_WORD_BEFORE_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9]*)\s*$")
_CURRENT_WORD_RE = re.compile(r"(?:^|\s|-)(\S*)$")

# Commands usually written without arguments; completed without a trailing colon.
_BARE_COMMANDS = frozenset(
    {"launchApp", "hideKeyboard", "back", "stopApp", "waitForAnimationToEnd", "clearInput", "pasteText"}
)


@dataclass(frozen=True)
class CompletionItem:
    """A command-name completion offered at the cursor."""

    label: str
    insert_text: str
    detail: str
    documentation: str
    sort_text: str


def is_flow_document(file_name: str, text: str = "") -> bool:
    """True for Maestro flow files: by suffix, or by a leading ``appId:`` line."""
    if file_name.lower().endswith(FLOW_FILE_SUFFIXES):
        return True
    first_line = text.split("\n", 1)[0]
    return first_line.strip().startswith("appId:")


def hover_for_word(word: str) -> str | None:
    return HOVER_DOCS.get(word)


def hover_at(line: str, character: int) -> str | None:
    """Hover markdown for the YAML key or command word at *character* in *line*."""
    # 1. A ``key:`` whose key, colon, or the two characters after it hold the cursor.
    for match in _KEY_RE.finditer(line):
        key_start, key_end = match.start(1), match.end(1)
        colon = line.find(":", key_end)
        colon = colon if colon >= 0 else key_end
        if key_start <= character <= colon + 2:
            return hover_for_word(match.group(1))

    # 2. The identifier under the cursor, when it reads like a key.
    for match in _WORD_RE.finditer(line):
        if match.start() <= character <= match.end():
            if line[match.end():].strip().startswith(":"):
                return hover_for_word(match.group())
            if re.fullmatch(r"[\s-]*", line[: match.start()]):
                return hover_for_word(match.group())
            break

    before, after = line[:character], line[character:]

    # 3. Cursor on or right after a colon.
    on_colon = character < len(line) and line[character] == ":"
    after_colon = character > 0 and line[character - 1] == ":"
    if on_colon or after_colon:
        match = _WORD_BEFORE_COLON_RE.search(before)
        if match:
            return hover_for_word(match.group(1))

    # 4. Word ending at the cursor with a colon following it.
    match = _WORD_BEFORE_RE.search(before)
    if match and after.strip().startswith(":"):
        return hover_for_word(match.group(1))
    return None


def complete(line_prefix: str) -> list[CompletionItem]:
    """Command completions for the text left of the cursor.

    Offered only once a word has been typed (a bare ``- `` gets nothing).
    Matching is a case-insensitive prefix match; shorter labels sort first.
    """
    match = _CURRENT_WORD_RE.search(line_prefix)
    current = match.group(1).lower() if match else ""
    if not current:
        return []
    items = [
        _completion_item(name)
        for name in KNOWN_COMMANDS
        if name.lower().startswith(current)
    ]
    return sorted(items, key=lambda item: item.sort_text)


def _completion_item(name: str) -> CompletionItem:
    doc = HOVER_DOCS.get(name, "")
    paragraphs = doc.split("\n\n")
    detail = paragraphs[1] if len(paragraphs) > 1 else name
    insert_text = name if name in _BARE_COMMANDS else f"{name}: "
    return CompletionItem(
        label=name,
        insert_text=insert_text,
        detail=detail,
        documentation=doc,
        sort_text=f"{len(name):03d}_{name}",
    )
