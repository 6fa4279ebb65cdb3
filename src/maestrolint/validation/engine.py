"""Orchestrates a validation run: parse → extract → rules → diagnostics."""

from __future__ import annotations

import logging
from pathlib import Path

from maestrolint.models.errors import Diagnostic
from maestrolint.models.flow import CommandSequence
from maestrolint.parser.extractor import collect_document_sequences
from maestrolint.parser.loader import FlowLoader
from maestrolint.parser.positions import LineIndex
from maestrolint.validation.diagnostics import DiagnosticBuilder
from maestrolint.validation.rules import CommandRules, SequenceRules

logger = logging.getLogger("maestrolint.engine")

EMPTY_FLOW_MESSAGE = (
    "Empty Maestro flow: file contains no commands. Add at least one command, "
    "for example `launchApp`."
)
NO_COMMANDS_MESSAGE = (
    "Empty Maestro flow: no commands found after configuration. Add at least one "
    "command sequence starting with `- launchApp` or another action."
)


class FlowValidator:
    """Validates Maestro flow text.

    Stateless between runs: every call builds its own line index, trees and
    command sequences, so one instance may be shared by the API and MCP
    surfaces.
    """

    def __init__(self, loader: FlowLoader | None = None) -> None:
        self._loader = loader or FlowLoader()

    def validate(self, text: str, file_location: Path | str | None = None) -> list[Diagnostic]:
        """Return diagnostics for *text*, ordered syntax → command → sequence findings.

        ``file_location`` is the flow's path on disk; without it the runFlow
        target check is skipped.
        """
        index = LineIndex(text)
        builder = DiagnosticBuilder(text, index)

        if not text.strip():
            return [builder.error("EMPTY_FLOW", EMPTY_FLOW_MESSAGE)]

        diagnostics: list[Diagnostic] = []
        sequences: list[CommandSequence] = []
        for document in self._loader.parse(text):
            for issue in document.errors:
                message = f"YAML parse error - {issue.message}"
                if issue.span is not None:
                    diagnostics.append(builder.error("YAML_SYNTAX", message, issue.span))
                else:
                    diagnostics.append(builder.at_offset("YAML_SYNTAX", message, issue.offset))
            sequences.extend(collect_document_sequences(document.root))

        if not any(sequences):
            diagnostics.append(builder.error("NO_COMMANDS", NO_COMMANDS_MESSAGE))
            return diagnostics

        location = Path(file_location) if file_location is not None else None
        command_rules = CommandRules(builder, location)
        for sequence in sequences:
            for command in sequence:
                diagnostics.extend(command_rules.check(command))

        sequence_rules = SequenceRules(builder)
        for sequence in sequences:
            diagnostics.extend(sequence_rules.check(sequence))

        logger.debug(
            "Validated flow (%d chars): %d sequences, %d commands, %d diagnostics",
            len(text),
            len(sequences),
            sum(len(s) for s in sequences),
            len(diagnostics),
        )
        return diagnostics


def validate(text: str, file_location: Path | str | None = None) -> list[Diagnostic]:
    """Validate *text* with a default ``FlowValidator``."""
    return FlowValidator().validate(text, file_location)
