"""Flow rules: structural errors per command, heuristic warnings per sequence."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from maestrolint.models.errors import Diagnostic, Severity
from maestrolint.models.flow import Command, CommandSequence
from maestrolint.parser.nodes import (
    Mapping,
    Scalar,
    Sequence,
    YamlNode,
    find_value,
    has_any_string_key,
    non_blank_string,
    string_value,
)
from maestrolint.validation.diagnostics import DiagnosticBuilder
from maestrolint.vocabulary import KNOWN_COMMANDS, NAV_OR_WAIT_COMMANDS, TAP_ON_SELECTOR_KEYS

# Markers of a runFlow path built from variables (``${FLOW_DIR}/login.yaml``).
_DYNAMIC_PATH_TOKEN = "${"


class CommandRules:
    """Per-command checks, run in a fixed order for every command of every sequence."""

    def __init__(self, builder: DiagnosticBuilder, file_location: Path | None = None) -> None:
        self._builder = builder
        self._file_location = file_location
        self._checks: list[Callable[[Command], list[Diagnostic]]] = [
            self._check_tap_on_selector,
            self._check_input_text_value,
            self._check_conditional_has_commands,
            self._check_run_flow_file_exists,
            self._check_unknown_command_name,
            self._check_take_screenshot_has_name,
        ]

    def check(self, command: Command) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for rule in self._checks:
            diagnostics.extend(rule(command))
        return diagnostics

    # -- errors --------------------------------------------------------------

    def _check_tap_on_selector(self, command: Command) -> list[Diagnostic]:
        """tapOn needs a text selector string or an object with text/id/accessibilityLabel."""
        if command.name != "tapOn":
            return []
        value = command.value
        if value is None:
            return [
                self._builder.error(
                    "TAP_ON_SELECTOR",
                    "tapOn without selector: add `text`, `id` or `accessibilityLabel` "
                    "so Maestro knows what to tap.",
                    command.name_span,
                    command.name,
                )
            ]
        if isinstance(value, Scalar):
            if non_blank_string(value) is not None:
                return []
            return [
                self._builder.error(
                    "TAP_ON_SELECTOR",
                    'tapOn expects a non-empty text selector when used as a string. '
                    'Use `tapOn: "Login"` or provide an object with `text`, `id` or '
                    "`accessibilityLabel`.",
                    value.span,
                    command.name,
                )
            ]
        if isinstance(value, Mapping):
            if has_any_string_key(value, TAP_ON_SELECTOR_KEYS):
                return []
            return [
                self._builder.error(
                    "TAP_ON_SELECTOR",
                    "tapOn without selector: add at least one of `text`, `id` or "
                    "`accessibilityLabel`.",
                    command.name_span,
                    command.name,
                )
            ]
        return [
            self._builder.error(
                "TAP_ON_SELECTOR",
                "tapOn has an unsupported value. Use a string (treated as `text`) or an "
                "object with `text`, `id` or `accessibilityLabel` as its selector.",
                value.span,
                command.name,
            )
        ]

    def _check_input_text_value(self, command: Command) -> list[Diagnostic]:
        if command.name != "inputText":
            return []
        value = command.value
        if value is None:
            return [
                self._builder.error(
                    "INPUT_TEXT_VALUE",
                    'inputText requires a text value. Use `inputText: "your text"` or an '
                    "object with a `text` property.",
                    command.name_span,
                    command.name,
                )
            ]
        if isinstance(value, Scalar):
            # Any string is accepted, including an empty one.
            if string_value(value) is not None:
                return []
            return [
                self._builder.error(
                    "INPUT_TEXT_VALUE",
                    'inputText value must be a string. Example: `inputText: "email@example.com"`.',
                    value.span,
                    command.name,
                )
            ]
        if isinstance(value, Mapping):
            if string_value(find_value(value, "text")) is not None:
                return []
            return [
                self._builder.error(
                    "INPUT_TEXT_VALUE",
                    "inputText object must include a string `text` property. Example:\n"
                    '`inputText:\n  text: "email@example.com"`.',
                    value.span,
                    command.name,
                )
            ]
        return [
            self._builder.error(
                "INPUT_TEXT_VALUE",
                "inputText has an unsupported value. Use a string or an object with a "
                "`text` property.",
                value.span,
                command.name,
            )
        ]

    def _check_conditional_has_commands(self, command: Command) -> list[Diagnostic]:
        if command.name != "conditional":
            return []
        value = command.value
        if not isinstance(value, Mapping):
            return [
                self._builder.error(
                    "CONDITIONAL_COMMANDS",
                    "conditional must be an object with a `commands` array. Example:\n"
                    '`conditional:\n  when: ...\n  commands:\n    - tapOn: "..."`.',
                    command.name_span,
                    command.name,
                )
            ]
        commands = find_value(value, "commands")
        if isinstance(commands, Sequence) and commands.items:
            return []
        return [
            self._builder.error(
                "CONDITIONAL_COMMANDS",
                "conditional without `commands`: add a non-empty `commands` list of steps "
                "to run when the condition is met.",
                command.name_span,
                command.name,
            )
        ]

    def _check_run_flow_file_exists(self, command: Command) -> list[Diagnostic]:
        """runFlow must point at an existing file, relative to the flow's directory.

        Skipped for documents without a file on disk and for variable paths.
        """
        if command.name != "runFlow" or self._file_location is None:
            return []
        value = command.value
        if value is None:
            return []
        target = run_flow_target(value)
        if not target or _DYNAMIC_PATH_TOKEN in target:
            return []
        path = Path(target)
        if not path.is_absolute():
            path = self._file_location.parent / path
        try:
            exists = path.exists()
        except OSError:
            # Unstattable targets (name too long, no permission) count as missing.
            exists = False
        if exists:
            return []
        return [
            self._builder.error(
                "RUN_FLOW_NOT_FOUND",
                f'runFlow references "{target}" but the file does not exist. Check the '
                "path or create the referenced flow file.",
                value.span,
                command.name,
            )
        ]

    def _check_unknown_command_name(self, command: Command) -> list[Diagnostic]:
        if command.name in KNOWN_COMMANDS:
            return []
        suggestions = suggest_similar(command.name, sorted(KNOWN_COMMANDS))
        alternative = suggestions[0] if suggestions else "tapOn"
        return [
            self._builder.build(
                Severity.ERROR,
                "UNKNOWN_COMMAND",
                f'Unknown Maestro command "{command.name}". Check for typos or replace '
                f'with a supported command such as "{alternative}".',
                command.name_span,
                command.name,
                suggestions=suggestions,
            )
        ]

    # -- warnings ------------------------------------------------------------

    def _check_take_screenshot_has_name(self, command: Command) -> list[Diagnostic]:
        if command.name != "takeScreenshot":
            return []
        value = command.value
        if value is None:
            return [
                self._builder.warning(
                    "SCREENSHOT_NAME",
                    "takeScreenshot without a name. Provide a descriptive name so "
                    'screenshots are easy to identify, e.g. `takeScreenshot: "login_screen"`.',
                    command.name_span,
                    command.name,
                )
            ]
        if isinstance(value, Scalar):
            if non_blank_string(value) is not None:
                return []
            return [
                self._builder.warning(
                    "SCREENSHOT_NAME",
                    "takeScreenshot should use a descriptive name string, e.g. "
                    '`takeScreenshot: "login_screen"`.',
                    value.span,
                    command.name,
                )
            ]
        if isinstance(value, Mapping):
            if non_blank_string(find_value(value, "name")) is not None:
                return []
            return [
                self._builder.warning(
                    "SCREENSHOT_NAME",
                    "takeScreenshot object should include a non-empty `name` so "
                    "screenshots are easy to identify.",
                    value.span,
                    command.name,
                )
            ]
        return [
            self._builder.warning(
                "SCREENSHOT_NAME",
                "takeScreenshot has an unexpected value. Use a string name or an object "
                "with a `name` property.",
                value.span,
                command.name,
            )
        ]


@dataclass
class SequencePass:
    """State shared by the sequence rules during one sequence's pass.

    ``handled`` holds positions of assertVisible steps already reported as
    following a tapOn, so the prior-navigation rule skips them.
    """

    sequence: CommandSequence
    handled: set[int] = field(default_factory=set)


class SequenceRules:
    """Per-sequence heuristics. Each sequence gets a fresh ``SequencePass``."""

    def __init__(self, builder: DiagnosticBuilder) -> None:
        self._builder = builder

    def check(self, sequence: CommandSequence) -> list[Diagnostic]:
        state = SequencePass(sequence=sequence)
        diagnostics: list[Diagnostic] = []
        diagnostics.extend(self._check_assert_visible_after_tap_on(state))
        diagnostics.extend(self._check_assert_visible_has_prior_navigation(state))
        diagnostics.extend(self._check_duplicate_sequential_actions(state))
        return diagnostics

    def _check_assert_visible_after_tap_on(self, state: SequencePass) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        sequence = state.sequence
        for i in range(len(sequence) - 1):
            current, following = sequence[i], sequence[i + 1]
            if current.name == "tapOn" and following.name == "assertVisible":
                diagnostics.append(
                    self._builder.warning(
                        "ASSERT_AFTER_TAP",
                        "assertVisible is used immediately after tapOn without an explicit "
                        "wait. Insert `waitForVisible` between them to reduce flaky tests.",
                        following.name_span or current.name_span,
                        following.name,
                    )
                )
                state.handled.add(i + 1)
        return diagnostics

    def _check_assert_visible_has_prior_navigation(self, state: SequencePass) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        sequence = state.sequence
        for i, command in enumerate(sequence):
            if command.name != "assertVisible" or i in state.handled:
                continue
            if any(prior.name in NAV_OR_WAIT_COMMANDS for prior in sequence[:i]):
                continue
            diagnostics.append(
                self._builder.warning(
                    "ASSERT_WITHOUT_NAVIGATION",
                    "assertVisible is used without a prior navigation or wait in this flow. "
                    "Consider adding `tapOn`, `launchApp`, `scroll`, or `waitForVisible` "
                    "before this assertion so it checks a meaningful UI state.",
                    command.name_span,
                    command.name,
                )
            )
        return diagnostics

    def _check_duplicate_sequential_actions(self, state: SequencePass) -> list[Diagnostic]:
        """Same command name twice in a row. Arguments are not compared."""
        diagnostics: list[Diagnostic] = []
        sequence = state.sequence
        for i in range(len(sequence) - 1):
            current, following = sequence[i], sequence[i + 1]
            if current.name == following.name:
                diagnostics.append(
                    self._builder.warning(
                        "DUPLICATE_ACTION",
                        f'Duplicate sequential action: "{following.name}" is called twice in '
                        "a row. Remove one of them or adjust the flow if this is intentional.",
                        following.name_span or current.name_span,
                        following.name,
                    )
                )
        return diagnostics


def run_flow_target(value: YamlNode) -> str | None:
    """The file a runFlow step points at: ``runFlow: a.yaml`` or ``runFlow: {flow: a.yaml}``."""
    if isinstance(value, Scalar):
        return string_value(value)
    if isinstance(value, Mapping):
        return string_value(find_value(value, "flow"))
    return None


def suggest_similar(name: str, candidates: list[str], max_suggestions: int = 3) -> list[str]:
    """Suggest similar names for 'did you mean?' messages."""
    name_lower = name.lower()
    scored = []
    for candidate in candidates:
        candidate_lower = candidate.lower()
        if name_lower in candidate_lower or candidate_lower in name_lower:
            scored.append((0, candidate))
        else:
            # Count common characters
            common = sum(1 for c in name_lower if c in candidate_lower)
            scored.append((len(name) + len(candidate) - 2 * common, candidate))
    scored.sort(key=lambda x: x[0])
    return [s[1] for s in scored[:max_suggestions]]
