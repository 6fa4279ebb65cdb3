"""Fixed command vocabularies recognised by the flow rules."""

from __future__ import annotations

# Keep in sync with the hover reference in ``maestrolint.flow_reference``.
KNOWN_COMMANDS: frozenset[str] = frozenset(
    {
        "tapOn",
        "longPressOn",
        "assertVisible",
        "assertNotVisible",
        "assertTrue",
        "assertFalse",
        "assertThat",
        "launchApp",
        "inputText",
        "clearInput",
        "eraseText",
        "scroll",
        "swipe",
        "scrollUntilVisible",
        "scrollToIndex",
        "scrollUntil",
        "pressKey",
        "hideKeyboard",
        "waitForVisible",
        "waitForNotVisible",
        "waitForAnimationToEnd",
        "runScript",
        "runFlow",
        "runCommand",
        "takeScreenshot",
        "openLink",
        "back",
        "stopApp",
        "copyTextFrom",
        "pasteText",
        "extendState",
        "evalScript",
        "conditional",
        "repeat",
    }
)

# Commands that count as navigation or an explicit wait before an assertVisible.
NAV_OR_WAIT_COMMANDS: frozenset[str] = frozenset(
    {
        "tapOn",
        "scroll",
        "swipe",
        "scrollUntilVisible",
        "scrollToIndex",
        "scrollUntil",
        "launchApp",
        "runFlow",
        "openLink",
        "back",
        "pressKey",
        "waitForVisible",
        "waitForNotVisible",
        "waitForAnimationToEnd",
        "repeat",
        "conditional",
    }
)

# Selector keys accepted by tapOn when given an object.
TAP_ON_SELECTOR_KEYS: tuple[str, ...] = ("text", "id", "accessibilityLabel")
