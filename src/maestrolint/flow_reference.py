"""Maestro flow reference text: per-command hover docs and the full reference."""

from __future__ import annotations

HOVER_DOCS: dict[str, str] = {
    "tapOn": (
        "**tapOn**\n\nTaps on a UI element using `id`, `text`, `index`, or `point`.\n\n"
        'Example:\n```yaml\n- tapOn:\n    id: "button-id"\n```'
    ),
    "longPressOn": (
        "**longPressOn**\n\nLong presses on a UI element. Supports `id`, `text`, `index`, "
        "and `duration`.\n\n"
        'Example:\n```yaml\n- longPressOn:\n    id: "element-id"\n    duration: 1000\n```'
    ),
    "assertVisible": (
        "**assertVisible**\n\nAsserts that an element is visible on screen. Supports `id`, "
        "`text`, `index`, and `timeout`.\n\n"
        'Example:\n```yaml\n- assertVisible:\n    id: "element-id"\n```'
    ),
    "assertNotVisible": (
        "**assertNotVisible**\n\nAsserts that an element is not visible on screen. Supports "
        "`id`, `text`, `index`, and `timeout`.\n\n"
        'Example:\n```yaml\n- assertNotVisible:\n    id: "element-id"\n```'
    ),
    "assertTrue": (
        "**assertTrue**\n\nAsserts that an expression evaluates to true.\n\n"
        'Example:\n```yaml\n- assertTrue: "${state.value} > 0"\n```'
    ),
    "assertFalse": (
        "**assertFalse**\n\nAsserts that an expression evaluates to false.\n\n"
        'Example:\n```yaml\n- assertFalse: "${state.value} < 0"\n```'
    ),
    "assertThat": (
        "**assertThat**\n\nAsserts a custom expression with optional timeout.\n\n"
        "Example:\n```yaml\n- assertThat:\n"
        '    expression: "${visibleElements.length} > 0"\n    timeout: 5000\n```'
    ),
    "launchApp": (
        "**launchApp**\n\nLaunches the app. Can be a string (appId) or object with `appId`, "
        "`clearState`, `clearKeychain`, `stopApp`, and `arguments`.\n\n"
        'Example:\n```yaml\n- launchApp:\n    appId: "com.example.app"\n    clearState: true\n```'
    ),
    "inputText": (
        "**inputText**\n\nInputs text into a field. Supports `text`, `id`, and `index`.\n\n"
        'Example:\n```yaml\n- inputText:\n    text: "Hello World"\n    id: "input-field"\n```'
    ),
    "clearInput": (
        "**clearInput**\n\nClears the input field. Supports `id` and `index`.\n\n"
        'Example:\n```yaml\n- clearInput:\n    id: "input-field"\n```'
    ),
    "eraseText": (
        "**eraseText**\n\nErases a specified number of characters. Supports `characters`, "
        "`id`, and `index`.\n\n"
        "Example:\n```yaml\n- eraseText:\n    characters: 5\n```"
    ),
    "scroll": (
        "**scroll**\n\nScrolls in a direction (UP, DOWN, LEFT, RIGHT). Supports `direction`, "
        "`duration`, `speed`, and `distance`.\n\n"
        "Example:\n```yaml\n- scroll:\n    direction: DOWN\n```"
    ),
    "swipe": (
        "**swipe**\n\nSwipes in a direction or between points. Supports `direction`, "
        "`duration`, `speed`, `start`, and `end`.\n\n"
        "Example:\n```yaml\n- swipe:\n    direction: LEFT\n```"
    ),
    "scrollUntilVisible": (
        "**scrollUntilVisible**\n\nScrolls until an element becomes visible. Supports `id`, "
        "`text`, `index`, `direction`, `timeout`, and `maxScrolls`.\n\n"
        'Example:\n```yaml\n- scrollUntilVisible:\n    id: "target-element"\n'
        "    direction: DOWN\n```"
    ),
    "scrollToIndex": (
        "**scrollToIndex**\n\nScrolls to a specific index in a list. Supports `index` and "
        "`direction`.\n\n"
        "Example:\n```yaml\n- scrollToIndex:\n    index: 10\n    direction: DOWN\n```"
    ),
    "scrollUntil": (
        "**scrollUntil**\n\nScrolls until an expression is true. Supports `expression`, "
        "`direction`, `timeout`, and `maxScrolls`.\n\n"
        "Example:\n```yaml\n- scrollUntil:\n"
        '    expression: "${visibleElements.length} > 5"\n    direction: DOWN\n```'
    ),
    "pressKey": (
        "**pressKey**\n\nPresses a keyboard key. Can be a string or object with `key` and "
        "`times`.\n\n"
        "Example:\n```yaml\n- pressKey: Enter\n```"
    ),
    "hideKeyboard": (
        "**hideKeyboard**\n\nHides the on-screen keyboard.\n\n"
        "Example:\n```yaml\n- hideKeyboard:\n```"
    ),
    "waitForVisible": (
        "**waitForVisible**\n\nWaits for an element to become visible. Supports `id`, "
        "`text`, `index`, and `timeout`.\n\n"
        'Example:\n```yaml\n- waitForVisible:\n    id: "element-id"\n    timeout: 5000\n```'
    ),
    "waitForNotVisible": (
        "**waitForNotVisible**\n\nWaits for an element to become not visible. Supports "
        "`id`, `text`, `index`, and `timeout`.\n\n"
        'Example:\n```yaml\n- waitForNotVisible:\n    id: "element-id"\n    timeout: 5000\n```'
    ),
    "waitForAnimationToEnd": (
        "**waitForAnimationToEnd**\n\nWaits for all animations to finish. Supports optional "
        "`timeout`.\n\n"
        "Example:\n```yaml\n- waitForAnimationToEnd:\n    timeout: 3000\n```"
    ),
    "runScript": (
        "**runScript**\n\nRuns a JavaScript script. Supports `script` and `env`.\n\n"
        "Example:\n```yaml\n- runScript:\n    script: \"console.log('Hello')\"\n```"
    ),
    "runFlow": (
        "**runFlow**\n\nRuns another Maestro flow. Supports `flow`, `env`, and `with`.\n\n"
        'Example:\n```yaml\n- runFlow:\n    flow: "./subflow.yaml"\n```'
    ),
    "runCommand": (
        "**runCommand**\n\nRuns a shell command. Supports `command` and `env`.\n\n"
        'Example:\n```yaml\n- runCommand:\n    command: "echo hello"\n```'
    ),
    "takeScreenshot": (
        "**takeScreenshot**\n\nTakes a screenshot. Can be a string (name), boolean, or "
        "object with `name` and `fullPage`.\n\n"
        'Example:\n```yaml\n- takeScreenshot: "screenshot-1"\n```'
    ),
    "openLink": (
        "**openLink**\n\nOpens a link/URL.\n\n"
        'Example:\n```yaml\n- openLink: "https://example.com"\n```'
    ),
    "back": "**back**\n\nPresses the back button.\n\nExample:\n```yaml\n- back:\n```",
    "stopApp": (
        "**stopApp**\n\nStops the app. Can be a boolean or object with `appId`.\n\n"
        "Example:\n```yaml\n- stopApp:\n```"
    ),
    "copyTextFrom": (
        "**copyTextFrom**\n\nCopies text from an element. Supports `id`, `text`, and "
        "`index`.\n\n"
        'Example:\n```yaml\n- copyTextFrom:\n    id: "text-element"\n```'
    ),
    "pasteText": (
        "**pasteText**\n\nPastes text into a field. Supports `text`, `id`, and `index`.\n\n"
        'Example:\n```yaml\n- pasteText:\n    text: "Pasted text"\n```'
    ),
    "extendState": (
        "**extendState**\n\nExtends the state with custom variables.\n\n"
        'Example:\n```yaml\n- extendState:\n    myVar: "value"\n```'
    ),
    "evalScript": (
        "**evalScript**\n\nEvaluates a JavaScript script and optionally saves the result. "
        "Supports `script` and `save`.\n\n"
        'Example:\n```yaml\n- evalScript:\n    script: "1 + 1"\n    save: result\n```'
    ),
    "conditional": (
        "**conditional**\n\nRuns a block of steps when a condition holds. Requires a "
        "non-empty `commands` list.\n\n"
        "Example:\n```yaml\n- conditional:\n    when:\n      visible: \"Allow\"\n"
        '    commands:\n      - tapOn: "Allow"\n```'
    ),
    "repeat": (
        "**repeat**\n\nRepeats commands. Supports `times`, `while`, and `commands`.\n\n"
        "Example:\n```yaml\n- repeat:\n    times: 5\n    commands:\n      - scroll:\n"
        "          direction: DOWN\n```"
    ),
    # Flow header properties
    "appId": (
        "**appId**\n\nThe bundle ID or application ID of the app to test.\n\n"
        'Example:\n```yaml\nappId: "com.example.app"\n```'
    ),
    "name": (
        "**name**\n\nThe name of the Maestro flow.\n\n"
        'Example:\n```yaml\nname: "Login Flow"\n```'
    ),
    "description": (
        "**description**\n\nDescription of the Maestro flow.\n\n"
        'Example:\n```yaml\ndescription: "Tests the login functionality with valid credentials"\n```'
    ),
    "tags": (
        "**tags**\n\nTags for organizing and filtering flows.\n\n"
        "Example:\n```yaml\ntags:\n  - smoke\n  - login\n```"
    ),
    "env": (
        "**env**\n\nEnvironment variables for the flow.\n\n"
        'Example:\n```yaml\nenv:\n  API_URL: "https://api.example.com"\n```'
    ),
}


FLOW_REFERENCE = """\
# Maestro Flow Reference

A flow file has an optional header document followed by a list of commands:

```yaml
appId: com.example.app
name: Login
tags:
  - smoke
---
- launchApp
- tapOn: "Email"
- inputText: "user@example.com"
- tapOn:
    id: "login-button"
- waitForVisible: "Welcome"
- assertVisible: "Welcome"
- takeScreenshot: "home_screen"
```

## Command Shapes

- Bare command: `- launchApp`
- Command with a value: `- tapOn: "Login"`
- Command with an object: `- tapOn: {id: "login-button"}`

Only the first key of a list item is read as the command name.

## Nested Blocks

`conditional` and `repeat` carry their own `commands:` list. Nested lists are
checked as separate sequences: adjacency checks never cross a block boundary.

```yaml
- repeat:
    times: 3
    commands:
      - scroll:
          direction: DOWN
```

## Errors

- `YAML_SYNTAX`: the YAML itself is malformed.
  Fix: correct the reported line; other documents in the file are still checked.
- `EMPTY_FLOW`: the file is blank.
- `NO_COMMANDS`: no command list was found (e.g. only `appId:`).
  Fix: add `---` and a list of commands.
- `TAP_ON_SELECTOR`: `tapOn` has no `text`, `id` or `accessibilityLabel`.
- `INPUT_TEXT_VALUE`: `inputText` is missing or not a string / `{text: ...}`.
- `CONDITIONAL_COMMANDS`: `conditional` lacks a non-empty `commands` list.
- `RUN_FLOW_NOT_FOUND`: `runFlow` points at a file that does not exist
  (checked relative to the flow file; `${...}` paths are skipped).
- `UNKNOWN_COMMAND`: the command name is not a Maestro command.
  Fix: check spelling; suggestions are included.

## Warnings

- `SCREENSHOT_NAME`: `takeScreenshot` without a descriptive name.
- `ASSERT_AFTER_TAP`: `assertVisible` directly after `tapOn`.
  Fix: insert `waitForVisible` between them.
- `ASSERT_WITHOUT_NAVIGATION`: `assertVisible` with no earlier navigation or
  wait in the same sequence.
- `DUPLICATE_ACTION`: the same command twice in a row.
"""
