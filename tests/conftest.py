"""Shared test fixtures for maestrolint."""

from __future__ import annotations

from pathlib import Path

import pytest

from maestrolint.parser.loader import FlowLoader
from maestrolint.validation.engine import FlowValidator

FIXTURES_DIR = Path(__file__).parent / "fixtures"
FLOWS_DIR = FIXTURES_DIR / "flows"
LOGIN_FLOW = FLOWS_DIR / "login.maestro.yaml"
SETUP_FLOW = FLOWS_DIR / "subflows" / "setup.yaml"
BROKEN_FLOW = FLOWS_DIR / "broken.maestro.yaml"


@pytest.fixture
def loader() -> FlowLoader:
    return FlowLoader()


@pytest.fixture
def validator() -> FlowValidator:
    return FlowValidator()


SAMPLE_FLOW_YAML = """\
appId: com.example.app
---
- launchApp
- tapOn: "Sign in"
- waitForVisible: "Email"
- inputText: "user@example.com"
- assertVisible: "Welcome"
"""

NESTED_FLOW_YAML = """\
appId: com.example.app
---
- launchApp
- repeat:
    times: 3
    commands:
      - assertVisible: "Item"
      - scroll
      - scroll
- conditional:
    when:
      visible: "Allow"
    commands:
      - tapOn: "Allow"
"""


def lines(*rows: str) -> str:
    """Join flow lines into a document with a trailing newline."""
    return "\n".join(rows) + "\n"


def codes(diagnostics: list) -> list[str]:
    return [d.code for d in diagnostics]
