"""FastMCP server exposing flow validation and the command reference as MCP tools.

Run via::

    maestrolint-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http maestrolint-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  maestrolint-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from maestrolint import __version__
from maestrolint.flow_reference import FLOW_REFERENCE, HOVER_DOCS
from maestrolint.models.errors import Diagnostic, Severity
from maestrolint.parser.loader import FlowLoader
from maestrolint.service.editor import complete
from maestrolint.settings import Settings
from maestrolint.validation.engine import FlowValidator

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("maestrolint.mcp")

mcp = FastMCP("maestrolint")
_validator = FlowValidator()


def format_report(diagnostics: list[Diagnostic]) -> str:
    """Render diagnostics as a plain-text report for LLM consumption."""
    if not diagnostics:
        return "Flow is valid. No errors or warnings."
    errors = [d for d in diagnostics if d.level == Severity.ERROR]
    warnings = [d for d in diagnostics if d.level == Severity.WARNING]
    lines = [
        "Flow has validation errors:" if errors else "Flow is valid.",
    ]
    for e in errors:
        line = f"  [{e.code}] {e.message}"
        if e.suggestions:
            line += f"  Did you mean: {', '.join(e.suggestions)}?"
        lines.append(line)
    if warnings:
        lines.append("Warnings:")
        for w in warnings:
            lines.append(f"  [{w.code}] {w.message}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@mcp.resource("maestro://reference")
def flow_reference() -> str:
    """Maestro flow reference: command shapes, nested blocks, error and warning codes."""
    return FLOW_REFERENCE


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def get_flow_reference() -> str:
    """Get the Maestro flow reference.

    Call this before writing a flow to learn the command shapes and what
    each diagnostic code means.
    """
    return FLOW_REFERENCE


@mcp.tool
def validate_flow(flow_yaml: str, file_path: str | None = None) -> str:
    """Validate a Maestro flow and report errors and warnings with line numbers.

    Args:
        flow_yaml: Complete flow YAML content.
        file_path: Optional path of the flow on disk.  When given, ``runFlow``
            targets are checked for existence relative to it.
    """
    logger.info("validate_flow called (yaml length=%d)", len(flow_yaml))
    logger.debug("validate_flow yaml:\n%s", flow_yaml)
    return format_report(_validator.validate(flow_yaml, file_path))


@mcp.tool
def describe_command(name: str) -> str:
    """Describe a Maestro command (or flow header property) with an example.

    Args:
        name: Command name, e.g. ``tapOn`` or ``scrollUntilVisible``.
    """
    doc = HOVER_DOCS.get(name)
    if doc is None:
        raise ToolError(f"Unknown command '{name}'")
    return doc


@mcp.tool
def complete_command(line_prefix: str) -> str:
    """List command names completing the text typed so far on a line.

    Args:
        line_prefix: Current line up to the cursor, e.g. ``"- scr"``.
    """
    items = complete(line_prefix)
    if not items:
        return "No completions."
    return "\n".join(f"{item.label}: {item.detail}" for item in items)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "maestrolint MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _validator  # noqa: PLW0603
    _validator = FlowValidator(
        FlowLoader(
            max_document_size=settings.max_document_size,
            max_depth=settings.max_depth,
        )
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
