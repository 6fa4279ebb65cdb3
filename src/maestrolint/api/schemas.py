"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from maestrolint.models.errors import Diagnostic


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    text: str = Field(description="Maestro flow YAML content to validate")
    file_path: str | None = Field(
        default=None,
        description=(
            "Path of the flow on the server's disk; enables runFlow target checks. "
            "The check reports whether referenced files exist on the server, so only "
            "expose this endpoint to clients trusted with that information."
        ),
    )


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    valid: bool
    error_count: int = 0
    warning_count: int = 0
    diagnostics: list[Diagnostic] = []


class CommandReference(BaseModel):
    """Hover documentation for one command or flow property."""

    name: str
    documentation: str


class CommandListResponse(BaseModel):
    """Response for GET /reference/commands."""

    commands: list[CommandReference] = []


class CompletionRequest(BaseModel):
    """Request body for POST /complete."""

    line_prefix: str = Field(description="Text of the current line left of the cursor")


class CompletionItemResponse(BaseModel):
    label: str
    insert_text: str
    detail: str
    documentation: str
    sort_text: str


class CompletionResponse(BaseModel):
    """Response for POST /complete."""

    items: list[CompletionItemResponse] = []


class HoverRequest(BaseModel):
    """Request body for POST /hover."""

    line: str = Field(description="Full text of the line under the cursor")
    character: int = Field(ge=0, description="0-based cursor column")


class HoverResponse(BaseModel):
    contents: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
