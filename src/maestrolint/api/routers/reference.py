"""Reference endpoints: GET /reference/commands[/{name}]."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from maestrolint.api.schemas import CommandListResponse, CommandReference
from maestrolint.flow_reference import HOVER_DOCS
from maestrolint.vocabulary import KNOWN_COMMANDS

router = APIRouter()


@router.get("/commands", response_model=CommandListResponse)
async def list_commands() -> CommandListResponse:
    """List every known Maestro command with its hover documentation."""
    return CommandListResponse(
        commands=[
            CommandReference(name=name, documentation=HOVER_DOCS.get(name, ""))
            for name in sorted(KNOWN_COMMANDS)
        ]
    )


@router.get("/commands/{name}", response_model=CommandReference)
async def get_command(name: str) -> CommandReference:
    """Return the documentation for one command or flow property."""
    doc = HOVER_DOCS.get(name)
    if doc is None:
        raise HTTPException(status_code=404, detail=f"No reference for '{name}'")
    return CommandReference(name=name, documentation=doc)
