"""Editor endpoints: POST /complete and POST /hover."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from maestrolint.api.schemas import (
    CompletionItemResponse,
    CompletionRequest,
    CompletionResponse,
    HoverRequest,
    HoverResponse,
)
from maestrolint.service.editor import complete, hover_at

router = APIRouter()


@router.post("/complete", response_model=CompletionResponse)
async def complete_command(body: CompletionRequest) -> CompletionResponse:
    """Command-name completions for the text left of the cursor."""
    items = [CompletionItemResponse(**asdict(item)) for item in complete(body.line_prefix)]
    return CompletionResponse(items=items)


@router.post("/hover", response_model=HoverResponse)
async def hover(body: HoverRequest) -> HoverResponse:
    """Hover documentation for the key or command under the cursor."""
    return HoverResponse(contents=hover_at(body.line, body.character))
