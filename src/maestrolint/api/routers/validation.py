"""Validation endpoint: POST /validate."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from maestrolint.api.deps import get_validator
from maestrolint.api.schemas import ValidateRequest, ValidateResponse
from maestrolint.models.errors import Severity
from maestrolint.validation.engine import FlowValidator

router = APIRouter()


@router.post("", response_model=ValidateResponse)
async def validate_flow(
    body: ValidateRequest,
    validator: FlowValidator = Depends(get_validator),  # noqa: B008
) -> ValidateResponse:
    """Validate a Maestro flow and return its diagnostics in report order."""
    diagnostics = validator.validate(body.text, body.file_path)
    errors = sum(1 for d in diagnostics if d.level == Severity.ERROR)
    return ValidateResponse(
        valid=errors == 0,
        error_count=errors,
        warning_count=len(diagnostics) - errors,
        diagnostics=diagnostics,
    )
