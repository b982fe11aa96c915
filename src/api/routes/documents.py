"""
Document API Routes.

Validates the structure of editor documents before they are saved.
Invalid documents are a normal response, not an HTTP error, so editors
can show the defect next to the offending node.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from src.adapters.rules_port import RulesAdapter
from src.api.deps import get_rules_adapter
from src.components.structure import (
    StructureIssue,
    ValidateDocumentInput,
    run_validate,
)

router = APIRouter()


# --- Response Models ---


class StructureIssueResponse(BaseModel):
    """First structural defect of a document."""

    code: str
    message: str
    path: list[str | int]


class ValidateDocumentResponse(BaseModel):
    """Structure validation result."""

    is_valid: bool
    error: StructureIssueResponse | None = None


def issue_to_response(issue: StructureIssue) -> StructureIssueResponse:
    return StructureIssueResponse(
        code=issue.code,
        message=issue.message,
        path=list(issue.path),
    )


# --- Routes ---


@router.post("/validate", response_model=ValidateDocumentResponse)
def validate_document_route(
    document: Any = Body(...),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> ValidateDocumentResponse:
    """Validate the structure of an editor document."""
    result = run_validate(ValidateDocumentInput(document=document), rules=rules)

    if result.issue is None:
        return ValidateDocumentResponse(is_valid=result.is_valid)

    return ValidateDocumentResponse(
        is_valid=result.is_valid,
        error=issue_to_response(result.issue),
    )
