"""
Structure component - shape validation for editor documents.

Invariants:
- Documents hold only block nodes at the top level
- Inline nodes hold only inline children
- Every node is a closed object
- Marks are true or absent
- Oversized documents are rejected before traversal
- Documents too deep for the call stack are rejected, not raised
"""

from __future__ import annotations

import json
import logging

from ._impl import (
    DEFAULT_CONFIG,
    DocumentStructureError,
    DocumentStructureService,
    StructureConfig,
)
from .models import (
    StructureIssue,
    ValidateDocumentInput,
    ValidateDocumentOutput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)


def _convert_error(error: DocumentStructureError) -> StructureIssue:
    """Convert a validator error to a component issue."""
    return StructureIssue(
        code=error.code,
        message=error.message,
        path=tuple(error.path),
    )


def _build_config(rules: RulesPort | None) -> StructureConfig:
    """Build structure config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return StructureConfig(
        max_json_bytes=rules.get_max_json_bytes(),
        log_rejections=rules.get_log_rejections(),
    )


def _check_size(document: object, config: StructureConfig) -> StructureIssue | None:
    try:
        json_bytes = len(json.dumps(document).encode("utf-8"))
    except (TypeError, ValueError) as e:
        return StructureIssue(
            code="invalid_json",
            message=f"Cannot serialize document: {e}",
        )

    if json_bytes > config.max_json_bytes:
        return StructureIssue(
            code="document_too_large",
            message=f"Document {json_bytes}B exceeds limit {config.max_json_bytes}B",
        )
    return None


# --- Component Entry Points ---


def run_validate(
    inp: ValidateDocumentInput,
    *,
    rules: RulesPort | None = None,
) -> ValidateDocumentOutput:
    """
    Validate the structure of an editor document.

    Args:
        inp: Input containing the candidate document.
        rules: Optional rules port for configuration.

    Returns:
        ValidateDocumentOutput with the first issue found, if any.
    """
    config = _build_config(rules)
    error: DocumentStructureError | None = None

    try:
        size_issue = _check_size(inp.document, config)
        if size_issue is None:
            error = DocumentStructureService(config).check(inp.document)
    except RecursionError:
        # Nesting deeper than the interpreter stack allows
        size_issue = StructureIssue(
            code="document_too_deep",
            message="Document is nested too deeply to validate",
        )

    if size_issue is not None:
        if config.log_rejections:
            logger.info("Document rejected: %s", size_issue.code)
        return ValidateDocumentOutput(is_valid=False, issue=size_issue)

    if error is not None:
        return ValidateDocumentOutput(is_valid=False, issue=_convert_error(error))

    return ValidateDocumentOutput(is_valid=True)


def run(
    inp: ValidateDocumentInput,
    *,
    rules: RulesPort | None = None,
) -> ValidateDocumentOutput:
    """
    Main entry point for the structure component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ValidateDocumentInput):
        return run_validate(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
