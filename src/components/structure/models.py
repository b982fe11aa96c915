"""
Structure component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --- Issue ---


@dataclass(frozen=True)
class StructureIssue:
    """First structural defect of a rejected document."""

    code: str
    message: str
    path: tuple[str | int, ...] = ()


# --- Input Models ---


@dataclass(frozen=True)
class ValidateDocumentInput:
    """Input for validating the structure of an editor document."""

    document: Any


# --- Output Models ---


@dataclass(frozen=True)
class ValidateDocumentOutput:
    """Output for structure validation."""

    is_valid: bool
    issue: StructureIssue | None = None
    success: bool = True
