"""
Structure component - shape validation for editor documents.
"""

from ._impl import (
    BLOCK,
    CHILDREN,
    DEFAULT_CONFIG,
    DOCUMENT,
    INLINE,
    LINK,
    RELATIONSHIP,
    RELATIONSHIP_DATA,
    RELATIONSHIP_VALUES,
    TEXT,
    DocumentStructureError,
    DocumentStructureService,
    StructureConfig,
    check_document,
    create_structure_service,
    is_valid_document,
    validate_document,
)
from .component import (
    run,
    run_validate,
)
from .models import (
    StructureIssue,
    ValidateDocumentInput,
    ValidateDocumentOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_validate",
    "validate_document",
    "check_document",
    "is_valid_document",
    # Models
    "StructureIssue",
    "ValidateDocumentInput",
    "ValidateDocumentOutput",
    # Ports
    "RulesPort",
    # Service
    "DEFAULT_CONFIG",
    "DocumentStructureError",
    "DocumentStructureService",
    "StructureConfig",
    "create_structure_service",
    # Codecs
    "BLOCK",
    "CHILDREN",
    "DOCUMENT",
    "INLINE",
    "LINK",
    "RELATIONSHIP",
    "RELATIONSHIP_DATA",
    "RELATIONSHIP_VALUES",
    "TEXT",
]
