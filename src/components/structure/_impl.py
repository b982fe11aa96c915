"""
Document structure validator - shape checks for editor documents.

Checks that a value is a well-formed document tree before it is
normalized or stored. Only the shape of each node is checked; where a
node may appear (e.g. no layout inside a heading) is left to
normalization.

Key behaviors:
- A document is an array of block nodes
- Block children may mix block and inline nodes
- Inline children (links, relationships) may only hold inline nodes
- Every node is a closed object: unknown keys are rejected
- Marks on text are `true` or absent, never `false`
- The first defect in document order is raised, nothing is collected
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeGuard

from src.core.services.codecs import (
    ArrayOf,
    ExactObject,
    Lazy,
    Literal,
    NodeUnion,
    RecordOf,
    StructureError,
    Union,
    number,
    optional,
    string,
    unknown,
)
from src.domain.document import (
    BLOCK_TYPES,
    COMPONENT_PROP_TYPES,
    HEADING_LEVELS,
    INLINE_TYPES,
    MARK_KEYS,
    ONLY_CHILDREN_TYPES,
    TEXT_ALIGN_VALUES,
    Document,
)

logger = logging.getLogger(__name__)


class DocumentStructureError(StructureError):
    """Raised by validate_document for the first structural defect."""


@dataclass(frozen=True)
class StructureConfig:
    """Structure validation configuration from rules."""

    max_json_bytes: int = 400_000
    log_rejections: bool = True


DEFAULT_CONFIG = StructureConfig()


# --- Leaf and marks ---

MARK = Literal(True, name="true or absent")

TEXT = ExactObject(
    "Text",
    {
        "text": string,
        **{key: optional(MARK) for key in MARK_KEYS},
    },
)

# --- Inline nodes ---

RELATIONSHIP_DATA = ExactObject(
    "RelationshipData",
    {
        "id": string,
        "label": optional(string),
        "data": optional(RecordOf(unknown)),
    },
)

INLINE_CHILDREN = Lazy("InlineChildren", lambda: ArrayOf(INLINE))

LINK = ExactObject(
    "Link",
    {
        "type": Literal("link"),
        "href": string,
        "children": INLINE_CHILDREN,
    },
)

RELATIONSHIP = ExactObject(
    "Relationship",
    {
        "type": Literal("relationship"),
        "relationship": string,
        "data": optional(RELATIONSHIP_DATA),
        "children": INLINE_CHILDREN,
    },
)

INLINE = NodeUnion(
    "inline",
    {"link": LINK, "relationship": RELATIONSHIP},
    leaf=TEXT,
    foreign=BLOCK_TYPES,
    foreign_kind="block",
)

# --- Block nodes ---

CHILDREN = Lazy("Children", lambda: ArrayOf(ELEMENT))

TEXT_ALIGN = Literal(*TEXT_ALIGN_VALUES, name="'center', 'end' or absent")

LAYOUT = ExactObject(
    "Layout",
    {
        "type": Literal("layout"),
        "layout": ArrayOf(number),
        "children": CHILDREN,
    },
)

ONLY_CHILDREN_ELEMENT = ExactObject(
    "OnlyChildrenElement",
    {
        "type": Literal(*ONLY_CHILDREN_TYPES),
        "children": CHILDREN,
    },
)

HEADING = ExactObject(
    "Heading",
    {
        "type": Literal("heading"),
        "textAlign": optional(TEXT_ALIGN),
        "level": Literal(*HEADING_LEVELS, name="one of 1, 2, 3, 4, 5, 6"),
        "children": CHILDREN,
    },
)

PARAGRAPH = ExactObject(
    "Paragraph",
    {
        "type": Literal("paragraph"),
        "textAlign": optional(TEXT_ALIGN),
        "children": CHILDREN,
    },
)

# Relationship values are not closed objects
RELATIONSHIP_VALUES = RecordOf(
    ExactObject(
        "RelationshipValue",
        {
            "relationship": string,
            "data": Union(
                RELATIONSHIP_DATA,
                ArrayOf(RELATIONSHIP_DATA),
                Literal(None),
                name="RelationshipData, an array of RelationshipData or null",
            ),
        },
        closed=False,
    )
)

COMPONENT_BLOCK = ExactObject(
    "ComponentBlock",
    {
        "type": Literal("component-block"),
        "component": string,
        "relationships": RELATIONSHIP_VALUES,
        "props": RecordOf(unknown),
        "children": CHILDREN,
    },
)

COMPONENT_PROP = ExactObject(
    "ComponentProp",
    {
        "type": Literal(*COMPONENT_PROP_TYPES),
        "propPath": ArrayOf(Union(string, number, name="a string or a number")),
        "children": CHILDREN,
    },
)

BLOCK_VARIANTS = {
    "layout": LAYOUT,
    **{block_type: ONLY_CHILDREN_ELEMENT for block_type in ONLY_CHILDREN_TYPES},
    "heading": HEADING,
    "paragraph": PARAGRAPH,
    "component-block": COMPONENT_BLOCK,
    **{prop_type: COMPONENT_PROP for prop_type in COMPONENT_PROP_TYPES},
}

BLOCK = NodeUnion(
    "block",
    BLOCK_VARIANTS,
    foreign=INLINE_TYPES,
    foreign_kind="inline",
)

# Any node that may appear in a block's children
ELEMENT = NodeUnion(
    "block or inline",
    {**BLOCK_VARIANTS, "link": LINK, "relationship": RELATIONSHIP},
    leaf=TEXT,
)

DOCUMENT = ArrayOf(BLOCK, name="Document")


# --- Entry points ---


def validate_document(value: Any) -> None:
    """
    Validate an editor document.

    Raises:
        DocumentStructureError: for the first structural defect found,
        in document order.
    """
    try:
        DOCUMENT.validate(value, ())
    except StructureError as e:
        raise DocumentStructureError(e.code, e.message, e.path, e.value) from None


def check_document(value: Any) -> DocumentStructureError | None:
    """Return the first structural defect, or None for a valid document."""
    try:
        validate_document(value)
    except DocumentStructureError as e:
        return e
    return None


def is_valid_document(value: Any) -> TypeGuard[Document]:
    return check_document(value) is None


# --- Service Class ---


class DocumentStructureService:
    """
    Document structure service.

    Wraps the validator with logging driven by configuration.
    """

    def __init__(self, config: StructureConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> StructureConfig:
        return self._config

    def validate(self, document: Any) -> None:
        """Validate document, raising DocumentStructureError on the first defect."""
        try:
            validate_document(document)
        except DocumentStructureError as e:
            if self._config.log_rejections:
                logger.info("Document rejected: %s at %s", e.code, e.location)
            raise
        logger.debug("Document accepted")

    def check(self, document: Any) -> DocumentStructureError | None:
        try:
            self.validate(document)
        except DocumentStructureError as e:
            return e
        return None

    def is_valid(self, document: Any) -> TypeGuard[Document]:
        return self.check(document) is None


# --- Factory ---


def create_structure_service(
    config: StructureConfig | None = None,
) -> DocumentStructureService:
    """Create a DocumentStructureService with optional configuration."""
    return DocumentStructureService(config=config)
