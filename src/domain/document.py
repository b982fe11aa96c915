from typing import Any, Literal, NotRequired, TypedDict

# --- Vocabularies ---
MarkKey = Literal[
    "bold",
    "italic",
    "underline",
    "strikethrough",
    "code",
    "superscript",
    "subscript",
    "keyboard",
    "insertMenu",
]
OnlyChildrenType = Literal[
    "blockquote",
    "layout-area",
    "code",
    "divider",
    "list-item",
    "ordered-list",
    "unordered-list",
]
HeadingLevel = Literal[1, 2, 3, 4, 5, 6]
TextAlign = Literal["center", "end"]
ComponentPropType = Literal["component-inline-prop", "component-block-prop"]

MARK_KEYS: tuple[str, ...] = (
    "bold",
    "italic",
    "underline",
    "strikethrough",
    "code",
    "superscript",
    "subscript",
    "keyboard",
    "insertMenu",
)
ONLY_CHILDREN_TYPES: tuple[str, ...] = (
    "blockquote",
    "layout-area",
    "code",
    "divider",
    "list-item",
    "ordered-list",
    "unordered-list",
)
HEADING_LEVELS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)
TEXT_ALIGN_VALUES: tuple[str, ...] = ("center", "end")
COMPONENT_PROP_TYPES: tuple[str, ...] = ("component-inline-prop", "component-block-prop")

INLINE_TYPES: tuple[str, ...] = ("link", "relationship")
BLOCK_TYPES: tuple[str, ...] = (
    "layout",
    *ONLY_CHILDREN_TYPES,
    "heading",
    "paragraph",
    "component-block",
    *COMPONENT_PROP_TYPES,
)

# --- Inline nodes ---


class Text(TypedDict):
    text: str
    bold: NotRequired[Literal[True]]
    italic: NotRequired[Literal[True]]
    underline: NotRequired[Literal[True]]
    strikethrough: NotRequired[Literal[True]]
    code: NotRequired[Literal[True]]
    superscript: NotRequired[Literal[True]]
    subscript: NotRequired[Literal[True]]
    keyboard: NotRequired[Literal[True]]
    insertMenu: NotRequired[Literal[True]]


class RelationshipData(TypedDict):
    id: str
    label: NotRequired[str]
    data: NotRequired[dict[str, Any]]


class Link(TypedDict):
    type: Literal["link"]
    href: str
    children: list["Inline"]


class Relationship(TypedDict):
    type: Literal["relationship"]
    relationship: str
    data: NotRequired[RelationshipData]
    children: list["Inline"]


Inline = Text | Link | Relationship

# --- Block nodes ---


class Layout(TypedDict):
    type: Literal["layout"]
    layout: list[float]
    children: "Children"


class OnlyChildrenElement(TypedDict):
    type: OnlyChildrenType
    children: "Children"


class Heading(TypedDict):
    type: Literal["heading"]
    level: HeadingLevel
    textAlign: NotRequired[TextAlign]
    children: "Children"


class Paragraph(TypedDict):
    type: Literal["paragraph"]
    textAlign: NotRequired[TextAlign]
    children: "Children"


class RelationshipValue(TypedDict):
    relationship: str
    data: RelationshipData | list[RelationshipData] | None


class ComponentBlock(TypedDict):
    type: Literal["component-block"]
    component: str
    relationships: dict[str, RelationshipValue]
    props: dict[str, Any]
    children: "Children"


class ComponentProp(TypedDict):
    type: ComponentPropType
    propPath: list[str | int]
    children: "Children"


Block = Layout | OnlyChildrenElement | Heading | Paragraph | ComponentBlock | ComponentProp
Element = Block | Inline
Children = list[Element]
Document = list[Block]
