from pathlib import Path

import pytest

from src.domain.document import Document

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def editor_document() -> Document:
    """
    Document touching every node variant, shaped like editor output.
    """
    return [
        {
            "type": "heading",
            "level": 1,
            "textAlign": "center",
            "children": [{"text": "Release notes", "bold": True}],
        },
        {
            "type": "paragraph",
            "children": [
                {"text": "See "},
                {
                    "type": "link",
                    "href": "https://example.com/changelog",
                    "children": [{"text": "the changelog", "italic": True, "underline": True}],
                },
                {"text": " and "},
                {
                    "type": "relationship",
                    "relationship": "mention",
                    "data": {"id": "u_1", "label": "Ada", "data": {"role": "editor"}},
                    "children": [{"text": ""}],
                },
                {"text": "ctrl+s", "keyboard": True, "code": True},
            ],
        },
        {
            "type": "layout",
            "layout": [1, 1.5],
            "children": [
                {
                    "type": "layout-area",
                    "children": [{"type": "paragraph", "children": [{"text": "left"}]}],
                },
                {
                    "type": "layout-area",
                    "children": [{"type": "paragraph", "children": [{"text": "right"}]}],
                },
            ],
        },
        {
            "type": "unordered-list",
            "children": [
                {
                    "type": "list-item",
                    "children": [{"type": "paragraph", "children": [{"text": "one"}]}],
                },
            ],
        },
        {"type": "blockquote", "children": [{"type": "paragraph", "children": [{"text": "q"}]}]},
        {"type": "code", "children": [{"text": "print('hi')"}]},
        {"type": "divider", "children": [{"text": ""}]},
        {
            "type": "component-block",
            "component": "hero",
            "relationships": {
                "author": {"relationship": "author", "data": {"id": "a1", "label": "Ada"}},
                "tags": {"relationship": "tags", "data": [{"id": "t1"}, {"id": "t2"}]},
                "cover": {"relationship": "cover", "data": None},
            },
            "props": {"title": "Hello", "count": 3, "nested": {"any": ["thing"]}},
            "children": [
                {
                    "type": "component-block-prop",
                    "propPath": ["content", 0],
                    "children": [{"type": "paragraph", "children": [{"text": "body"}]}],
                },
                {
                    "type": "component-inline-prop",
                    "propPath": ["title"],
                    "children": [{"text": "Hello", "insertMenu": True}],
                },
            ],
        },
    ]
