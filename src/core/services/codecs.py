"""
Structural codecs - small composable validators for JSON-like values.

Each codec inspects a value and either returns normally or raises a
StructureError describing the first defect found. Codecs never coerce or
copy their input.

Key behaviors:
- Validation is fail-fast and depth-first, in document order
- Every error carries the path from the root to the offending value
- Objects can be closed (undeclared keys rejected)
- Recursive grammars are expressed with Lazy, resolved on first use
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

Path = tuple[str | int, ...]

# --- Error codes ---

EXCESS_PROPERTY = "excess_property"
TYPE_MISMATCH = "type_mismatch"
UNKNOWN_DISCRIMINANT = "unknown_discriminant"
MISSING_FIELD = "missing_field"
NOT_A_SEQUENCE = "not_a_sequence"


def format_path(path: Path) -> str:
    """Render a path as `$`, `[0].children[2].bold`, ..."""
    if not path:
        return "$"
    parts = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}" if parts else segment)
    return "".join(parts)


def describe(value: Any) -> str:
    """Short description of a value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        shown = value if len(value) <= 40 else value[:37] + "..."
        return repr(shown)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _label(path: Path) -> str:
    if not path:
        return "document"
    last = path[-1]
    if isinstance(last, int):
        return f"element {last}"
    return last


class StructureError(ValueError):
    """First structural defect found in a value."""

    def __init__(self, code: str, message: str, path: Path = (), value: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.value = value

    @property
    def location(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        return f"{self.message} (at {self.location})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, path={self.path!r})"


def mismatch(expected: str, value: Any, path: Path) -> StructureError:
    return StructureError(
        TYPE_MISMATCH,
        f"{_label(path)} must be {expected}, got {describe(value)}",
        path,
        value,
    )


# --- Codecs ---


class Codec:
    """Base class: subclasses implement validate()."""

    name: str = "value"

    def validate(self, value: Any, path: Path = ()) -> None:
        raise NotImplementedError

    def is_valid(self, value: Any) -> bool:
        try:
            self.validate(value)
        except StructureError:
            return False
        return True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Primitive(Codec):
    """Codec backed by a plain predicate."""

    def __init__(self, name: str, predicate: Callable[[Any], bool]) -> None:
        self.name = name
        self._predicate = predicate

    def validate(self, value: Any, path: Path = ()) -> None:
        if not self._predicate(value):
            raise mismatch(self.name, value, path)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


string = Primitive("a string", lambda value: isinstance(value, str))
number = Primitive("a number", _is_number)
unknown = Primitive("any value", lambda value: True)


def _render_literal(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return describe(value)


def _literal_matches(expected: Any, value: Any) -> bool:
    if isinstance(expected, bool) or isinstance(value, bool):
        return value is expected
    if _is_number(expected):
        return _is_number(value) and value == expected
    return type(value) is type(expected) and value == expected


class Literal(Codec):
    """Matches one of a fixed set of literal values."""

    def __init__(self, *values: Any, name: str | None = None) -> None:
        if not values:
            raise ValueError("Literal needs at least one value")
        self.values = values
        self.name = name or " | ".join(_render_literal(v) for v in values)

    def matches(self, value: Any) -> bool:
        return any(_literal_matches(expected, value) for expected in self.values)

    def validate(self, value: Any, path: Path = ()) -> None:
        if not self.matches(value):
            raise mismatch(self.name, value, path)


class Union(Codec):
    """Accepts a value if any member accepts it (tried in order)."""

    def __init__(self, *members: Codec, name: str | None = None) -> None:
        self.members = members
        self.name = name or " | ".join(m.name for m in members)

    def validate(self, value: Any, path: Path = ()) -> None:
        deepest: StructureError | None = None
        for member in self.members:
            try:
                member.validate(value, path)
                return
            except StructureError as e:
                if deepest is None or len(e.path) > len(deepest.path):
                    deepest = e
        # A member that got past the top level explains the failure best
        if deepest is not None and len(deepest.path) > len(path):
            raise deepest
        raise mismatch(self.name, value, path)


class ArrayOf(Codec):
    """Ordered sequence (list or tuple) whose elements all match `item`."""

    def __init__(self, item: Codec, name: str | None = None) -> None:
        self.item = item
        self.name = name or f"Array<{item.name}>"

    def validate(self, value: Any, path: Path = ()) -> None:
        if not isinstance(value, (list, tuple)):
            raise StructureError(
                NOT_A_SEQUENCE,
                f"{_label(path)} must be an array, got {describe(value)}",
                path,
                value,
            )
        for index, element in enumerate(value):
            self.item.validate(element, (*path, index))


class RecordOf(Codec):
    """Mapping with string keys whose values all match `item`."""

    def __init__(self, item: Codec, name: str | None = None) -> None:
        self.item = item
        self.name = name or f"Record<string, {item.name}>"

    def validate(self, value: Any, path: Path = ()) -> None:
        if not isinstance(value, Mapping):
            raise mismatch("an object", value, path)
        for key, element in value.items():
            if not isinstance(key, str):
                raise mismatch("an object with string keys", value, path)
            self.item.validate(element, (*path, key))


@dataclass(frozen=True)
class Field:
    codec: Codec
    required: bool = True


def optional(codec: Codec) -> Field:
    return Field(codec, required=False)


class ExactObject(Codec):
    """
    Object with a declared field set.

    Declared fields are checked in declaration order, then (when closed)
    any key outside the declaration is rejected as an excess property.
    """

    def __init__(
        self,
        name: str,
        fields: Mapping[str, Codec | Field],
        closed: bool = True,
    ) -> None:
        self.name = name
        self.fields: dict[str, Field] = {
            key: entry if isinstance(entry, Field) else Field(entry)
            for key, entry in fields.items()
        }
        self.closed = closed

    @property
    def allowed_keys(self) -> frozenset[str]:
        return frozenset(self.fields)

    def validate(self, value: Any, path: Path = ()) -> None:
        if not isinstance(value, Mapping):
            raise mismatch(f"a {self.name} object", value, path)

        for key, entry in self.fields.items():
            if key not in value:
                if entry.required:
                    raise StructureError(
                        MISSING_FIELD,
                        f"{self.name} is missing required field '{key}'",
                        (*path, key),
                    )
                continue
            entry.codec.validate(value[key], (*path, key))

        if self.closed:
            for key in value:
                if key not in self.fields:
                    raise StructureError(
                        EXCESS_PROPERTY,
                        f"excess property '{key}' is not allowed on {self.name}",
                        (*path, key),
                        value[key],
                    )


class Lazy(Codec):
    """
    Named deferred reference to another codec.

    The thunk runs on first validation and the result is cached, so a
    grammar can refer to codecs defined later in the module, or to itself.
    """

    def __init__(self, name: str, thunk: Callable[[], Codec]) -> None:
        self.name = name
        self._thunk = thunk
        self._resolved: Codec | None = None

    @property
    def codec(self) -> Codec:
        if self._resolved is None:
            self._resolved = self._thunk()
        return self._resolved

    def validate(self, value: Any, path: Path = ()) -> None:
        self.codec.validate(value, path)


class NodeUnion(Codec):
    """
    Tagged dispatch over node variants.

    A value carrying a `text` key goes to the leaf variant (when there is
    one); everything else is dispatched on its `type` literal. Types known
    to belong to a different context are reported as misplaced nodes.
    """

    def __init__(
        self,
        name: str,
        variants: Mapping[str, Codec],
        leaf: Codec | None = None,
        foreign: Iterable[str] = (),
        foreign_kind: str = "",
        tag: str = "type",
    ) -> None:
        self.name = name
        self.variants = dict(variants)
        self.leaf = leaf
        self.foreign = frozenset(foreign)
        self.foreign_kind = foreign_kind
        self.tag = tag

    def validate(self, value: Any, path: Path = ()) -> None:
        if not isinstance(value, Mapping):
            raise mismatch(f"a {self.name} node", value, path)

        if "text" in value:
            if self.leaf is not None:
                self.leaf.validate(value, path)
                return
            if self.tag not in value:
                raise StructureError(
                    UNKNOWN_DISCRIMINANT,
                    f"text node found where only {self.name} nodes are permitted",
                    path,
                    value,
                )

        if self.tag not in value:
            expected = f"'text' or '{self.tag}'" if self.leaf is not None else f"'{self.tag}'"
            raise StructureError(
                MISSING_FIELD,
                f"{self.name} node is missing {expected}",
                (*path, self.tag),
            )

        tag_value = value[self.tag]
        variant = self.variants.get(tag_value) if isinstance(tag_value, str) else None
        if variant is None:
            if isinstance(tag_value, str) and tag_value in self.foreign:
                message = (
                    f"{self.foreign_kind} node '{tag_value}' found where only "
                    f"{self.name} nodes are permitted"
                )
            else:
                message = f"unknown {self.name} node type {describe(tag_value)}"
            raise StructureError(UNKNOWN_DISCRIMINANT, message, (*path, self.tag), tag_value)

        variant.validate(value, path)
