"""Read-only views over parsed YAML/JSON document trees."""

from __future__ import annotations

import base64
import datetime
from enum import Enum
from typing import Any

from ruamel.yaml.comments import TaggedScalar
from ruamel.yaml.scalarbool import ScalarBoolean

from extlint.errors import FieldNotFound


class NodeKind(str, Enum):
    """Kind of a document node, named after the JSON data model."""

    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    BINARY = "BINARY"
    OTHER = "OTHER"


CONTAINER_KINDS = {NodeKind.OBJECT, NodeKind.ARRAY}


def _kind_of(value: Any) -> NodeKind:
    # bool before int: bool (and ScalarBoolean) subclass int
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    if isinstance(value, (str, datetime.date)):
        return NodeKind.STRING
    if isinstance(value, (bool, ScalarBoolean)):
        return NodeKind.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if value is None:
        return NodeKind.NULL
    if isinstance(value, (bytes, bytearray)):
        return NodeKind.BINARY
    return NodeKind.OTHER


def _escape(token: Any) -> str:
    """Escape one JSON-pointer reference token."""
    return str(token).replace("~", "~0").replace("/", "~1")


def _line_of(value: Any) -> int | None:
    """1-based start line of a ruamel round-trip container, if recorded."""
    lc = getattr(value, "lc", None)
    if lc is None or lc.line is None:
        return None
    return lc.line + 1


def _child_line(parent: Any, key: Any) -> int | None:
    """1-based line of a value inside a ruamel container, if recorded."""
    lc = getattr(parent, "lc", None)
    if lc is None:
        return None
    try:
        if isinstance(parent, dict):
            line, _col = lc.value(key)
        else:
            line, _col = lc.item(key)
    except (KeyError, IndexError, TypeError):
        return None
    return line + 1


class DocumentNode:
    """A read-only view over one value of a parsed document.

    Wraps whatever the parser produced (ruamel round-trip types or plain
    Python ``dict``/``list``/scalars) and records where in the document the
    value lives so diagnostics can point at it.
    """

    __slots__ = ("_value", "kind", "path", "line")

    def __init__(self, value: Any, path: str = "", line: int | None = None) -> None:
        # custom local tags (`!ver 36.0`) keep the scalar as written
        if isinstance(value, TaggedScalar):
            value = value.value
        self._value = value
        self.kind = _kind_of(value)
        self.path = path
        self.line = line if line is not None else _line_of(value)

    @classmethod
    def wrap(cls, value: Any) -> DocumentNode:
        """Build the root node of a parsed document."""
        return cls(value)

    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    def is_textual(self) -> bool:
        return self.kind is NodeKind.STRING

    def has_field(self, name: str) -> bool:
        """True when this node is an object carrying ``name``."""
        if self.kind is not NodeKind.OBJECT:
            return False
        return name in self._value

    def get_field(self, name: str) -> DocumentNode:
        """Return the node stored under ``name``.

        Raises FieldNotFound when absent; guard with ``has_field``.
        """
        if not self.has_field(name):
            raise FieldNotFound(name, self.path)
        return DocumentNode(
            self._value[name],
            path=f"{self.path}/{_escape(name)}",
            line=_child_line(self._value, name),
        )

    def children(self) -> list[DocumentNode]:
        """Container-typed children in document order. Scalars have none."""
        if self.kind is NodeKind.OBJECT:
            entries = self._value.items()
        elif self.kind is NodeKind.ARRAY:
            entries = enumerate(self._value)
        else:
            return []

        result: list[DocumentNode] = []
        for key, child in entries:
            if not isinstance(child, (dict, list, tuple)):
                continue
            result.append(DocumentNode(child, path=f"{self.path}/{_escape(key)}"))
        return result

    def render_text(self) -> str:
        """Best-effort textual rendering of a scalar for diagnostics."""
        value = self._value
        if self.kind is NodeKind.STRING:
            return str(value)
        if self.kind is NodeKind.BOOLEAN:
            return "true" if value else "false"
        if self.kind is NodeKind.NUMBER:
            return str(value)
        if self.kind is NodeKind.NULL:
            return "null"
        if self.kind is NodeKind.BINARY:
            return base64.b64encode(value).decode("ascii")
        if self.kind is NodeKind.OTHER:
            return str(value)
        return ""

    def __repr__(self) -> str:
        return f"DocumentNode(kind={self.kind.value}, path={self.path or '/'!r})"
