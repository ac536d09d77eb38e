"""Schema file discovery and YAML parsing using ruamel.yaml."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.constructor import RoundTripConstructor

from extlint.document.node import DocumentNode
from extlint.errors import LoadFailure

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES = (".yaml",)


class SchemaConstructor(RoundTripConstructor):
    """Round-trip constructor that leaves YAML timestamps as plain text."""

    def construct_timestamp_text(self, node: Any) -> Any:
        return self.construct_scalar(node)


SchemaConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SchemaConstructor.construct_timestamp_text,
)


def _new_yaml() -> YAML:
    yaml = YAML()
    yaml.Constructor = SchemaConstructor
    yaml.preserve_quotes = True
    return yaml


def discover_files(root: Path, suffixes: Iterable[str] = DEFAULT_SUFFIXES) -> list[Path]:
    """Recursively find schema files under ``root`` in sorted path order.

    A ``root`` that is itself a file is returned as the only match.
    """
    suffixes = tuple(suffixes)
    if not root.exists():
        raise LoadFailure(str(root), "no such file or directory")
    if root.is_file():
        return [root]
    return sorted(
        path for path in root.rglob("*")
        if path.is_file() and path.name.endswith(suffixes)
    )


def parse_document(text: str, source: str) -> DocumentNode:
    """Parse YAML (or JSON) text into a document tree.

    Raises LoadFailure on syntax errors or when the text holds no document.
    """
    try:
        parsed = _new_yaml().load(StringIO(text))
    except YAMLError as e:
        line = None
        if getattr(e, "problem_mark", None) is not None:
            line = e.problem_mark.line + 1
        logger.error("Failed to parse %s (line %s): %s", source, line, e)
        raise LoadFailure(source, e) from e
    except ValueError as e:
        logger.error("Failed to construct %s: %s", source, e)
        raise LoadFailure(source, e) from e

    if parsed is None:
        raise LoadFailure(source, "document is empty")

    return DocumentNode.wrap(parsed)


def load_file(path: Path) -> tuple[str, DocumentNode]:
    """Read and parse a single schema file, returning ``(source, root)``."""
    source = str(path)
    logger.info("reading: %s", source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadFailure(source, e) from e
    return source, parse_document(text, source)


def load_tree(
    root: Path,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> list[tuple[str, DocumentNode]]:
    """Discover and load every schema file under ``root``.

    The first file that fails to load aborts the whole load.
    """
    files = discover_files(root, suffixes)
    logger.debug("Discovered %d schema file(s) under %s", len(files), root)
    return [load_file(path) for path in files]
