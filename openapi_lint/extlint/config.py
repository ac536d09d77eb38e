"""Linter options loaded from an options file or the environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from extlint.document.loader import DEFAULT_SUFFIXES
from extlint.validator.extensions import VERSION_EXTENSIONS

logger = logging.getLogger(__name__)


class LintOptions(BaseModel):
    """Where to find schema files and which extension fields to check."""

    schemas_dir: str = "schemas"
    file_suffixes: list[str] = Field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    extension_fields: list[str] = Field(default_factory=lambda: list(VERSION_EXTENSIONS))


def _split_env(name: str) -> list[str] | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]


def load_options() -> LintOptions:
    """Load options from EXTLINT_OPTIONS_PATH (JSON) or env fallback."""
    opts_path = os.environ.get("EXTLINT_OPTIONS_PATH", "extlint.json")
    if Path(opts_path).exists():
        logger.debug("Reading options from %s", opts_path)
        return LintOptions.model_validate(json.loads(Path(opts_path).read_text()))

    values: dict[str, object] = {}
    if "EXTLINT_SCHEMAS_DIR" in os.environ:
        values["schemas_dir"] = os.environ["EXTLINT_SCHEMAS_DIR"]
    suffixes = _split_env("EXTLINT_FILE_SUFFIXES")
    if suffixes:
        values["file_suffixes"] = suffixes
    fields = _split_env("EXTLINT_EXTENSION_FIELDS")
    if fields:
        values["extension_fields"] = fields
    return LintOptions(**values)


def log_level() -> int:
    return logging.DEBUG if os.environ.get("EXTLINT_DEV_MODE") else logging.INFO
