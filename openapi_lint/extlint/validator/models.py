"""Validation data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from extlint.document.node import DocumentNode, NodeKind

QUOTING_GUIDANCE = (
    "The value must be enclosed in double-quotes to be properly parsed as a String"
)


class RunState(str, Enum):
    """Lifecycle of a single validation run."""

    uninitialized = "uninitialized"
    loaded = "loaded"
    traversed = "traversed"
    reported = "reported"


class WorkItem(BaseModel):
    """A node awaiting validation, tagged with the file it came from."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: str
    node: DocumentNode


class Diagnostic(BaseModel):
    """A single extension-type violation."""

    model_config = ConfigDict(frozen=True)

    source: str
    field_name: str
    value: str
    kind: NodeKind
    path: str = ""
    line: int | None = None

    @property
    def message(self) -> str:
        return (
            f"[{self.source}] detected {self.field_name}: {self.value} "
            f"to be of type {self.kind.value}. {QUOTING_GUIDANCE}"
        )

    @property
    def location(self) -> str:
        where = self.path or "/"
        if self.line is not None:
            return f"{self.source}:{self.line} {where}"
        return f"{self.source} {where}"


class ValidationReport(BaseModel):
    """Aggregated result of a run: every diagnostic, in emission order."""

    model_config = ConfigDict(frozen=True)

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    documents: int = 0
    nodes_visited: int = 0

    @property
    def passed(self) -> bool:
        return not self.diagnostics

    @property
    def text(self) -> str:
        return "".join(f"{d.message}\n" for d in self.diagnostics)

    def summary(self) -> str:
        """One-line human readable outcome."""
        if self.passed:
            return (
                f"Checked {self.documents} document(s), "
                f"{self.nodes_visited} node(s), no issues found."
            )
        return (
            f"Checked {self.documents} document(s), {self.nodes_visited} node(s), "
            f"found {len(self.diagnostics)} issue(s)."
        )
