"""Run controller: load → traverse → report, and pipeline shortcuts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from extlint.document.loader import DEFAULT_SUFFIXES, load_tree
from extlint.document.node import DocumentNode
from extlint.errors import RunStateError
from extlint.validator.base import Validator
from extlint.validator.engine import TraversalEngine
from extlint.validator.models import RunState, ValidationReport, WorkItem
from extlint.validator.sink import DiagnosticSink

logger = logging.getLogger(__name__)


class RunController:
    """Owns the queue seed, the diagnostic sink and the state of one run.

    States advance strictly ``uninitialized → loaded → traversed → reported``.
    A controller is single-use; build a new one for every run.
    """

    def __init__(self, validators: list[Validator] | None = None) -> None:
        self._engine = TraversalEngine(validators)
        self._sink = DiagnosticSink()
        self._roots: list[WorkItem] = []
        self._nodes_visited = 0
        self._report: ValidationReport | None = None
        self.state = RunState.uninitialized

    def _advance(self, expected: RunState, target: RunState) -> None:
        if self.state is not expected:
            raise RunStateError(
                f"Cannot move to '{target.value}' from '{self.state.value}' "
                f"(expected '{expected.value}')"
            )
        logger.debug("Run state %s -> %s", self.state.value, target.value)
        self.state = target

    def load(self, documents: Iterable[tuple[str, DocumentNode]]) -> None:
        """Seed the run with one work item per document root."""
        roots = [WorkItem(source=source, node=node) for source, node in documents]
        self._advance(RunState.uninitialized, RunState.loaded)
        self._roots = roots
        logger.info("Loaded %d document(s)", len(roots))

    def traverse(self) -> None:
        """Run the traversal engine until the queue is exhausted."""
        self._advance(RunState.loaded, RunState.traversed)
        self._nodes_visited = self._engine.run(self._roots, self._sink)

    def report(self) -> ValidationReport:
        """Materialize the sink into the final report."""
        if self.state is RunState.reported and self._report is not None:
            return self._report
        self._advance(RunState.traversed, RunState.reported)
        self._report = ValidationReport(
            diagnostics=self._sink.snapshot(),
            documents=len(self._roots),
            nodes_visited=self._nodes_visited,
        )
        logger.info("%s", self._report.summary())
        return self._report

    def run(self, documents: Iterable[tuple[str, DocumentNode]]) -> ValidationReport:
        self.load(documents)
        self.traverse()
        return self.report()


def validate_documents(
    documents: Iterable[tuple[str, DocumentNode]],
    validators: list[Validator] | None = None,
) -> ValidationReport:
    """Validate already-parsed ``(source, root)`` documents."""
    return RunController(validators).run(documents)


def validate_tree(
    root: Path | str,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    validators: list[Validator] | None = None,
) -> ValidationReport:
    """Discover, load and validate every schema file under ``root``.

    Any file that fails to load raises LoadFailure before traversal starts.
    """
    documents = load_tree(Path(root), suffixes)
    return validate_documents(documents, validators)
