"""Base class for traversal rules and the context handed to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from extlint.validator.models import Diagnostic, WorkItem
from extlint.validator.sink import DiagnosticSink


class ValidationContext:
    """The two side channels a validator may touch: the queue and the sink."""

    def __init__(self, queue: deque[WorkItem], sink: DiagnosticSink) -> None:
        self._queue = queue
        self._sink = sink

    def enqueue(self, item: WorkItem) -> None:
        """Schedule ``item`` for validation after everything already queued."""
        self._queue.append(item)

    def report(self, diagnostic: Diagnostic) -> None:
        self._sink.append(diagnostic)


class Validator(ABC):
    """One rule run against every work item the engine dequeues.

    Subclasses touch the run only through the ValidationContext they are
    given. The engine ignores the returned flag.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs."""
        ...

    @abstractmethod
    def validate(self, item: WorkItem, context: ValidationContext) -> bool:
        """Inspect one work item, enqueueing work or reporting diagnostics."""
        ...
