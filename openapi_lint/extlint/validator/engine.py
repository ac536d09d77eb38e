"""Traversal engine: drains the work queue through every validator."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from extlint.validator.base import ValidationContext, Validator
from extlint.validator.extensions import ExtensionTypeValidator
from extlint.validator.introspector import StructuralIntrospector
from extlint.validator.models import WorkItem
from extlint.validator.sink import DiagnosticSink

logger = logging.getLogger(__name__)


def default_validators() -> list[Validator]:
    """The default validator chain in execution order."""
    return [
        StructuralIntrospector(),
        ExtensionTypeValidator(),
    ]


class TraversalEngine:
    """Breadth-first walk over work items, one validator pass per item.

    Items discovered by validators go to the tail of a single FIFO queue
    shared by all documents, so siblings from different files interleave in
    load order. Document trees are acyclic, so there is no visit limit.
    """

    def __init__(self, validators: list[Validator] | None = None) -> None:
        self.validators = list(validators) if validators is not None else default_validators()

    def run(self, items: Iterable[WorkItem], sink: DiagnosticSink) -> int:
        """Validate ``items`` and everything they expand to.

        Returns the number of work items processed.
        """
        queue: deque[WorkItem] = deque(items)
        context = ValidationContext(queue, sink)
        logger.debug(
            "Traversal starting with %d root(s) and validators %s",
            len(queue),
            [v.name for v in self.validators],
        )

        processed = 0
        while queue:
            item = queue.popleft()
            for validator in self.validators:
                validator.validate(item, context)
            processed += 1

        logger.debug("Traversal processed %d item(s), %d diagnostic(s)", processed, len(sink))
        return processed
