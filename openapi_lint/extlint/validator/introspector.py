"""Structural introspection: expands containers into further work items."""

from __future__ import annotations

from extlint.validator.base import ValidationContext, Validator
from extlint.validator.models import WorkItem


class StructuralIntrospector(Validator):
    """Enqueue every container child of a container, once.

    Without this validator only document roots would ever be inspected.
    Scalar children carry no structure and are never enqueued.
    """

    @property
    def name(self) -> str:
        return "structural_introspector"

    def validate(self, item: WorkItem, context: ValidationContext) -> bool:
        for child in item.node.children():
            if child.is_container():
                context.enqueue(WorkItem(source=item.source, node=child))
        return True
