"""Versioning extension checks: version fields must be YAML strings."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from extlint.validator.base import ValidationContext, Validator
from extlint.validator.models import Diagnostic, WorkItem

logger = logging.getLogger(__name__)

# Vendor extensions recording the API version a construct was
# introduced, deprecated and removed in.
VERSION_EXTENSIONS = (
    "x-vcloud-added-in",
    "x-vcloud-deprecated-in",
    "x-vcloud-removed-in",
)


class ExtensionTypeValidator(Validator):
    """Flag recognized extension fields whose value is not a string.

    An unquoted ``x-vcloud-added-in: 1.0`` parses as a number. Each
    offending field produces exactly one diagnostic; absent fields and
    string values are fine.
    """

    def __init__(self, fields: Iterable[str] = VERSION_EXTENSIONS) -> None:
        self.fields = tuple(fields)

    @property
    def name(self) -> str:
        return "extension_types"

    def validate(self, item: WorkItem, context: ValidationContext) -> bool:
        node = item.node
        if not node.is_container():
            return True

        for field in self.fields:
            self._check_field(item, field, context)
        return True

    def _check_field(self, item: WorkItem, field: str, context: ValidationContext) -> None:
        node = item.node
        if not node.has_field(field):
            return

        value = node.get_field(field)
        if value.is_textual():
            return

        logger.debug("%s: %s at %s is %s", item.source, field, node.path or "/", value.kind.value)
        context.report(
            Diagnostic(
                source=item.source,
                field_name=field,
                value=value.render_text(),
                kind=value.kind,
                path=node.path,
                line=value.line,
            )
        )
