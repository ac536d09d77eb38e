"""Validation pipeline for OpenAPI schema documents."""

from extlint.validator.base import ValidationContext, Validator
from extlint.validator.engine import TraversalEngine, default_validators
from extlint.validator.extensions import VERSION_EXTENSIONS, ExtensionTypeValidator
from extlint.validator.introspector import StructuralIntrospector
from extlint.validator.models import Diagnostic, RunState, ValidationReport, WorkItem
from extlint.validator.pipeline import RunController, validate_documents, validate_tree
from extlint.validator.sink import DiagnosticSink

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ExtensionTypeValidator",
    "RunController",
    "RunState",
    "StructuralIntrospector",
    "TraversalEngine",
    "VERSION_EXTENSIONS",
    "ValidationContext",
    "ValidationReport",
    "Validator",
    "WorkItem",
    "default_validators",
    "validate_documents",
    "validate_tree",
]
