"""Append-only collector for diagnostics produced during a run."""

from __future__ import annotations

from collections.abc import Iterator

from extlint.validator.models import Diagnostic


class DiagnosticSink:
    """Ordered, append-only store of diagnostics for one run."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def append(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def snapshot(self) -> list[Diagnostic]:
        """Copy of everything recorded so far, in emission order."""
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))
