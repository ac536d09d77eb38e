"""Tests for the run controller and pipeline shortcuts."""

from __future__ import annotations

from pathlib import Path

import pytest

from extlint.document.loader import parse_document
from extlint.document.node import DocumentNode, NodeKind
from extlint.errors import LoadFailure, RunStateError
from extlint.validator import (
    RunController,
    RunState,
    ValidationReport,
    validate_documents,
    validate_tree,
)

GUIDANCE = "The value must be enclosed in double-quotes to be properly parsed as a String"


def _doc(source: str, text: str) -> tuple[str, DocumentNode]:
    return source, parse_document(text, source)


class TestRunController:
    def test_state_transitions(self) -> None:
        controller = RunController()
        assert controller.state is RunState.uninitialized
        controller.load([_doc("a.yaml", "openapi: 3.0.1\n")])
        assert controller.state is RunState.loaded
        controller.traverse()
        assert controller.state is RunState.traversed
        report = controller.report()
        assert controller.state is RunState.reported
        assert report.passed is True

    def test_report_is_stable_once_reported(self) -> None:
        controller = RunController()
        report = controller.run([_doc("a.yaml", "x-vcloud-added-in: 1\n")])
        assert controller.report() is report

    def test_traverse_before_load_raises(self) -> None:
        with pytest.raises(RunStateError):
            RunController().traverse()

    def test_report_before_traverse_raises(self) -> None:
        controller = RunController()
        controller.load([])
        with pytest.raises(RunStateError):
            controller.report()

    def test_controller_is_single_use(self) -> None:
        controller = RunController()
        controller.run([])
        with pytest.raises(RunStateError):
            controller.load([])

    def test_report_counts(self) -> None:
        report = RunController().run([
            _doc("a.yaml", "info:\n  title: A\npaths: {}\n"),
            _doc("b.yaml", "openapi: 3.0.1\n"),
        ])
        assert report.documents == 2
        assert report.nodes_visited == 4


class TestValidateDocuments:
    def test_no_extension_fields_passes(self) -> None:
        report = validate_documents([
            _doc("a.yaml", "openapi: 3.0.1\npaths:\n  /a:\n    get:\n      responses: {}\n"),
        ])
        assert report.passed is True
        assert report.text == ""

    def test_quoted_values_pass(self) -> None:
        report = validate_documents([
            _doc("a.yaml", 'get:\n  x-vcloud-added-in: "1.0.0"\n  x-vcloud-removed-in: "2.0"\n'),
        ])
        assert report.passed is True

    def test_one_violation_in_two_documents(self) -> None:
        report = validate_documents([
            _doc("good.yaml", 'info:\n  x-vcloud-added-in: "36.0"\n'),
            _doc("bad.yaml", "info:\n  x-vcloud-added-in: 36.0\n"),
        ])
        assert report.passed is False
        assert report.text == f"[bad.yaml] detected x-vcloud-added-in: 36.0 to be of type NUMBER. {GUIDANCE}\n"

    def test_field_five_containers_deep(self) -> None:
        text = (
            "a:\n"
            "  b:\n"
            "    c:\n"
            "      d:\n"
            "        e:\n"
            "          x-vcloud-deprecated-in: true\n"
        )
        report = validate_documents([_doc("deep.yaml", text)])
        [diagnostic] = report.diagnostics
        assert diagnostic.kind is NodeKind.BOOLEAN
        assert diagnostic.path == "/a/b/c/d/e"
        assert diagnostic.line == 6
        assert diagnostic.location == "deep.yaml:6 /a/b/c/d/e"

    def test_unquoted_date_passes(self) -> None:
        report = validate_documents([_doc("d.yaml", "info:\n  x-vcloud-added-in: 2021-03-04\n")])
        assert report.passed is True

    def test_custom_tagged_version_passes(self) -> None:
        report = validate_documents([_doc("t.yaml", "info:\n  x-vcloud-added-in: !ver 36.0\n")])
        assert report.passed is True

    def test_binary_version_reported(self) -> None:
        report = validate_documents([
            _doc("b.yaml", "info:\n  x-vcloud-removed-in: !!binary aGVsbG8=\n"),
        ])
        assert report.text == (
            f"[b.yaml] detected x-vcloud-removed-in: aGVsbG8= to be of type BINARY. {GUIDANCE}\n"
        )

    def test_identical_violations_are_not_deduplicated(self) -> None:
        text = "a:\n  x-vcloud-added-in: 1\nb:\n  x-vcloud-added-in: 1\n"
        report = validate_documents([_doc("dup.yaml", text)])
        assert len(report.diagnostics) == 2
        assert report.diagnostics[0].message == report.diagnostics[1].message

    def test_idempotent(self) -> None:
        docs = [
            _doc("a.yaml", "x-vcloud-added-in: 1\nchild:\n  x-vcloud-removed-in: false\n"),
            _doc("b.yaml", "tags:\n  - x-vcloud-deprecated-in: 2.5\n"),
        ]
        first = validate_documents(docs)
        second = validate_documents(docs)
        assert first == second
        assert first.text == second.text
        assert len(first.diagnostics) == 3


class TestValidateTree:
    def test_fixture_tree(self, schemas_fixture_dir: Path) -> None:
        report = validate_tree(schemas_fixture_dir)
        violations = str(schemas_fixture_dir / "violations.yaml")
        deep = str(schemas_fixture_dir / "nested" / "deep.yaml")
        assert report.documents == 3
        assert report.text.splitlines() == [
            f"[{violations}] detected x-vcloud-added-in: 36.0 to be of type NUMBER. {GUIDANCE}",
            f"[{violations}] detected x-vcloud-deprecated-in: true to be of type BOOLEAN. {GUIDANCE}",
            f"[{deep}] detected x-vcloud-removed-in: 37 to be of type NUMBER. {GUIDANCE}",
        ]

    def test_clean_file_passes(self, schemas_fixture_dir: Path) -> None:
        report = validate_tree(schemas_fixture_dir / "clean.yaml")
        assert report.passed is True
        assert report.summary().endswith("no issues found.")

    def test_load_failure_aborts_before_traversal(self, tmp_path: Path) -> None:
        (tmp_path / "ok.yaml").write_text("x-vcloud-added-in: 1\n")
        (tmp_path / "zz.yaml").write_text("a: [\n")
        with pytest.raises(LoadFailure):
            validate_tree(tmp_path)


def test_report_model_defaults() -> None:
    report = ValidationReport()
    assert report.passed is True
    assert report.text == ""
    assert report.summary() == "Checked 0 document(s), 0 node(s), no issues found."
