"""Command-line entrypoint: lint a tree of OpenAPI schema files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from extlint.config import LintOptions, load_options, log_level
from extlint.document.loader import discover_files, load_file
from extlint.errors import LoadFailure
from extlint.validator import (
    ExtensionTypeValidator,
    StructuralIntrospector,
    Validator,
    validate_documents,
)

logger = logging.getLogger(__name__)


def build_validators(options: LintOptions) -> list[Validator]:
    """Validator chain for the configured extension fields."""
    return [
        StructuralIntrospector(),
        ExtensionTypeValidator(options.extension_fields),
    ]


def collect_files(roots: list[Path], suffixes: list[str]) -> list[Path]:
    """Schema files under every root, each file once even when roots overlap."""
    seen: set[Path] = set()
    files: list[Path] = []
    for root in roots:
        for path in discover_files(root, suffixes):
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            files.append(path)
    return files


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extlint",
        description="Check vendor-extension conventions in OpenAPI schema files.",
    )
    parser.add_argument(
        "roots",
        nargs="*",
        help="Schema files or directories to lint (default: configured schemas_dir).",
    )
    parser.add_argument(
        "--suffix",
        action="append",
        dest="suffixes",
        help="File suffix to include; repeatable (default: configured file_suffixes).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    args = _build_parser().parse_args(argv)
    options = load_options()
    logger.debug("Options: %s", options.model_dump())

    roots = [Path(r) for r in args.roots] or [Path(options.schemas_dir)]
    suffixes = args.suffixes or options.file_suffixes

    try:
        documents = [load_file(path) for path in collect_files(roots, suffixes)]
    except LoadFailure as e:
        print(str(e), file=sys.stderr)
        return 2

    report = validate_documents(documents, build_validators(options))
    if report.passed:
        return 0

    sys.stdout.write(report.text)
    for diagnostic in report.diagnostics:
        print(f"  at {diagnostic.location}", file=sys.stderr)
    print(report.summary(), file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
