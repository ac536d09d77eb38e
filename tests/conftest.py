"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

# Add openapi_lint/ to Python path so `from extlint.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "openapi_lint"))

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
REPO_SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def schemas_fixture_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "schemas"


@pytest.fixture
def repo_schemas_dir() -> Path:
    return REPO_SCHEMAS_DIR
