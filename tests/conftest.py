"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

# Already in shelf order (case-insensitive comparison)
SHELF_ORDER = [
    "!!! bad",
    "AM101 .S3533",
    "AM101 .S3533 L58 1987b",
    "HF5381 .S5145",
    "HF5381 .S5145 1999",
    "HF5381 .S5145 2008",
    "HF5381 .S5145 2008 v.1",
    "HF5381 .S5145 2008 v.2",
    "PE1479 .B87 O93 1993",
    "QA9 .A1",
    "QA10 .A1",
    "QA76 .P98",
    "QA76 .P985",
    "QA76 .S35",
    "QA76 .S4",
    "QA76.73 .P98 L88 2013",
]


@pytest.fixture
def shelf_order() -> list[str]:
    """Call numbers listed in the order they are shelved."""
    return list(SHELF_ORDER)


@pytest.fixture
def schemas_dir() -> Path:
    """Path to the JSON Schemas directory."""
    return SCHEMAS_DIR
