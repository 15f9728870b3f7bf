"""Pytest configuration for issuefields tests.

Ensures the in-repo `src` directory is on `sys.path` so the package can be
imported without an editable install (`pip install -e .`).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from issuefields.models import FieldSchema  # noqa: E402


@pytest.fixture
def configured() -> list[FieldSchema]:
    return [
        FieldSchema(name="Story Points", key="customfield_10001", data_type="number"),
        FieldSchema(name="Environment", key="customfield_10002", data_type="option"),
        FieldSchema(name="Tags", key="customfield_10003", data_type="array", item_type="string"),
        FieldSchema(name="Platforms", key="customfield_10004", data_type="array", item_type="option"),
        FieldSchema(name="Target Project", key="customfield_10005", data_type="project"),
        FieldSchema(name="Notes", key="customfield_10006", data_type="string"),
    ]


@pytest.fixture(autouse=True)
def _fresh_logger(monkeypatch):
    # get_logger() binds to sys.stdout on first use; rebind per test so capsys sees output
    monkeypatch.setattr("issuefields.logging._GLOBAL", None)
