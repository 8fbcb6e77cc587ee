"""Shared fixtures for the earthwork report tests."""

import copy
import json
from pathlib import Path

import pytest

from earthwork_report.host.json_document import JsonDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_path():
    """Path to the sample document snapshot."""
    return FIXTURES_DIR / "site_snapshot.json"


@pytest.fixture
def snapshot_data(snapshot_path):
    """Sample document snapshot as a dict (a fresh copy per test)."""
    with open(snapshot_path, encoding="utf-8") as f:
        return copy.deepcopy(json.load(f))


@pytest.fixture
def document(snapshot_data):
    """Sample document snapshot wrapped as a document source."""
    return JsonDocument(snapshot_data)
