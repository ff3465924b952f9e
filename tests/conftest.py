"""Root conftest — shared test configuration.

Invariants:
    - Settings are rebuilt for every test, from pinned environment values
    - A developer's .env or PBXGRAPH_* shell variables never leak into assertions
"""

import pytest

from pbxgraph.config import get_settings


@pytest.fixture(autouse=True)
def pinned_settings(monkeypatch):
    monkeypatch.setenv("PBXGRAPH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PBXGRAPH_LOG_FORMAT", "json")
    monkeypatch.setenv("PBXGRAPH_UUID_LENGTH", "24")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
