"""Root conftest: shared test configuration.

Invariants:
    - No TABOOK_* variable from the developer's shell leaks into a test
    - get_settings() cache cleared around every test
"""

import os

import pytest

from tabook.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("TABOOK_"):
            monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory out of Settings
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
