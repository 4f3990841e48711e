"""Root test configuration: isolate every test from the caller's linediff environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clear_linediff_env(monkeypatch):
    """Drop LINEDIFF_* env vars so settings always start from defaults."""
    for name in list(os.environ):
        if name.startswith("LINEDIFF_"):
            monkeypatch.delenv(name, raising=False)
