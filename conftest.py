"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from kansuji.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    """Isolate every test from KANSUJI_* variables and any developer `.env` file."""
    for name in list(os.environ):
        if name.startswith("KANSUJI_"):
            monkeypatch.delenv(name)
    # Settings read `.env` from the working directory; run from an empty one.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
