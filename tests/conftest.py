"""Pytest fixtures for clipick tests."""

import pytest

from clipick.models import Option
from clipick.state import SelectionState


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch, tmp_path):
    """Clear the config cache and isolate config lookups per test."""
    from clipick.config import clear_config_cache

    monkeypatch.setenv("CLIPICK_CONFIG_DIR", str(tmp_path / "clipick-config"))
    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def make_state():
    """Build a SelectionState the way the composer does, with lines from top_line."""

    def _make(items=None, top_line=4, title="This is my title", single=True):
        if items is None:
            items = [f"Item {i}" for i in range(1, 26)]
        options = [Option(item, top_line + i) for i, item in enumerate(items)]
        return SelectionState(options, top_line, title, is_single_selection=single)

    return _make
