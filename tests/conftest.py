"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from fakes import RecordingSurface  # noqa: E402


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "runtime: dispatch loop and render task tests")
    config.addinivalue_line("markers", "tui: terminal surface and input tests")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        nodeid = item.nodeid.lower()
        if "dispatch" in nodeid or "render_task" in nodeid or "app" in nodeid:
            item.add_marker("runtime")
        if "surface" in nodeid or "key_input" in nodeid or "resize" in nodeid:
            item.add_marker("tui")


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
