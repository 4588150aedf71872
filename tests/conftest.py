"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in stylesheet library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_stylesheet" / "stylesheets" / "library"


@pytest.fixture
def button_description() -> dict:
    """A class with a pseudo-selector and two variants, plus a plain class."""
    return {
        "button": {
            "color": "black",
            ":hover": {"color": "blue"},
            "@variants": {
                "primary": {"color": "white"},
                "plain": None,
            },
        },
        "icon": {"width": "16px"},
    }
