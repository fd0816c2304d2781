"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from etl_dialects.settings import reset_settings  # noqa: E402
from etl_dialects.xml_tree import XMLDocument, XMLElement  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, ignoring the caller's environment."""
    for key in list(os.environ):
        if key.startswith("ETL_DIALECTS_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def parse_element() -> Callable[..., XMLElement]:
    """Parse an XML snippet and return its root element."""

    def _parse(text: str, **options) -> XMLElement:
        return XMLDocument.from_string(text, **options).root

    return _parse


@pytest.fixture
def mixed_script_xml() -> str:
    """Two explicit dialects followed by untagged content."""
    return (
        "<script>"
        '<dialect name="mysql">A</dialect>'
        '<dialect name="pg">B</dialect>'
        "text-C"
        "</script>"
    )
