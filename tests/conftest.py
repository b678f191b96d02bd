"""Pytest configuration and fixtures for test suite.

Provides:
- Python path setup (so we can import from scripts/)
- Fixtures for pre-rendered product pages
- Fake remote price client
"""
import sys
from pathlib import Path

import pytest

# Add scripts/ to Python path so we can import prerender and config
scripts_dir = Path(__file__).parent.parent / "scripts"
if str(scripts_dir) not in sys.path:
    sys.path.insert(0, str(scripts_dir))

from helpers import FakeGraphQLClient, build_page  # noqa: E402
from prerender.document import Document  # noqa: E402


@pytest.fixture
def page_builder():
    """Return a callable that builds a Document from build_page kwargs."""

    def _build(**kwargs) -> Document:
        return Document.from_html(build_page(**kwargs))

    return _build


@pytest.fixture
def product_page(page_builder) -> Document:
    """Default product page: name, images, description, price and options."""
    return page_builder()


@pytest.fixture
def fake_client_factory():
    return FakeGraphQLClient
