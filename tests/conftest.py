"""Shared pytest fixtures for manroff tests."""

import pytest

from manroff import ManPage


@pytest.fixture
def empty_page() -> ManPage:
    """Fixture that provides a page with header fields and no sections."""
    return ManPage(
        title="mytool",
        section=1,
        footer="v1",
        current="2024",
        header="User Commands",
    )
