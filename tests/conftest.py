"""Shared fixtures for tagblocks tests."""

import os

import pytest


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def lb() -> str:
    """Platform line break used by the default format."""
    return os.linesep


@pytest.fixture
def settings_lines() -> list[str]:
    """A document holding several blocks, some without closing markers."""
    return [
        "<name>",
        "Project X",
        "</name>",
        "",
        "<flags>",
        "true",
        "false",
        "true",
        "</flags>",
        "",
        "<notes>",
        "first note",
        "second note",
        "",
        "<footer>",
        "end",
    ]
