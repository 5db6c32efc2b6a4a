"""
Pytest configuration for the pricing decoder.

Provides fixtures for:
- Raw JSON documents shared across decoder tests
- Settings cache isolation
- Root logger state restoration for logging tests
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from pricing_decoder.config import get_settings

BAR_DOCUMENT = """{
    "name": "bar",
    "pricing": [ {"price": 100, "at": 0}, {"price": 0, "at": 11} ],
    "at": 0
}"""

EMPTY_PRICING_DOCUMENT = """{
    "name": "foo",
    "pricing": [],
    "at": 1
}"""


@pytest.fixture
def bar_document() -> str:
    """Document with a two-entry pricing history."""
    return BAR_DOCUMENT


@pytest.fixture
def empty_pricing_document() -> str:
    return EMPTY_PRICING_DOCUMENT


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Drop the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging() -> Generator[logging.Logger, None, None]:
    """
    Restore root logger handlers and level after a test reconfigures logging.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
