"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None]:
    """Restore root logger handlers and level after each test.

    CLI invocations call ``configure_logging``, which replaces the root
    handlers with one bound to the runner's temporary stderr stream.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
