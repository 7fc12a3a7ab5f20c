"""Shared pytest fixtures and configuration for the parseopts test suite.

Guidelines
----------
* Core tests must be pure: no files, no output.
* Config files are written under ``tmp_path`` only.
* Tests must not depend on ``sys.argv`` of the test runner; always pass
  ``args`` explicitly to ``ParseOptions.read``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` calls made by the code under test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing *text* to a config file under ``tmp_path``."""

    def _write(text: str, name: str = "test.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
