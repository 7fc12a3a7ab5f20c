"""Tests for ``--verbose`` → logging configuration (utils/log_setup.py)."""

from __future__ import annotations

import logging
import sys

import pytest

from parseopts.utils.log_setup import configure_logging, level_for_verbosity


class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose,level",
        [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (9, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        assert level_for_verbosity(verbose) == level


class TestConfigureLogging:
    def test_sets_level_on_given_logger(self) -> None:
        logger = logging.getLogger("parseopts.test.level")
        configure_logging(2, logger)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_calls_replace_handler(self) -> None:
        logger = logging.getLogger("parseopts.test.repeat")
        configure_logging(0, logger)
        configure_logging(1, logger)
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_uses_rich_handler_when_available(self) -> None:
        from rich.logging import RichHandler

        logger = logging.getLogger("parseopts.test.rich")
        configure_logging(0, logger)
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_handler_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "rich.logging", None)
        logger = logging.getLogger("parseopts.test.plain")
        configure_logging(0, logger)
        handler = logger.handlers[0]
        assert type(handler) is logging.StreamHandler

    def test_defaults_to_root(self) -> None:
        assert configure_logging(0) is logging.getLogger()
