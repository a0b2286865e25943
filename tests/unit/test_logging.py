"""
Tests for hyprpreflight.preflight_logging.

Tests cover:
- Registered custom levels and logger methods
- apply_logging_options for --verbose, --debug and --stream-log-level
"""

import logging
from argparse import Namespace

import pytest

from hyprpreflight.preflight_logging import (
    RESULT,
    STATUS,
    VERBOSE,
    ColoredDebugFormatter,
    PreflightLogger,
    apply_logging_options,
    custom_levels,
    setup_logging,
)


@pytest.fixture
def preflight_logger():
    return setup_logging("hyprpreflight.test", stream_log_level="INFO")


class TestCustomLevels:
    """Tests for the extra log levels."""

    def test_registered_levels(self):
        """Should register exactly the levels the tool logs at."""
        assert custom_levels == {'RESULT': RESULT, 'STATUS': STATUS, 'VERBOSE': VERBOSE}
        for name, number in custom_levels.items():
            assert logging.getLevelName(number) == name

    def test_logger_methods(self):
        """Should expose one method per custom level and nothing below DEBUG."""
        for name in ('status', 'result', 'verbose'):
            assert callable(getattr(PreflightLogger, name))
        assert not hasattr(PreflightLogger, 'ridiculous')

    def test_status_respects_level(self, preflight_logger):
        """Should emit status records through the standard handlers."""
        records = []
        handler = logging.Handler(level=STATUS)
        handler.emit = records.append
        preflight_logger.addHandler(handler)

        preflight_logger.status("Running preflight checks...")
        preflight_logger.verbose("hidden")

        assert [r.levelname for r in records] == ['STATUS']
        assert records[0].getMessage() == "Running preflight checks..."


class TestApplyLoggingOptions:
    """Tests for apply_logging_options."""

    def test_verbose_lowers_stream_level(self, preflight_logger):
        """Should lower console output to VERBOSE."""
        apply_logging_options(preflight_logger, Namespace(verbose=True, debug=False, stream_log_level=None))
        assert preflight_logger.handlers[0].level == VERBOSE

    def test_debug_switches_formatter(self, preflight_logger):
        """Should use the debug formatter and DEBUG level."""
        apply_logging_options(preflight_logger, Namespace(verbose=False, debug=True, stream_log_level=None))
        handler = preflight_logger.handlers[0]
        assert handler.level == logging.DEBUG
        assert isinstance(handler.formatter, ColoredDebugFormatter)

    def test_explicit_stream_level(self, preflight_logger):
        """Should honour --stream-log-level over the defaults."""
        apply_logging_options(preflight_logger, Namespace(verbose=True, debug=False, stream_log_level="warning"))
        assert preflight_logger.handlers[0].level == logging.WARNING

    def test_no_args(self, preflight_logger):
        """Should leave handlers untouched without arguments."""
        apply_logging_options(preflight_logger, None)
        assert preflight_logger.handlers[0].level == logging.INFO
