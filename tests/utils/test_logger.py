"""
Tests for logging utilities.

This module tests logging setup for the different verbosity levels.
"""

import logging
from unittest.mock import patch

import pytest

from nexus_staging.utils import setup_logging


class TestLoggingUtilities:
    """Test logging utility functions."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_setup_logging_levels(self, verbosity, level):
        """Test the level chosen for each verbosity."""
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging(verbosity=verbosity)

        mock_basic_config.assert_called_once()
        assert mock_basic_config.call_args.kwargs["level"] == level

    def test_http_loggers_quiet_by_default(self):
        """Test that httpx request logs are hidden below -ddd."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=2)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_loggers_enabled(self):
        """Test that -ddd turns on httpx request logs."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=3)

        assert logging.getLogger("httpx").level == logging.DEBUG
        assert logging.getLogger("httpcore").level == logging.DEBUG

        logging.getLogger("httpx").setLevel(logging.NOTSET)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)
