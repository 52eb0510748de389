"""Tests for the jdcalendar logging helpers."""

import logging
import os
import unittest
from unittest.mock import patch

from jdcalendar.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    _get_log_level,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    """Test cases for logger configuration."""

    def setUp(self):
        logging.getLogger("jdcalendar").setLevel(logging.NOTSET)

    def tearDown(self):
        logging.getLogger("jdcalendar").setLevel(logging.NOTSET)

    def test_get_logger_configures_once(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("jdcalendar.tests.once")
        self.assertEqual(len(logger.handlers), 1)
        self.assertIs(get_logger("jdcalendar.tests.once"), logger)
        self.assertEqual(len(logger.handlers), 1)

    def test_log_level_from_environment(self):
        """Test the environment variable override."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "ERROR"}):
            self.assertEqual(_get_log_level(), logging.ERROR)
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "chatty"}):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)

    def test_new_logger_uses_environment(self):
        """Test that a fresh logger picks up the environment level."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "INFO"}):
            logger = get_logger("jdcalendar.tests.env")
        self.assertEqual(logger.level, logging.INFO)

    def test_set_log_level(self):
        """Test updating existing package loggers."""
        logger = get_logger("jdcalendar.tests.set_level")
        set_log_level(logging.ERROR)
        self.assertEqual(logging.getLogger("jdcalendar").level, logging.ERROR)
        self.assertEqual(logger.level, logging.ERROR)

        # New loggers follow the package logger
        self.assertEqual(get_logger("jdcalendar.tests.after").level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
