#!/usr/bin/env python3
"""
Tests for logging configuration.
"""

import logging
import os
import tempfile
import unittest
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from tqdm import tqdm

from doctranslate.logging_config import (
    SIMPLE_FORMAT,
    TqdmStreamHandler,
    get_logger,
    setup_logging,
)


class TestLoggingConfig(unittest.TestCase):
    """Test cases for logging configuration."""

    def setUp(self):
        logging.getLogger().handlers.clear()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        logging.getLogger().handlers.clear()
        self.temp_dir.cleanup()

    def test_setup_logging_basic(self):
        """Default setup installs a single progress-safe console handler at INFO."""
        with patch.dict(os.environ, {}, clear=True):
            setup_logging()

        root_logger = logging.getLogger()
        self.assertEqual(root_logger.level, logging.INFO)
        self.assertEqual(len(root_logger.handlers), 1)
        self.assertIsInstance(root_logger.handlers[0], TqdmStreamHandler)

    def test_log_level_from_environment(self):
        with patch.dict(os.environ, {"DOCTRANSLATE_LOG_LEVEL": "warning"}, clear=True):
            setup_logging()

        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_explicit_level_wins_over_environment(self):
        with patch.dict(os.environ, {"DOCTRANSLATE_LOG_LEVEL": "ERROR"}, clear=True):
            setup_logging(log_level="DEBUG")

        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    @patch('sys.stdout', new_callable=StringIO)
    def test_unknown_level_falls_back_to_info(self, mock_stdout):
        with patch.dict(os.environ, {"DOCTRANSLATE_LOG_LEVEL": "verbose"}, clear=True):
            setup_logging()

        self.assertEqual(logging.getLogger().level, logging.INFO)
        self.assertIn("WARNING: Unknown log level 'verbose', using INFO", mock_stdout.getvalue())

    def test_splitter_module_logs_through_get_logger(self):
        from doctranslate.chunk import splitters

        self.assertIs(splitters.logger, get_logger("doctranslate.chunk.splitters"))

    def test_setup_logging_verbose_formatting(self):
        """Verbose format includes timestamp and logger name."""
        setup_logging(log_level="INFO", verbose=True)

        formatter = logging.getLogger().handlers[0].formatter
        self.assertIn("%(asctime)s", formatter._fmt)
        self.assertIn("%(name)s", formatter._fmt)

    def test_setup_logging_normal_formatting(self):
        setup_logging(log_level="INFO", verbose=False)

        formatter = logging.getLogger().handlers[0].formatter
        self.assertEqual(formatter._fmt, SIMPLE_FORMAT)

    def test_setup_logging_with_file(self):
        """Messages are also written to the log file, creating parent directories."""
        log_file = self.temp_path / "nested" / "logs" / "doctranslate.log"

        setup_logging(log_level="INFO", log_file=log_file)

        self.assertEqual(len(logging.getLogger().handlers), 2)
        with patch("sys.stdout", new_callable=StringIO):
            get_logger("test").info("Translated chunk (en -> ta): 120 -> 140 chars")

        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        self.assertIn("Translated chunk (en -> ta)", content)

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("doctranslate.chunk.splitters")

        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logger.name, "doctranslate.chunk.splitters")
        self.assertIs(logger, get_logger("doctranslate.chunk.splitters"))

    @patch('sys.stdout', new_callable=StringIO)
    def test_logging_level_filtering(self, mock_stdout):
        setup_logging(log_level="WARNING")
        logger = get_logger("test")

        logger.info("Info message")
        logger.warning("Rate limit hit, waiting 2.0s")
        logger.error("Translation request failed")

        output = mock_stdout.getvalue()
        self.assertNotIn("Info message", output)
        self.assertIn("WARNING: Rate limit hit, waiting 2.0s", output)
        self.assertIn("ERROR: Translation request failed", output)

    def test_third_party_logger_suppression(self):
        setup_logging(log_level="DEBUG")

        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)

    def test_setup_logging_clears_existing_handlers(self):
        root_logger = logging.getLogger()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        setup_logging(log_level="INFO")

        self.assertEqual(len(root_logger.handlers), 1)
        self.assertNotIn(dummy_handler, root_logger.handlers)


class TestTqdmStreamHandler(unittest.TestCase):
    """Test cases for the progress-bar-aware console handler."""

    def test_emit_goes_through_tqdm_write(self):
        stream = StringIO()
        handler = TqdmStreamHandler(stream)
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "Chunking text", None, None)

        with patch.object(tqdm, "write", wraps=tqdm.write) as mock_write:
            handler.emit(record)

        mock_write.assert_called_once_with("INFO: Chunking text", file=stream)
        self.assertEqual(stream.getvalue(), "INFO: Chunking text\n")


class TestLoggingIntegration(unittest.TestCase):
    """Integration tests for logging in real usage scenarios."""

    def setUp(self):
        logging.getLogger().handlers.clear()

    def tearDown(self):
        logging.getLogger().handlers.clear()

    @patch('sys.stdout', new_callable=StringIO)
    def test_realistic_usage_pattern(self, mock_stdout):
        """Messages from CLI modules come out in the simple format."""
        setup_logging(log_level="INFO")
        logger = get_logger("doctranslate.cli.chunk")

        logger.info("Loading 1 input file(s)")
        logger.error("File not found: missing.txt")

        output = mock_stdout.getvalue()
        self.assertIn("INFO: Loading 1 input file(s)", output)
        self.assertIn("ERROR: File not found: missing.txt", output)

    def test_module_loggers_inherit_root_level(self):
        setup_logging(log_level="INFO")

        for name in ("doctranslate.cli.chunk", "doctranslate.translate.pipeline"):
            self.assertEqual(get_logger(name).level, logging.NOTSET)


if __name__ == "__main__":
    unittest.main(verbosity=2)
