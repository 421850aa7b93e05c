# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from src.config.logging_config import ROOT_LOGGER_NAME, setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._close_handlers()

    def tearDown(self) -> None:
        self._close_handlers()

    def _close_handlers(self) -> None:
        for handler in list(self.root_logger.handlers):
            handler.close()
            self.root_logger.removeHandler(handler)

    def _stream_handlers(self) -> list[logging.Handler]:
        return [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())
        self.assertEqual(log_path.parent.name, "logs")

    def test_log_file_naming_convention(self) -> None:
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^catalog_\d{8}_\d{6}\.log$")

    def test_file_handler_level_debug(self) -> None:
        setup_logging()
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_warning(self) -> None:
        setup_logging()
        self.assertEqual(self._stream_handlers()[0].level, logging.WARNING)

    def test_verbose_console_level_info(self) -> None:
        setup_logging(verbose=True)
        self.assertEqual(self._stream_handlers()[0].level, logging.INFO)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        count_before = len(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(len(self.root_logger.handlers), count_before)

    def test_child_loggers_propagate(self) -> None:
        setup_logging()
        child = logging.getLogger("catalog.resolver")
        self.assertTrue(child.propagate)
        self.assertEqual(self.root_logger.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
