import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from conkycal_core import logging_setup
from conkycal_core.logging_setup import JsonFormatter, configure_logging, get_logger, install_crash_hooks


def _reset_logger() -> None:
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class JsonFormatterTests(unittest.TestCase):
    def test_payload_fields(self):
        record = logging.LogRecord("conky_calendar", logging.INFO, __file__, 1, "rendered %s", ("2024-11",), None)
        record.event = "calendar_rendered"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "conky_calendar")
        self.assertEqual(payload["msg"], "rendered 2024-11")
        self.assertEqual(payload["event"], "calendar_rendered")
        self.assertNotIn("exc", payload)


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self):
        _reset_logger()
        self.addCleanup(_reset_logger)

    def test_file_handler_is_installed_once(self):
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(logging_setup, "_config_root", return_value=Path(tmp)):
                logger = configure_logging(level="DEBUG")
                again = configure_logging()
                self.assertIs(logger, again)
                self.assertEqual(len(logger.handlers), 1)
                self.assertEqual(logger.level, logging.DEBUG)

                logger.info("hello", extra={"event": "test"})
                logger.handlers[0].flush()
                lines = (Path(tmp) / "logs" / "conky-calendar.log").read_text(encoding="utf-8").splitlines()
                self.assertEqual(json.loads(lines[-1])["event"], "test")
                _reset_logger()


class CrashHookTests(unittest.TestCase):
    def test_uncaught_exception_is_logged_and_forwarded(self):
        original = sys.excepthook
        previous = mock.Mock()
        sys.excepthook = previous
        try:
            with mock.patch.object(logging_setup, "_install_fault_handler"), mock.patch.object(
                logging_setup, "_crash_hooks_installed", False
            ):
                install_crash_hooks()
            err = ValueError("invalid month: 13")
            with self.assertLogs("conky_calendar", level="CRITICAL") as logs:
                sys.excepthook(ValueError, err, None)
            self.assertIn("crash_id=", logs.output[0])
            previous.assert_called_once_with(ValueError, err, None)
        finally:
            sys.excepthook = original

    def test_second_install_is_a_no_op(self):
        original = sys.excepthook
        previous = mock.Mock()
        sys.excepthook = previous
        try:
            with mock.patch.object(logging_setup, "_install_fault_handler") as fault, mock.patch.object(
                logging_setup, "_crash_hooks_installed", False
            ):
                install_crash_hooks()
                hook = sys.excepthook
                install_crash_hooks()
                self.assertIs(sys.excepthook, hook)
                self.assertEqual(fault.call_count, 1)

            err = ValueError("invalid month: 0")
            with self.assertLogs("conky_calendar", level="CRITICAL") as logs:
                sys.excepthook(ValueError, err, None)
            self.assertEqual(len(logs.output), 1)
            previous.assert_called_once_with(ValueError, err, None)
        finally:
            sys.excepthook = original


class UnwritableConfigRootTests(unittest.TestCase):
    def setUp(self):
        _reset_logger()
        self.addCleanup(_reset_logger)

    def test_logging_degrades_without_log_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            not_a_dir = Path(tmp) / "home_is_a_file"
            not_a_dir.write_text("", encoding="utf-8")
            with mock.patch.object(logging_setup, "_config_root", return_value=not_a_dir):
                logger = configure_logging()
                self.assertEqual(len(logger.handlers), 1)
                self.assertIsInstance(logger.handlers[0], logging.NullHandler)
                logger.info("still fine", extra={"event": "test"})

    def test_fault_handler_skipped_without_log_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            not_a_dir = Path(tmp) / "home_is_a_file"
            not_a_dir.write_text("", encoding="utf-8")
            with mock.patch.object(logging_setup, "_config_root", return_value=not_a_dir), mock.patch.object(
                logging_setup.faulthandler, "enable"
            ) as enable:
                logging_setup._install_fault_handler(get_logger())
                enable.assert_not_called()


if __name__ == "__main__":
    unittest.main()
