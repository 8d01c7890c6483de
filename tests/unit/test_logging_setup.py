import json
import logging
import logging.handlers
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from mediapanel_core.config import AppConfig, DiagnosticsConfig, TintConfig
from mediapanel_core.logging_setup import configure_from_config, configure_logging, get_logger


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def _file_handlers(logger: logging.Logger) -> list[logging.handlers.TimedRotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.handlers.TimedRotatingFileHandler)]


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self.tmp.name)
        self.addCleanup(self.tmp.cleanup)
        self.addCleanup(self._reset)

    def _reset(self):
        logger = get_logger()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_loaded_settings_replace_quiet_cli_defaults(self):
        configure_logging(console=False, directory=self.directory)
        cfg = AppConfig(diagnostics=DiagnosticsConfig(keep_log_files=3, console_logging=True))
        logger = configure_from_config(cfg, directory=self.directory)

        self.assertEqual(len(_console_handlers(logger)), 1)
        files = _file_handlers(logger)
        self.assertEqual(len(files), 1)
        self.assertEqual(files[0].backupCount, 3)
        self.assertEqual(logger.level, logging.INFO)

    def test_console_can_be_turned_off_again(self):
        configure_logging(console=True, directory=self.directory)
        cfg = AppConfig(diagnostics=DiagnosticsConfig(console_logging=False))
        logger = configure_from_config(cfg, directory=self.directory)
        self.assertEqual(_console_handlers(logger), [])
        self.assertEqual(len(_file_handlers(logger)), 1)

    def test_debug_setting_lowers_level(self):
        logger = configure_from_config(AppConfig(tint=TintConfig(enable_debug=True)), directory=self.directory)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_file_records_are_json_lines(self):
        configure_logging(console=False, directory=self.directory)
        get_logger("icon").warning("art failed", extra={"event": "art_load_error"})
        for handler in get_logger().handlers:
            handler.flush()

        lines = (self.directory / "mediapanel.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        self.assertEqual(record["logger"], "mediapanel.icon")
        self.assertEqual(record["event"], "art_load_error")
        self.assertEqual(record["level"], "WARNING")


if __name__ == "__main__":
    unittest.main()
