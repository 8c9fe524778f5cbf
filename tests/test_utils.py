import json
import logging
from datetime import date, datetime, timedelta

import pytest

from logger import get_logger, setup_logging
from utils import app_config
from utils.currency import format_currency
from utils.date_helpers import as_date, as_datetime, format_display_date, window_start


class TestFormatting:
    """Tests for currency and date display helpers."""

    def test_format_currency_default_symbol(self):
        assert format_currency(150000) == "Rp 150000"

    def test_format_currency_rounds_to_whole_units(self):
        assert format_currency(999.6, symbol="$") == "$1000"

    def test_format_display_date_unpadded(self):
        assert format_display_date(date(2024, 9, 5)) == "5/9/2024"
        assert format_display_date(date(2024, 12, 15)) == "15/12/2024"

    def test_as_date(self):
        assert as_date(datetime(2024, 9, 15, 23, 59)) == date(2024, 9, 15)
        assert as_date(date(2024, 9, 15)) == date(2024, 9, 15)

    def test_as_datetime(self):
        assert as_datetime(date(2024, 9, 15)) == datetime(2024, 9, 15, 0, 0)
        assert as_datetime(datetime(2024, 9, 15, 8, 30)) == datetime(2024, 9, 15, 8, 30)

    def test_window_start(self):
        assert window_start(date(2024, 9, 15), timedelta(days=7)) == datetime(2024, 9, 8)

    def test_window_start_keeps_hours(self):
        assert window_start(date(2024, 9, 15), timedelta(hours=20)) == datetime(2024, 9, 14, 4, 0)


class TestAppConfig:
    """Tests for the JSON config file."""

    def test_missing_file_gives_defaults(self, config_home):
        assert app_config.load_config() == {}
        assert app_config.get_appearance_mode() == "system"
        assert app_config.get_log_level() == "INFO"
        assert app_config.get_currency_symbol() == "Rp "

    def test_corrupt_file_gives_defaults(self, config_home, caplog):
        config_home.parent.mkdir(parents=True)
        config_home.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="pocket_expenses"):
            assert app_config.load_config() == {}
        assert "Ignoring unreadable config" in caplog.text

    def test_non_object_file_gives_defaults(self, config_home):
        config_home.parent.mkdir(parents=True)
        config_home.write_text("[1, 2]", encoding="utf-8")

        assert app_config.load_config() == {}

    def test_save_and_reload(self, config_home):
        app_config.save_config({"log_level": "debug", "currency_symbol": "$"})

        assert json.loads(config_home.read_text(encoding="utf-8"))["currency_symbol"] == "$"
        assert app_config.get_log_level() == "DEBUG"
        assert app_config.get_currency_symbol() == "$"
        assert not config_home.with_suffix(".tmp").exists()

    def test_unknown_log_level_falls_back(self, config_home):
        app_config.save_config({"log_level": "chatty"})

        assert app_config.get_log_level() == "INFO"

    def test_set_appearance_mode(self, config_home):
        app_config.save_config({"currency_symbol": "$"})

        app_config.set_appearance_mode("dark")

        assert app_config.get_appearance_mode() == "dark"
        assert app_config.get_currency_symbol() == "$"

    def test_set_invalid_appearance_mode(self, config_home):
        with pytest.raises(ValueError):
            app_config.set_appearance_mode("neon")

    def test_invalid_stored_appearance_mode(self, config_home):
        app_config.save_config({"appearance_mode": "neon"})

        assert app_config.get_appearance_mode() == "system"


class TestLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        yield
        logger = get_logger()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_file_and_console_handlers(self, tmp_path):
        logger = setup_logging("DEBUG", tmp_path / "logs")

        assert logger is get_logger()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        log_file = tmp_path / "logs" / f"pocket-expenses-{date.today().isoformat()}.log"
        logger.info("hello")
        logger.handlers[0].flush()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_console_only_without_log_dir(self):
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        setup_logging("INFO", tmp_path)
        logger = setup_logging("INFO", tmp_path)

        assert len(logger.handlers) == 2
