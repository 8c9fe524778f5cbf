"""User preferences for Pocket Expenses.

Config lives in ~/.pocket_expenses/config.json and is read once at startup,
before logging is configured from it.
"""
import json
import os
from pathlib import Path

from logger import get_logger
from utils.constants import CURRENCY_SYMBOL

CONFIG_DIR = Path.home() / ".pocket_expenses"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_DIR = CONFIG_DIR / "logs"

APPEARANCE_MODES = ("system", "light", "dark")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = get_logger()


def load_config() -> dict:
    """Returns {} on a missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
        return {}
    if not isinstance(config, dict):
        logger.warning("Ignoring config %s: expected a JSON object", CONFIG_FILE)
        return {}
    return config


def save_config(config: dict) -> None:
    """Creates the config dir if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_appearance_mode() -> str:
    mode = load_config().get("appearance_mode", "system")
    return mode if mode in APPEARANCE_MODES else "system"


def set_appearance_mode(mode: str) -> None:
    if mode not in APPEARANCE_MODES:
        raise ValueError(f"Invalid appearance mode: {mode}")
    config = load_config()
    config["appearance_mode"] = mode
    save_config(config)


def get_log_level() -> str:
    level = str(load_config().get("log_level", "INFO")).upper()
    return level if level in LOG_LEVELS else "INFO"


def get_currency_symbol() -> str:
    return load_config().get("currency_symbol", CURRENCY_SYMBOL)
