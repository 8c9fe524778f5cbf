import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from logger import setup_logging
from models.screen import Screen
from services.expense_service import ExpenseService
from services.navigation_service import NavigationController
from ui.app_window import AppWindow
from utils.app_config import LOG_DIR, get_appearance_mode, get_currency_symbol, get_log_level
from utils.constants import APP_NAME


def main():
    # ── Logging ──────────────────────────────────────────────────────────────
    logger = setup_logging(get_log_level(), LOG_DIR)
    logger.info("Starting %s", APP_NAME)

    # ── Services ─────────────────────────────────────────────────────────────
    navigator = NavigationController(initial=Screen.LOGIN)
    expense_svc = ExpenseService()

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_appearance_mode())
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        navigator=navigator,
        expense_service=expense_svc,
        currency_symbol=get_currency_symbol(),
    )
    app.mainloop()
    logger.info("%s closed on %s", APP_NAME, navigator.current.name)


if __name__ == "__main__":
    main()
