"""Shared pytest fixtures for all tests."""

from datetime import date

import pytest

from models.expense import Expense
from services.expense_service import ExpenseService
from services.navigation_service import NavigationController
from services.seed_data import SEED_EXPENSES
from utils import app_config


@pytest.fixture
def navigator():
    """A fresh controller starting on the login screen."""
    return NavigationController()


@pytest.fixture
def seed_expenses():
    return list(SEED_EXPENSES)


@pytest.fixture
def expense_service():
    return ExpenseService()


@pytest.fixture
def make_expense():
    """Factory for one-off expenses with sensible defaults."""
    counter = iter(range(1000, 2000))

    def _make(title="Item", amount=1000, category="Food", on=date(2024, 9, 1), description=""):
        return Expense(str(next(counter)), title, amount, category, on, description)

    return _make


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the config module at a temporary directory.

    Returns:
        Path: The temporary config file path.
    """
    config_dir = tmp_path / "pocket_expenses"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(app_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(app_config, "CONFIG_FILE", config_file)
    return config_file
