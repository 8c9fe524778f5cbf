"""Aggregation over expense records.

The module-level functions are pure: they never mutate their input and
always return new sequences. ``ExpenseService`` binds them to a fixed list.
"""
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from models.category import CategoryStyle
from models.expense import Expense
from services.seed_data import SEED_EXPENSES
from utils.constants import CATEGORY_STYLES, DEFAULT_CATEGORY_STYLE
from utils.date_helpers import as_date, as_datetime, window_start


def _normalize(category: str) -> str:
    return category.strip().lower()


def total(expenses: Iterable[Expense]) -> float:
    """Sum of amounts; 0 for no expenses."""
    return sum((e.amount for e in expenses), 0)


def classify(category: str) -> CategoryStyle:
    """Display style for a category, falling back to the default style."""
    return CATEGORY_STYLES.get(_normalize(category), DEFAULT_CATEGORY_STYLE)


def filter_by_category(expenses: Iterable[Expense], category: str) -> list[Expense]:
    wanted = _normalize(category)
    return [e for e in expenses if _normalize(e.category) == wanted]


def filter_recent(
    expenses: Iterable[Expense],
    reference: date | datetime,
    window: timedelta,
) -> list[Expense]:
    """Expenses dated after ``reference - window`` and not after ``reference``.

    An expense counts from midnight of its date, so sub-day windows cut
    between calendar days rather than being rounded to whole days.
    """
    end = as_date(reference)
    start = window_start(reference, window)
    return [e for e in expenses if start < as_datetime(e.date) and e.date <= end]


def map_titles(expenses: Iterable[Expense]) -> list[str]:
    return [e.title for e in expenses]


def category_totals(expenses: Iterable[Expense]) -> dict[str, float]:
    """Per-category sums in first-seen order, keyed by the first spelling seen."""
    labels: dict[str, str] = {}
    totals: dict[str, float] = {}
    for e in expenses:
        label = labels.setdefault(_normalize(e.category), e.category)
        totals[label] = totals.get(label, 0) + e.amount
    return totals


class ExpenseService:
    def __init__(self, expenses: Sequence[Expense] = SEED_EXPENSES):
        self._expenses = tuple(expenses)

    def get_all(self) -> list[Expense]:
        return list(self._expenses)

    def get_by_id(self, expense_id: str) -> Expense | None:
        return next((e for e in self._expenses if e.id == expense_id), None)

    def get_total(self) -> float:
        return total(self._expenses)

    def get_by_category(self, category: str) -> list[Expense]:
        return filter_by_category(self._expenses, category)

    def get_recent(self, reference: date | datetime, window: timedelta) -> list[Expense]:
        return filter_recent(self._expenses, reference, window)

    def get_titles(self) -> list[str]:
        return map_titles(self._expenses)

    def get_category_totals(self) -> dict[str, float]:
        return category_totals(self._expenses)

    def get_categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(self.get_category_totals())
