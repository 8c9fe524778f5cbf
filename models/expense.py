from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Expense:
    id: str
    title: str
    amount: float           # non-negative, whole currency units
    category: str           # compared case-insensitively
    date: date
    description: str = ""

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Expense amount must be non-negative, got {self.amount}.")
