from datetime import date

from models.expense import Expense

SEED_EXPENSES: tuple[Expense, ...] = (
    Expense("1", "Grocery Shopping", 150000, "Food",           date(2024, 9, 15),
            "Weekly grocery shopping at supermarket"),
    Expense("2", "Gas Station",      50000,  "Transportation", date(2024, 9, 14),
            "Refuel motorcycle"),
    Expense("3", "Coffee Shop",      25000,  "Food",           date(2024, 9, 14),
            "Morning coffee with friends"),
    Expense("4", "Internet Bill",    300000, "Utilities",      date(2024, 9, 13),
            "Monthly internet subscription"),
    Expense("5", "Movie Tickets",    100000, "Entertainment",  date(2024, 9, 12),
            "Weekend movie with family"),
    Expense("6", "Book Purchase",    75000,  "Education",      date(2024, 9, 11),
            "Programming books for study"),
    Expense("7", "Lunch",            35000,  "Food",           date(2024, 9, 11),
            "Lunch at restaurant"),
    Expense("8", "Bus Fare",         10000,  "Transportation", date(2024, 9, 10),
            "Daily commute to office"),
)
