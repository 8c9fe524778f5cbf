import customtkinter as ctk

from models.expense import Expense
from utils.currency import format_currency
from utils.date_helpers import format_display_date


class ExpenseDetailsDialog(ctk.CTkToplevel):
    """Read-only modal showing every field of one expense."""

    def __init__(self, master, expense: Expense, currency_symbol: str, **kwargs):
        super().__init__(master, **kwargs)
        self.title(expense.title)
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=expense.title, anchor="w",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, sticky="ew", padx=20, pady=(16, 8))

        lines = [
            f"Amount: {format_currency(expense.amount, currency_symbol)}",
            f"Category: {expense.category}",
            f"Date: {format_display_date(expense.date)}",
            f"Description: {expense.description}",
        ]
        for r, line in enumerate(lines, start=1):
            ctk.CTkLabel(
                self, text=line, anchor="w", justify="left", wraplength=320,
            ).grid(row=r, column=0, sticky="ew", padx=20, pady=4)

        ctk.CTkButton(
            self, text="Close", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).grid(row=len(lines) + 1, column=0, padx=20, pady=16, sticky="e")

        self.transient(master)
        self.grab_set()
        self._center()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_width(), self.winfo_height()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
