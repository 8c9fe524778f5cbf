import customtkinter as ctk

from models.expense import Expense
from services.expense_service import ExpenseService, classify, total
from ui.components.app_bar import AppBar
from ui.components.expense_details_dialog import ExpenseDetailsDialog
from utils.constants import COLOR_HEX, DANGER_COLOR, ICON_GLYPHS, PRIMARY_COLOR
from utils.currency import format_currency
from utils.date_helpers import format_display_date

ALL_CATEGORIES = "All"


class ExpenseListScreen(ctk.CTkFrame):
    def __init__(
        self,
        master,
        expense_service: ExpenseService,
        go_back,
        show_banner,
        currency_symbol: str,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = expense_service
        self._show_banner = show_banner
        self._symbol = currency_symbol
        self._category_var = ctk.StringVar(value=ALL_CATEGORIES)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        AppBar(
            self, title="Expenses",
            leading=("←", go_back),
            actions=[("+", self._on_add)],
        ).grid(row=0, column=0, sticky="ew")

        self._build_total_header()
        self._build_filter_bar()
        self._build_list()
        self._load()

    def _build_total_header(self):
        header = ctk.CTkFrame(self, fg_color=("#E3F2FD", "gray17"), corner_radius=0)
        header.grid(row=1, column=0, sticky="ew")
        header.grid_columnconfigure(0, weight=1)
        self._total_caption = ctk.CTkLabel(
            header, text="Total Expenses", text_color="gray50", font=ctk.CTkFont(size=16),
        )
        self._total_caption.grid(row=0, column=0, pady=(12, 0))
        self._total_label = ctk.CTkLabel(
            header, text="", text_color=PRIMARY_COLOR,
            font=ctk.CTkFont(size=24, weight="bold"),
        )
        self._total_label.grid(row=1, column=0, pady=(0, 12))

    def _build_filter_bar(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=2, column=0, sticky="ew", padx=16, pady=(8, 0))
        ctk.CTkLabel(bar, text="Category:").pack(side="left", padx=(0, 6))
        ctk.CTkComboBox(
            bar,
            values=[ALL_CATEGORIES] + self._svc.get_categories(),
            variable=self._category_var,
            width=170,
            state="readonly",
            command=lambda _v: self._load(),
        ).pack(side="left")

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=3, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _visible_expenses(self) -> list[Expense]:
        category = self._category_var.get()
        if category == ALL_CATEGORIES:
            return self._svc.get_all()
        return self._svc.get_by_category(category)

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        expenses = self._visible_expenses()
        caption = "Total Expenses"
        if self._category_var.get() != ALL_CATEGORIES:
            caption = f"Total {self._category_var.get()} Expenses"
        self._total_caption.configure(text=caption)
        self._total_label.configure(text=format_currency(total(expenses), self._symbol))

        if not expenses:
            ctk.CTkLabel(
                self._scroll, text="No expenses found.", text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        for idx, expense in enumerate(expenses):
            self._add_row(idx, expense)

    def _add_row(self, idx: int, expense: Expense):
        style = classify(expense.category)
        row = ctk.CTkFrame(self._scroll, fg_color=("gray90", "gray20"), corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", padx=4, pady=4)
        row.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            row, text=ICON_GLYPHS[style.icon_key], width=40, height=40, corner_radius=20,
            fg_color=COLOR_HEX[style.color_key], text_color="white",
            font=ctk.CTkFont(size=18),
        ).grid(row=0, column=0, rowspan=3, padx=(10, 8), pady=8)

        ctk.CTkLabel(
            row, text=expense.title, anchor="w", font=ctk.CTkFont(size=14, weight="bold"),
        ).grid(row=0, column=1, sticky="w", pady=(8, 0))
        ctk.CTkLabel(
            row, text=expense.category, anchor="w", text_color="gray55",
            font=ctk.CTkFont(size=12),
        ).grid(row=1, column=1, sticky="w")
        ctk.CTkLabel(
            row, text=format_display_date(expense.date), anchor="w", text_color="gray60",
            font=ctk.CTkFont(size=11),
        ).grid(row=2, column=1, sticky="w", pady=(0, 8))

        ctk.CTkLabel(
            row, text=format_currency(expense.amount, self._symbol), text_color=DANGER_COLOR,
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=2, rowspan=3, padx=(4, 12))

        def open_details(_event=None, e=expense):
            ExpenseDetailsDialog(self.winfo_toplevel(), e, self._symbol)

        for widget in (row, *row.winfo_children()):
            widget.bind("<Button-1>", open_details)

    def _on_add(self):
        self._show_banner("Add expense feature coming soon!")
