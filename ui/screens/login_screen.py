import customtkinter as ctk

from logger import get_logger
from models.screen import Screen
from services.auth_service import validate_login
from services.navigation_service import NavigationController
from ui.components.app_bar import AppBar
from utils.constants import DANGER_COLOR, ICON_GLYPHS, PRIMARY_COLOR

logger = get_logger()


class LoginScreen(ctk.CTkFrame):
    def __init__(self, master, navigator: NavigationController, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._nav = navigator

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        AppBar(self, title="Login").grid(row=0, column=0, sticky="ew")

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, sticky="nsew", padx=24)
        body.grid_columnconfigure(0, weight=1)
        body.grid_rowconfigure(0, weight=1)
        body.grid_rowconfigure(7, weight=1)

        ctk.CTkLabel(
            body, text=ICON_GLYPHS["person"], width=100, height=100,
            corner_radius=50, fg_color=PRIMARY_COLOR, text_color="white",
            font=ctk.CTkFont(size=44),
        ).grid(row=1, column=0, pady=(0, 32))

        self._username_entry = ctk.CTkEntry(body, placeholder_text="Username", height=40)
        self._username_entry.grid(row=2, column=0, sticky="ew", pady=(0, 16))

        self._password_entry = ctk.CTkEntry(
            body, placeholder_text="Password", show="•", height=40,
        )
        self._password_entry.grid(row=3, column=0, sticky="ew")
        self._password_entry.bind("<Return>", lambda _e: self._on_login())

        self._error_label = ctk.CTkLabel(body, text="", text_color=DANGER_COLOR)
        self._error_label.grid(row=4, column=0, pady=4)

        ctk.CTkButton(
            body, text="LOGIN", height=44, fg_color=PRIMARY_COLOR,
            font=ctk.CTkFont(size=16, weight="bold"),
            command=self._on_login,
        ).grid(row=5, column=0, sticky="ew", pady=(4, 16))

        link_row = ctk.CTkFrame(body, fg_color="transparent")
        link_row.grid(row=6, column=0)
        ctk.CTkLabel(link_row, text="Don't have an account? ").pack(side="left")
        ctk.CTkButton(
            link_row, text="Register", width=70,
            fg_color="transparent", text_color=PRIMARY_COLOR, hover=False,
            command=lambda: self._nav.push(Screen.REGISTER),
        ).pack(side="left")

    def _on_login(self):
        try:
            username = validate_login(self._username_entry.get(), self._password_entry.get())
        except ValueError as e:
            self._error_label.configure(text=str(e))
            return
        logger.info("User %s signed in", username)
        # Login is not reachable with Back once signed in
        self._nav.replace_top(Screen.HOME)
