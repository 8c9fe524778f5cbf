import customtkinter as ctk

from logger import get_logger
from services.auth_service import validate_registration
from services.navigation_service import NavigationController
from ui.components.app_bar import AppBar
from utils.constants import DANGER_COLOR, PRIMARY_COLOR

logger = get_logger()


class RegisterScreen(ctk.CTkFrame):
    def __init__(self, master, navigator: NavigationController, show_banner, go_back, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._nav = navigator
        self._show_banner = show_banner

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        AppBar(self, title="Register", leading=("←", go_back)).grid(row=0, column=0, sticky="ew")

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, sticky="nsew", padx=24, pady=24)
        body.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            body, text="Create an account", anchor="w",
            font=ctk.CTkFont(size=20, weight="bold"), text_color=PRIMARY_COLOR,
        ).grid(row=0, column=0, sticky="w", pady=(0, 20))

        self._entries = {}
        fields = [
            ("username", "Username", None),
            ("email", "Email", None),
            ("password", "Password", "•"),
            ("confirm", "Confirm password", "•"),
        ]
        for r, (key, placeholder, show) in enumerate(fields, start=1):
            entry = ctk.CTkEntry(body, placeholder_text=placeholder, show=show or "", height=40)
            self._entries[key] = entry
            entry.grid(row=r, column=0, sticky="ew", pady=(0, 12))

        self._error_label = ctk.CTkLabel(body, text="", text_color=DANGER_COLOR, wraplength=380)
        self._error_label.grid(row=len(fields) + 1, column=0, pady=4)

        ctk.CTkButton(
            body, text="REGISTER", height=44, fg_color=PRIMARY_COLOR,
            font=ctk.CTkFont(size=16, weight="bold"),
            command=self._on_register,
        ).grid(row=len(fields) + 2, column=0, sticky="ew", pady=(4, 0))

    def _on_register(self):
        try:
            username = validate_registration(
                self._entries["username"].get(),
                self._entries["email"].get(),
                self._entries["password"].get(),
                self._entries["confirm"].get(),
            )
        except ValueError as e:
            self._error_label.configure(text=str(e))
            return
        logger.info("Registered %s", username)
        self._nav.pop()
        self._show_banner(f"Account '{username}' created. Please log in.")
