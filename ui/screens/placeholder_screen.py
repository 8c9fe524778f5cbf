import customtkinter as ctk

from models.screen import Screen
from ui.components.app_bar import AppBar


class PlaceholderScreen(ctk.CTkFrame):
    """Stand-in for dashboard features that are not built yet."""

    def __init__(self, master, screen: Screen, go_back, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        AppBar(self, title=screen.title, leading=("←", go_back)).grid(row=0, column=0, sticky="ew")
        ctk.CTkLabel(
            self, text=f"{screen.title} feature coming soon!",
            text_color="gray60", font=ctk.CTkFont(size=15),
        ).grid(row=1, column=0)
