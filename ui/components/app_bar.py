import customtkinter as ctk

from utils.constants import PRIMARY_COLOR


class AppBar(ctk.CTkFrame):
    """Title bar with an optional leading button and trailing actions.

    ``actions`` is a list of (text, command) pairs rendered right to left.
    """

    def __init__(self, master, title: str, leading=None, actions=None, **kwargs):
        super().__init__(master, fg_color=PRIMARY_COLOR, corner_radius=0, height=52, **kwargs)
        self.grid_propagate(False)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        if leading:
            text, command = leading
            ctk.CTkButton(
                self, text=text, width=36, height=32,
                fg_color="transparent", hover_color="#1976D2",
                text_color="white", font=ctk.CTkFont(size=16),
                command=command,
            ).grid(row=0, column=0, padx=(8, 0))

        ctk.CTkLabel(
            self, text=title, text_color="white", anchor="w",
            font=ctk.CTkFont(size=18, weight="bold"),
        ).grid(row=0, column=1, padx=12, sticky="w")

        for col, (text, command) in enumerate(actions or [], start=2):
            ctk.CTkButton(
                self, text=text, width=36, height=32,
                fg_color="transparent", hover_color="#1976D2",
                text_color="white", font=ctk.CTkFont(size=16),
                command=command,
            ).grid(row=0, column=col, padx=(0, 8))
