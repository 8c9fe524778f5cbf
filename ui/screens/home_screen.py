import customtkinter as ctk

from logger import get_logger
from models.screen import Screen
from services.navigation_service import NavigationController
from ui.components.app_bar import AppBar
from utils.constants import COLOR_HEX, DASHBOARD_CARDS, ICON_GLYPHS, PRIMARY_COLOR

logger = get_logger()


class HomeScreen(ctk.CTkFrame):
    def __init__(self, master, navigator: NavigationController, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._nav = navigator
        self._drawer = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        AppBar(
            self, title="Home",
            leading=("☰", self._toggle_drawer),
            actions=[(ICON_GLYPHS["logout"], self._logout)],
        ).grid(row=0, column=0, sticky="ew")

        self._build_dashboard()

    def _build_dashboard(self):
        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, sticky="nsew", padx=16, pady=16)
        body.grid_columnconfigure((0, 1), weight=1, uniform="card")

        ctk.CTkLabel(
            body, text="Dashboard", anchor="w", text_color=PRIMARY_COLOR,
            font=ctk.CTkFont(size=24, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, sticky="w", pady=(0, 20))

        for idx, (title, icon_key, color_key, screen) in enumerate(DASHBOARD_CARDS):
            body.grid_rowconfigure(1 + idx // 2, weight=1, uniform="card")
            self._make_card(body, 1 + idx // 2, idx % 2, title, icon_key, color_key, screen)

    def _make_card(self, parent, row, col, title, icon_key, color_key, screen):
        card = ctk.CTkButton(
            parent,
            text=f"{ICON_GLYPHS[icon_key]}\n\n{title}",
            fg_color=("gray90", "gray20"), hover_color=("gray80", "gray28"),
            text_color=COLOR_HEX[color_key], corner_radius=10,
            font=ctk.CTkFont(size=16, weight="bold"),
            command=lambda s=screen: self._nav.push(s),
        )
        card.grid(row=row, column=col, sticky="nsew", padx=8, pady=8)

    # ── Drawer ───────────────────────────────────────────────────────────────
    def _toggle_drawer(self):
        if self._drawer is not None:
            self._close_drawer()
            return
        drawer = ctk.CTkFrame(self, width=240, corner_radius=0, fg_color=("gray95", "gray12"))
        drawer.place(x=0, y=52, relheight=1.0)
        drawer.pack_propagate(False)

        header = ctk.CTkFrame(drawer, fg_color=PRIMARY_COLOR, corner_radius=0)
        header.pack(fill="x")
        ctk.CTkLabel(
            header, text=ICON_GLYPHS["person"], width=60, height=60, corner_radius=30,
            fg_color="white", text_color=PRIMARY_COLOR, font=ctk.CTkFont(size=28),
        ).pack(anchor="w", padx=16, pady=(16, 10))
        ctk.CTkLabel(
            header, text="Welcome User!", text_color="white",
            font=ctk.CTkFont(size=18, weight="bold"),
        ).pack(anchor="w", padx=16, pady=(0, 16))

        items = [
            (ICON_GLYPHS["home"], "Home", self._close_drawer),
            (ICON_GLYPHS["person"], "Profile", lambda: self._open_from_drawer(Screen.PROFILE)),
            (ICON_GLYPHS["settings"], "Settings", lambda: self._open_from_drawer(Screen.SETTINGS)),
            None,
            (ICON_GLYPHS["logout"], "Logout", self._logout),
        ]
        for item in items:
            if item is None:
                ctk.CTkFrame(drawer, height=1, fg_color="gray60").pack(fill="x", pady=4)
                continue
            glyph, text, command = item
            ctk.CTkButton(
                drawer, text=f"{glyph}   {text}", anchor="w",
                fg_color="transparent", hover_color=("gray85", "gray25"),
                text_color=("gray10", "gray90"), command=command,
            ).pack(fill="x", padx=8, pady=2)

        self._drawer = drawer

    def _close_drawer(self):
        if self._drawer is not None:
            self._drawer.destroy()
            self._drawer = None

    def _open_from_drawer(self, screen: Screen):
        self._close_drawer()
        self._nav.push(screen)

    def _logout(self):
        logger.info("Logging out")
        self._nav.reset_to(Screen.LOGIN)
